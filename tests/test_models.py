from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from core.domain.models import (
    Tag,
    TransactionConfirmedData,
    TransactionData,
    TransactionStatusResponse,
)


def test_transaction_decodes_every_field(tx_payload):
    tx = TransactionData.model_validate_json(json.dumps(tx_payload))

    assert tx.format == 2
    assert tx.id == "arweave_tx_id"
    assert tx.last_tx == "last_tx"
    assert tx.owner == "owner"
    assert tx.target == "target"
    assert tx.quantity == "quantity"
    assert tx.reward == "reward"
    assert tx.signature == "signature"
    assert tx.data_size == "data_size"
    assert tx.data_root == "data_root"
    assert tx.data == b"hello\x00\xff"


def test_tags_keep_order_and_duplicates(tx_payload):
    tx = TransactionData.model_validate(tx_payload)

    assert tx.tags == (
        Tag(name="Content-Type", value="text/plain"),
        Tag(name="App", value="first"),
        Tag(name="App", value="second"),
    )


def test_data_accepts_base64url_with_and_without_padding(tx_payload):
    unpadded = TransactionData.model_validate({**tx_payload, "data": "aGVsbG8"})
    padded = TransactionData.model_validate({**tx_payload, "data": "aGVsbG8="})
    urlsafe = TransactionData.model_validate({**tx_payload, "data": "-_8"})

    assert unpadded.data == b"hello"
    assert padded.data == b"hello"
    assert urlsafe.data == b"\xfb\xff"


def test_empty_data_string_is_empty_bytes(tx_payload):
    tx = TransactionData.model_validate({**tx_payload, "data": ""})

    assert tx.data == b""


@pytest.mark.parametrize("bad", [[1, "x"], [256], [-1], [True], "***"])
def test_invalid_data_is_rejected(tx_payload, bad):
    with pytest.raises(ValidationError):
        TransactionData.model_validate({**tx_payload, "data": bad})


def test_missing_field_is_rejected(tx_payload):
    del tx_payload["signature"]

    with pytest.raises(ValidationError):
        TransactionData.model_validate(tx_payload)


def test_unknown_keys_are_ignored(tx_payload):
    tx = TransactionData.model_validate({**tx_payload, "data_tree": [], "extra": 1})

    assert tx.id == "arweave_tx_id"


def test_encode_uses_wire_field_names(tx_payload):
    tx = TransactionData.model_validate(tx_payload)

    encoded = json.loads(tx.model_dump_json())

    assert list(encoded) == list(tx_payload)
    assert encoded["data"] == "aGVsbG8A_w"
    assert encoded["tags"][2] == {"name": "App", "value": "second"}


def test_decode_encode_decode_is_idempotent(tx_payload):
    first = TransactionData.model_validate_json(json.dumps(tx_payload))
    second = TransactionData.model_validate_json(first.model_dump_json())

    assert second == first
    assert second.data == first.data
    assert second.tags == first.tags


def test_models_are_frozen(tx_payload):
    tx = TransactionData.model_validate(tx_payload)

    with pytest.raises(ValidationError):
        tx.id = "other"


def test_status_with_and_without_confirmation():
    pending = TransactionStatusResponse.model_validate_json('{"status": 202}')
    confirmed = TransactionStatusResponse.model_validate_json(
        '{"status": 200, "confirmed": {"block_indep_hash": "h", "block_height": 5, '
        '"number_of_confirmations": 3}}'
    )

    assert pending.confirmed is None
    assert confirmed.confirmed == TransactionConfirmedData(
        block_indep_hash="h", block_height=5, number_of_confirmations=3
    )
