"""Contratos (Protocol) del Core.

Por qué:
- La CLI y otros consumidores dependen de `TransactionInfoSource`, no del
  cliente HTTP concreto.
"""
