"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras e inmutables (Pydantic v2), el
  envelope de respuesta y la taxonomía de errores.
- El dominio no conoce HTTP ni CLI: solo conceptos del protocolo.
"""
