"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2) y la
  taxonomía de errores.
- El dominio no conoce httpx ni la CLI: solo palabras, secciones y resultados.
"""
