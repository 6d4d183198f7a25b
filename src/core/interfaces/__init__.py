"""Interfaces/abstracciones del Core.

Por qué:
- Define el contrato (Protocol) de la fuente de diccionario.
- El pipeline depende de la abstracción, no del adaptador HTTP.
"""
