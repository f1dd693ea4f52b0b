"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos (Pydantic v2), el `Result` y los
  descriptores de endpoints.
- El dominio no conoce httpx, CLI ni logging: solo conceptos del problema.
"""
