"""Modelos y entidades del dominio.

Aquí viven las estructuras de datos puras (Pydantic v2): la configuración,
la respuesta de token y la petición de invalidación. El dominio no conoce
HTTP, CLI ni el sistema de ficheros.
"""
