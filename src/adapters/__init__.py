"""Adaptadores de I/O: fichero de configuración, XSUAA y Work Zone."""
