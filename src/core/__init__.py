"""Core de wztools: configuración, dominio, contratos y servicios."""
