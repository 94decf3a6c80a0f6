"""Interfaces/abstracciones del Core.

Contratos (Protocol) que implementan los adaptadores de XSUAA y Work Zone;
el pipeline de `core.services` depende solo de estos contratos.
"""
