# --------------------------------------------------------------
# File: errors.py
# Description: Jerarquía de excepciones del envoltorio AES-GCM.
# --------------------------------------------------------------
"""Excepciones públicas lanzadas por las operaciones de sellado y apertura."""

__all__ = [
    "AuthenticationFailure",
    "ConstructionFailure",
    "GencryptError",
    "InvalidKeySize",
    "KeyNotConfigured",
    "MalformedInput",
    "RandomSourceError",
]


class GencryptError(Exception):
    """Raíz común de todos los errores del paquete."""


class InvalidKeySize(GencryptError, ValueError):
    """La clave no mide 16, 24 ni 32 bytes."""


class ConstructionFailure(GencryptError):
    """El cifrador o el modo rechazaron la clave por otro motivo."""


class RandomSourceError(GencryptError):
    """La fuente aleatoria del sistema no pudo generar el nonce."""


class MalformedInput(GencryptError, ValueError):
    """El payload sellado o su representación textual no son válidos."""


class AuthenticationFailure(GencryptError):
    """La etiqueta de autenticación no verifica."""


class KeyNotConfigured(GencryptError, LookupError):
    """No hay ninguna clave definida en el entorno."""
