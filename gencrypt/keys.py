# --------------------------------------------------------------
# File: keys.py
# Description: Validación y generación de claves simétricas AES.
# --------------------------------------------------------------
"""Utilidades para comprobar el tamaño de una clave y generar claves nuevas."""

from __future__ import annotations

from typing import Union

from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from gencrypt.errors import ConstructionFailure, InvalidKeySize
from gencrypt.models import KeySize

__all__ = ["generate_key", "validate_key"]

BytesLike = Union[bytes, bytearray, memoryview]


def validate_key(key: BytesLike) -> KeySize:
    """Comprueba que la clave tenga un tamaño AES admitido.

    Args:
        key (BytesLike): Clave simétrica en bruto.

    Returns:
        KeySize: Tamaño de la clave, que fija AES-128, AES-192 o AES-256.

    Raises:
        ConstructionFailure: Si la clave no es un objeto de bytes.
        InvalidKeySize: Si la longitud no es 16, 24 ni 32 bytes.

    """

    if not isinstance(key, (bytes, bytearray, memoryview)):
        raise ConstructionFailure(
            f"La clave debe ser bytes, no {type(key).__name__}."
        )
    length = memoryview(key).nbytes
    try:
        return KeySize(length)
    except ValueError:
        raise InvalidKeySize(
            f"Tamaño de clave no admitido: {length} bytes (se esperan 16, 24 o 32)."
        ) from None


def generate_key(size: KeySize | int = KeySize.AES256) -> bytes:
    """Genera una clave aleatoria con la fuente segura del sistema.

    Args:
        size (KeySize | int): Tamaño en bytes de la clave deseada.

    Returns:
        bytes: Clave lista para `new_gcm`.

    """

    try:
        key_size = KeySize(size)
    except ValueError:
        raise InvalidKeySize(f"Tamaño de clave no admitido: {size} bytes.") from None
    return AESGCM.generate_key(bit_length=key_size.bits)
