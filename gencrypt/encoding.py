# --------------------------------------------------------------
# File: encoding.py
# Description: Transporte textual de claves y payloads en Base64 URL-safe.
# --------------------------------------------------------------
"""Codificación Base64 URL-safe sin relleno para claves y payloads sellados."""

from __future__ import annotations

import base64
import binascii

from gencrypt.crypto_sym import Galois
from gencrypt.errors import MalformedInput

__all__ = ["b64u_decode", "b64u_encode", "open_text", "seal_text"]


def b64u_encode(data: bytes) -> str:
    """Codifica datos binarios en Base64 URL-safe sin relleno."""

    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def b64u_decode(value: str) -> bytes:
    """Decodifica Base64 URL-safe gestionando el relleno.

    Raises:
        MalformedInput: Si el texto no es Base64 URL-safe válido.

    """

    pad = "=" * (-len(value) % 4)
    try:
        return base64.b64decode((value + pad).encode("ascii"), altchars=b"-_", validate=True)
    except (binascii.Error, UnicodeEncodeError) as exc:
        raise MalformedInput(f"Texto Base64 no válido: {exc}") from exc


def seal_text(handle: Galois, text: str) -> str:
    """Sella un texto UTF-8 y devuelve el payload como token Base64."""

    return b64u_encode(handle.seal(text.encode("utf-8")))


def open_text(handle: Galois, token: str) -> str:
    """Abre un token producido por `seal_text` y devuelve el texto original."""

    return handle.open(b64u_decode(token)).decode("utf-8")
