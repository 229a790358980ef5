# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública del envoltorio AES-GCM del paquete gencrypt.
# --------------------------------------------------------------
"""Sellado y apertura de payloads con AES-GCM y nonce aleatorio antepuesto."""

from gencrypt.crypto_sym import (
    NONCE_SIZE,
    TAG_SIZE,
    Galois,
    new_gcm,
    open_with_key,
    seal_with_key,
    split_sealed,
)
from gencrypt.errors import (
    AuthenticationFailure,
    ConstructionFailure,
    GencryptError,
    InvalidKeySize,
    KeyNotConfigured,
    MalformedInput,
    RandomSourceError,
)
from gencrypt.keys import generate_key, validate_key
from gencrypt.models import KeySize, SealedParts

__all__ = [
    "NONCE_SIZE",
    "TAG_SIZE",
    "AuthenticationFailure",
    "ConstructionFailure",
    "Galois",
    "GencryptError",
    "InvalidKeySize",
    "KeyNotConfigured",
    "KeySize",
    "MalformedInput",
    "RandomSourceError",
    "SealedParts",
    "generate_key",
    "new_gcm",
    "open_with_key",
    "seal_with_key",
    "split_sealed",
    "validate_key",
]
