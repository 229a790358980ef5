# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos comunes utilizados por la capa criptográfica.
# --------------------------------------------------------------
"""Modelos Pydantic y enumeraciones que describen claves y payloads sellados."""

from enum import IntEnum

from pydantic import BaseModel, ConfigDict


class KeySize(IntEnum):
    """Tamaños de clave AES admitidos, expresados en bytes."""

    AES128 = 16
    AES192 = 24
    AES256 = 32

    @property
    def bits(self) -> int:
        return self.value * 8


class SealedParts(BaseModel):
    """Representa las tres partes de un payload sellado con AES-GCM.

    Attributes:
        nonce (bytes): Nonce aleatorio antepuesto al payload.
        ciphertext (bytes): Datos cifrados sin etiqueta.
        tag (bytes): Etiqueta de autenticación generada por AES-GCM.

    """

    model_config = ConfigDict(frozen=True)

    nonce: bytes
    ciphertext: bytes
    tag: bytes

    def to_bytes(self) -> bytes:
        """Reconstruye el formato de transporte `nonce ‖ ciphertext ‖ tag`."""

        return self.nonce + self.ciphertext + self.tag
