# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Envoltorio AES-GCM para sellar y abrir payloads con nonce antepuesto.
# --------------------------------------------------------------
"""Cifrado autenticado con AES-GCM ligado a una única clave simétrica.

El formato de transporte es `nonce ‖ ciphertext ‖ tag`: el nonce aleatorio de
12 bytes va delante y AES-GCM añade la etiqueta de 16 bytes al final. El
payload no lleva cabecera ni identificador de algoritmo; emisor y receptor
acuerdan clave y modo por otro canal.
"""

from __future__ import annotations

import os
from typing import Optional

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from gencrypt.errors import (
    AuthenticationFailure,
    ConstructionFailure,
    MalformedInput,
    RandomSourceError,
)
from gencrypt.keys import BytesLike, validate_key
from gencrypt.models import KeySize, SealedParts

__all__ = [
    "NONCE_SIZE",
    "TAG_SIZE",
    "Galois",
    "new_gcm",
    "open_with_key",
    "seal_with_key",
    "split_sealed",
]

# Parámetros fijos del modo GCM estándar.
NONCE_SIZE = 12
TAG_SIZE = 16


class Galois:
    """Manejador AES-GCM que sella y abre payloads con una clave fija.

    La instancia no guarda estado mutable entre llamadas y puede compartirse
    entre hilos.
    """

    __slots__ = ("_aead", "_key_size")

    def __init__(self, key: BytesLike) -> None:
        """Construye el cifrador AES y lo envuelve en modo GCM.

        Args:
            key (BytesLike): Clave de 16, 24 o 32 bytes (AES-128/192/256).

        Raises:
            InvalidKeySize: Si la longitud de la clave no es admitida.
            ConstructionFailure: Si la primitiva rechaza la clave por otro motivo.

        """

        self._key_size = validate_key(key)
        try:
            self._aead = AESGCM(bytes(key))
        except (TypeError, ValueError) as exc:
            raise ConstructionFailure(f"No se pudo construir AES-GCM: {exc}") from exc

    def __repr__(self) -> str:
        return f"Galois(AES-{self._key_size.bits}-GCM)"

    @property
    def key_size(self) -> KeySize:
        return self._key_size

    @property
    def nonce_size(self) -> int:
        return NONCE_SIZE

    @property
    def overhead(self) -> int:
        return TAG_SIZE

    def seal(self, plaintext: bytes, *, aad: Optional[bytes] = None) -> bytes:
        """Cifra y autentica `plaintext` con un nonce nuevo.

        Args:
            plaintext (bytes): Datos en claro, admite longitud cero.
            aad (Optional[bytes]): Datos autenticados adicionales; por defecto
                ninguno.

        Returns:
            bytes: Payload `nonce ‖ ciphertext ‖ tag`.

        Raises:
            RandomSourceError: Si la fuente aleatoria del sistema falla.

        """

        try:
            nonce = os.urandom(NONCE_SIZE)
        except (OSError, NotImplementedError) as exc:
            raise RandomSourceError("La fuente aleatoria del sistema no está disponible.") from exc
        return nonce + self._aead.encrypt(nonce, plaintext, aad)

    def open(self, sealed: bytes, *, aad: Optional[bytes] = None) -> bytes:
        """Verifica y descifra un payload producido por `seal`.

        Args:
            sealed (bytes): Payload con el nonce en los primeros 12 bytes.
            aad (Optional[bytes]): Los mismos datos adicionales usados al sellar.

        Returns:
            bytes: Mensaje original en claro.

        Raises:
            MalformedInput: Si el payload es más corto que el nonce.
            AuthenticationFailure: Si la etiqueta no verifica.

        """

        if len(sealed) < NONCE_SIZE:
            raise MalformedInput(
                f"Payload de {len(sealed)} bytes, el nonce requiere {NONCE_SIZE}."
            )
        view = memoryview(sealed)
        nonce, rest = bytes(view[:NONCE_SIZE]), bytes(view[NONCE_SIZE:])
        try:
            return self._aead.decrypt(nonce, rest, aad)
        except InvalidTag:
            # Mismo mensaje para clave errónea, manipulación o corrupción.
            raise AuthenticationFailure("No se ha podido autenticar el payload.") from None


def new_gcm(key: BytesLike) -> Galois:
    """Devuelve un manejador `Galois` para la clave dada.

    Una clave de 32 bytes selecciona AES-256; 16 y 24 bytes seleccionan
    AES-128 y AES-192.
    """

    return Galois(key)


def seal_with_key(key: BytesLike, plaintext: bytes, *, aad: Optional[bytes] = None) -> bytes:
    """Sella datos con una clave proporcionada sin conservar el manejador."""

    return Galois(key).seal(plaintext, aad=aad)


def open_with_key(key: BytesLike, sealed: bytes, *, aad: Optional[bytes] = None) -> bytes:
    """Abre un payload sellado con la clave proporcionada."""

    return Galois(key).open(sealed, aad=aad)


def split_sealed(
    sealed: bytes, *, nonce_size: int = NONCE_SIZE, tag_size: int = TAG_SIZE
) -> SealedParts:
    """Separa un payload sellado en nonce, ciphertext y tag.

    Args:
        sealed (bytes): Payload en formato `nonce ‖ ciphertext ‖ tag`.
        nonce_size (int): Longitud del nonce antepuesto.
        tag_size (int): Longitud de la etiqueta final.

    Returns:
        SealedParts: Partes del payload, útiles para almacenarlas por separado.

    Raises:
        MalformedInput: Si el payload no alcanza `nonce_size + tag_size` bytes.

    """

    if len(sealed) < nonce_size + tag_size:
        raise MalformedInput(
            f"Payload de {len(sealed)} bytes, se requieren al menos {nonce_size + tag_size}."
        )
    return SealedParts(
        nonce=bytes(sealed[:nonce_size]),
        ciphertext=bytes(sealed[nonce_size : len(sealed) - tag_size]),
        tag=bytes(sealed[len(sealed) - tag_size :]),
    )
