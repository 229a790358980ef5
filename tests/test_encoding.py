# --------------------------------------------------------------
# File: test_encoding.py
# Description: Pruebas del transporte textual en Base64 URL-safe.
# --------------------------------------------------------------

import pytest

from gencrypt import AuthenticationFailure, MalformedInput, new_gcm
from gencrypt.encoding import b64u_decode, b64u_encode, open_text, seal_text


def test_b64u_has_no_padding_and_decodes():
    """Comprueba que la codificación omita el relleno y sea reversible.

    Returns:
        None: Las aserciones validan el texto producido.
    """
    token = b64u_encode(b"\xfb\xff")
    assert token == "-_8"
    assert b64u_decode(token) == b"\xfb\xff"


@pytest.mark.parametrize("value", ["abcde", "ab$d", "ñandú"])
def test_b64u_decode_rejects_invalid_text(value):
    """Garantiza que un texto que no es Base64 se rechace.

    Returns:
        None: Se espera MalformedInput.
    """
    with pytest.raises(MalformedInput):
        b64u_decode(value)


def test_seal_text_roundtrip(gcm):
    """Verifica el sellado y apertura de texto UTF-8.

    Returns:
        None: El texto recuperado coincide con el original.
    """
    token = seal_text(gcm, "hola mundo ñ")
    assert "hola" not in token
    assert open_text(gcm, token) == "hola mundo ñ"


def test_open_text_with_other_key_fails(gcm):
    """Comprueba que un token no se abra con otra clave.

    Returns:
        None: Se espera AuthenticationFailure.
    """
    token = seal_text(gcm, "secreto")
    with pytest.raises(AuthenticationFailure):
        open_text(new_gcm(b"k" * 32), token)
