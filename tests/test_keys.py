# --------------------------------------------------------------
# File: test_keys.py
# Description: Pruebas de validación y generación de claves AES.
# --------------------------------------------------------------

import pytest

from gencrypt import InvalidKeySize, KeySize, generate_key, new_gcm, validate_key


@pytest.mark.parametrize("size", list(KeySize))
def test_generate_key_sizes(size):
    """Comprueba que las claves generadas tengan el tamaño pedido y sean usables.

    Returns:
        None: Las aserciones validan longitud y un sellado completo.
    """
    key = generate_key(size)
    assert len(key) == int(size)
    assert validate_key(key) is size
    assert new_gcm(key).open(new_gcm(key).seal(b"ok")) == b"ok"


def test_generate_key_defaults_to_aes256():
    """Verifica que el tamaño por defecto sea de 256 bits.

    Returns:
        None: La clave mide 32 bytes.
    """
    assert len(generate_key()) == 32


def test_generate_key_is_random():
    """Evalúa que dos claves generadas no coincidan.

    Returns:
        None: Las claves difieren.
    """
    assert generate_key() != generate_key()


def test_generate_key_rejects_unknown_size():
    """Garantiza que un tamaño no admitido se rechace.

    Returns:
        None: Se espera InvalidKeySize.
    """
    with pytest.raises(InvalidKeySize):
        generate_key(20)


def test_validate_key_accepts_bytearray_and_memoryview():
    """Comprueba que se admitan otros objetos de bytes.

    Returns:
        None: Las aserciones devuelven AES-128.
    """
    assert validate_key(bytearray(16)) is KeySize.AES128
    assert validate_key(memoryview(bytes(16))) is KeySize.AES128


def test_invalid_key_size_is_value_error():
    """Verifica que InvalidKeySize pueda capturarse como ValueError.

    Returns:
        None: Se espera ValueError.
    """
    with pytest.raises(ValueError):
        validate_key(b"short")


def test_key_size_bits():
    """Comprueba la conversión de bytes a bits del enumerado.

    Returns:
        None: Las aserciones validan 128, 192 y 256 bits.
    """
    assert [size.bits for size in KeySize] == [128, 192, 256]
