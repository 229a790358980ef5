# --------------------------------------------------------------
# File: config.py
# Description: Carga de la clave simétrica desde el entorno o un fichero .env.
# --------------------------------------------------------------
import os
from typing import Optional

from dotenv import load_dotenv

from gencrypt.crypto_sym import Galois, new_gcm
from gencrypt.encoding import b64u_decode
from gencrypt.errors import KeyNotConfigured
from gencrypt.keys import validate_key

load_dotenv()

KEY_ENV_VAR = os.getenv("GENCRYPT_KEY_VAR", "GENCRYPT_KEY")


def load_key(var: Optional[str] = None) -> bytes:
    """Lee la clave en Base64 URL-safe de la variable de entorno indicada.

    Args:
        var (Optional[str]): Nombre de la variable; por defecto `KEY_ENV_VAR`.

    Returns:
        bytes: Clave validada de 16, 24 o 32 bytes.

    """

    name = var or KEY_ENV_VAR
    value = os.getenv(name, "").strip()
    if not value:
        raise KeyNotConfigured(f"La variable {name} no contiene ninguna clave.")
    key = b64u_decode(value)
    validate_key(key)
    return key


def gcm_from_env(var: Optional[str] = None) -> Galois:
    return new_gcm(load_key(var))
