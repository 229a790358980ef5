# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas para aislar el entorno y recargar la configuración.
# --------------------------------------------------------------

import importlib
from typing import Iterator

import pytest

SCENARIO_KEY = b"12345678901234561234567890123456"


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch) -> Iterator[None]:
    """Elimina las variables de clave y recarga gencrypt.config para cada prueba.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture para ajustar variables de entorno.

    Returns:
        Iterator[None]: Control del fixture autouse durante la ejecución de cada test.
    """
    monkeypatch.delenv("GENCRYPT_KEY", raising=False)
    monkeypatch.delenv("GENCRYPT_KEY_VAR", raising=False)

    import gencrypt.config as config_module

    importlib.reload(config_module)

    yield


@pytest.fixture
def gcm():
    """Manejador AES-256-GCM construido con la clave del escenario de referencia."""
    from gencrypt import new_gcm

    return new_gcm(SCENARIO_KEY)
