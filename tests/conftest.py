# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas con IV fijo y ficheros temporales.
# --------------------------------------------------------------

from typing import Callable

import pytest

FIXED_IV = bytes.fromhex("f0f1f2f3f4f5f6f7f8f9fafbfcfdfeff")


@pytest.fixture
def fixed_iv() -> bytes:
    """Devuelve el IV de los vectores de referencia.

    Returns:
        bytes: IV `f0f1...feff` de 16 bytes.
    """
    return FIXED_IV


@pytest.fixture
def fixed_source() -> Callable[[int], bytes]:
    """Fuente aleatoria determinista que siempre entrega `FIXED_IV`.

    Returns:
        Callable[[int], bytes]: Sustituto de `os.urandom` para las pruebas.
    """

    def _source(n: int) -> bytes:
        assert n == len(FIXED_IV)
        return FIXED_IV

    return _source
