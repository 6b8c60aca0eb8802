# --------------------------------------------------------------
# File: crypto_iv.py
# Description: Generación de vectores de inicialización aleatorios.
# --------------------------------------------------------------
"""Generador de IV con fuente de aleatoriedad inyectable."""

import os
from typing import Callable

from ficrypt.errors import InvalidKeyOrIvLength

IV_SIZE = 16

RandomSource = Callable[[int], bytes]


def generate_iv(random_source: RandomSource = os.urandom) -> bytes:
    """Genera un IV aleatorio de 128 bits.

    Args:
        random_source (RandomSource): Callable que devuelve `n` bytes
            aleatorios. Por defecto, el CSPRNG del sistema operativo.

    Returns:
        bytes: IV de 16 bytes, distinto en cada llamada.

    """

    iv = random_source(IV_SIZE)
    if len(iv) != IV_SIZE:
        raise InvalidKeyOrIvLength(
            f"La fuente aleatoria devolvió {len(iv)} bytes, se esperaban {IV_SIZE}."
        )
    return bytes(iv)
