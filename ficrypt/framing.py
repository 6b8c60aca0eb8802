# --------------------------------------------------------------
# File: framing.py
# Description: Formato en disco `IV || ciphertext`.
# --------------------------------------------------------------
"""Empaquetado y separación del IV y el ciphertext."""

from typing import Tuple

from ficrypt.crypto_iv import IV_SIZE
from ficrypt.errors import TruncatedInput


def frame(iv: bytes, ciphertext: bytes) -> bytes:
    """Antepone el IV al ciphertext."""

    return bytes(iv) + bytes(ciphertext)


def unframe(framed: bytes) -> Tuple[bytes, bytes]:
    """Separa el IV (primeros 16 bytes) del resto del mensaje.

    Args:
        framed (bytes): Contenido leído del fichero cifrado.

    Returns:
        Tuple[bytes, bytes]: IV y ciphertext.

    """

    if len(framed) < IV_SIZE:
        raise TruncatedInput(
            f"Entrada truncada: {len(framed)} bytes, se necesitan al menos {IV_SIZE}."
        )
    return bytes(framed[:IV_SIZE]), bytes(framed[IV_SIZE:])
