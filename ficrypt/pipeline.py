# --------------------------------------------------------------
# File: pipeline.py
# Description: Orquesta derivación, IV, cifrado y enmarcado de un fichero.
# --------------------------------------------------------------
"""Flujo completo de cifrado y descifrado en memoria."""

import logging
import os

from ficrypt import crypto_sym
from ficrypt.crypto_iv import RandomSource, generate_iv
from ficrypt.crypto_kdf import derive_key
from ficrypt.framing import frame, unframe

logger = logging.getLogger(__name__)


def encrypt_data(plaintext: bytes, passphrase: str, random_source: RandomSource = os.urandom) -> bytes:
    """Cifra datos y devuelve `IV || ciphertext`.

    Args:
        plaintext (bytes): Contenido original del fichero.
        passphrase (str): Passphrase de la que se deriva la clave.
        random_source (RandomSource): Fuente de bytes aleatorios para el IV.

    Returns:
        bytes: Salida enmarcada lista para escribirse en disco.

    """

    iv = generate_iv(random_source)
    key = derive_key(passphrase)
    ciphertext = crypto_sym.encrypt(plaintext, key, iv)
    logger.debug("Cifrados %d bytes en %d bytes de ciphertext", len(plaintext), len(ciphertext))
    return frame(iv, ciphertext)


def decrypt_data(framed: bytes, passphrase: str) -> bytes:
    """Descifra una salida enmarcada `IV || ciphertext`."""

    iv, ciphertext = unframe(framed)
    key = derive_key(passphrase)
    plaintext = crypto_sym.decrypt(ciphertext, key, iv)
    logger.debug("Descifrados %d bytes de ciphertext en %d bytes", len(ciphertext), len(plaintext))
    return plaintext


def transform(
    data: bytes,
    passphrase: str,
    encrypt: bool = True,
    random_source: RandomSource = os.urandom,
) -> bytes:
    """Cifra o descifra según `encrypt`, elegido una vez por invocación."""

    if encrypt:
        return encrypt_data(data, passphrase, random_source)
    return decrypt_data(data, passphrase)
