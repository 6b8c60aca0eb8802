# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Primitivas AES-128-CBC con relleno PKCS#7 para cifrar ficheros.
# --------------------------------------------------------------
"""Rutinas de cifrado simétrico por bloques en modo encadenado."""

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from ficrypt.crypto_iv import IV_SIZE
from ficrypt.crypto_kdf import KEY_SIZE
from ficrypt.errors import InvalidKeyOrIvLength, InvalidPadding

BLOCK_SIZE = 16


def _build_cipher(key: bytes, iv: bytes) -> Cipher:
    """Valida longitudes y construye el objeto AES-CBC."""

    if len(key) != KEY_SIZE:
        raise InvalidKeyOrIvLength(f"La clave debe medir {KEY_SIZE} bytes, no {len(key)}.")
    if len(iv) != IV_SIZE:
        raise InvalidKeyOrIvLength(f"El IV debe medir {IV_SIZE} bytes, no {len(iv)}.")
    return Cipher(algorithms.AES(key), modes.CBC(iv))


def encrypt(plaintext: bytes, key: bytes, iv: bytes) -> bytes:
    """Cifra datos con AES-128-CBC aplicando relleno PKCS#7.

    Si la entrada ya está alineada se añade un bloque completo de relleno,
    por lo que la salida siempre es más larga que la entrada.

    Args:
        plaintext (bytes): Datos en claro de cualquier longitud.
        key (bytes): Clave simétrica de 16 bytes.
        iv (bytes): Vector de inicialización de 16 bytes.

    Returns:
        bytes: Ciphertext cuya longitud es múltiplo de 16.

    """

    cipher = _build_cipher(key, iv)
    padder = padding.PKCS7(BLOCK_SIZE * 8).padder()
    padded = padder.update(plaintext) + padder.finalize()
    encryptor = cipher.encryptor()
    return encryptor.update(padded) + encryptor.finalize()


def decrypt(ciphertext: bytes, key: bytes, iv: bytes) -> bytes:
    """Descifra datos AES-128-CBC y valida el relleno PKCS#7.

    Args:
        ciphertext (bytes): Datos cifrados, múltiplo de 16 bytes.
        key (bytes): Clave simétrica de 16 bytes.
        iv (bytes): Vector de inicialización usado al cifrar.

    Returns:
        bytes: Mensaje original en claro.

    Raises:
        InvalidPadding: Si el relleno no es PKCS#7 válido o el ciphertext
            no puede contenerlo.

    """

    cipher = _build_cipher(key, iv)
    if not ciphertext or len(ciphertext) % BLOCK_SIZE:
        raise InvalidPadding(
            f"Longitud de ciphertext inválida ({len(ciphertext)} bytes): "
            f"debe ser un múltiplo no nulo de {BLOCK_SIZE}."
        )

    decryptor = cipher.decryptor()
    padded = decryptor.update(ciphertext) + decryptor.finalize()
    unpadder = padding.PKCS7(BLOCK_SIZE * 8).unpadder()
    try:
        return unpadder.update(padded) + unpadder.finalize()
    except ValueError as exc:
        raise InvalidPadding("Relleno PKCS#7 inválido.") from exc
