# --------------------------------------------------------------
# File: errors.py
# Description: Jerarquía de excepciones del núcleo de cifrado de ficheros.
# --------------------------------------------------------------
"""Errores que interrumpen el cifrado o el descifrado de un fichero."""

__all__ = [
    "FicryptError",
    "InvalidKeyOrIvLength",
    "InvalidPadding",
    "TruncatedInput",
    "InvalidEncoding",
]


class FicryptError(ValueError):
    """Error base de todas las operaciones criptográficas de ficrypt."""


class InvalidKeyOrIvLength(FicryptError):
    """La clave o el IV no miden exactamente 16 bytes."""


class InvalidPadding(FicryptError):
    """El relleno PKCS#7 del texto descifrado no es válido.

    Es la única señal de corrupción disponible: una passphrase incorrecta
    suele manifestarse con este error.
    """


class TruncatedInput(FicryptError):
    """La entrada enmarcada es más corta que el IV."""


class InvalidEncoding(FicryptError):
    """Fallo al decodificar el hexadecimal durante la derivación de clave."""
