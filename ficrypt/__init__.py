# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública de las utilidades de cifrado de ficheros.
# --------------------------------------------------------------
"""Inicializa el paquete `ficrypt` y documenta sus módulos principales."""

__version__ = "0.1.0"

__all__ = [
    "cli",
    "config",
    "crypto_iv",
    "crypto_kdf",
    "crypto_sym",
    "errors",
    "framing",
    "models",
    "pipeline",
    "runner",
    "storage",
]
