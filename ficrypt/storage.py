# --------------------------------------------------------------
# File: storage.py
# Description: Lectura y escritura atómica de ficheros de entrada y salida.
# --------------------------------------------------------------
"""Funciones auxiliares de entrada/salida para los ficheros procesados."""

from __future__ import annotations

import os
import tempfile
from typing import Union

from ficrypt import config

__all__ = ["read_file", "write_file_atomic"]

PathLike = Union[str, os.PathLike]


def _ensure_parent_dir(path: str) -> None:
    """Garantiza que exista el directorio padre del archivo de destino."""

    parent = os.path.dirname(path) or "."
    os.makedirs(parent, exist_ok=True)


def read_file(path: PathLike) -> bytes:
    """Lee el contenido completo de un fichero; los `OSError` se propagan."""

    with open(path, "rb") as handler:
        return handler.read()


def write_file_atomic(path: PathLike, data: bytes) -> None:
    """Escribe bytes en un temporal y lo renombra sobre el destino.

    El temporal se crea con nombre único junto al destino, así que nunca
    pisa un fichero existente del usuario. Si la escritura falla se elimina
    el temporal y se relanza el error, de modo que el destino nunca queda
    escrito a medias.

    Args:
        path (PathLike): Ruta final del fichero.
        data (bytes): Contenido a persistir.

    """

    path = os.fspath(path)
    _ensure_parent_dir(path)
    fd, tmp_path = tempfile.mkstemp(
        dir=os.path.dirname(path) or ".",
        prefix=f".{os.path.basename(path)}.",
        suffix=config.TMP_SUFFIX,
    )
    try:
        with os.fdopen(fd, "wb") as handler:
            handler.write(data)
        os.replace(tmp_path, path)
    except OSError:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise
