# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos de una ejecución de cifrado de fichero.
# --------------------------------------------------------------
"""Modelos Pydantic que describen un trabajo de cifrado o descifrado."""

from argparse import Namespace
from pathlib import Path

from pydantic import BaseModel, SecretStr


class Job(BaseModel):
    """Representa una ejecución completa sobre un único fichero.

    Attributes:
        file (Path): Ruta del fichero de entrada.
        output_file (Path): Ruta donde se escribirá el resultado.
        encrypt (bool): `True` para cifrar, `False` para descifrar.
        key (SecretStr): Passphrase; nunca aparece en `repr` ni en logs.

    """

    file: Path
    output_file: Path
    encrypt: bool = True
    key: SecretStr

    @classmethod
    def build(cls, args: Namespace, key: str) -> "Job":
        """Construye el trabajo a partir de los argumentos de la CLI."""

        return cls(
            file=args.file,
            output_file=args.output_file,
            encrypt=not args.d,
            key=key,
        )
