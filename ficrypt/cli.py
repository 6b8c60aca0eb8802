# --------------------------------------------------------------
# File: cli.py
# Description: Interfaz de línea de comandos para cifrar y descifrar ficheros.
# --------------------------------------------------------------
"""Punto de entrada `ficrypt FILE OUTPUT_FILE [-d]`."""

import argparse
import logging
import sys
from getpass import getpass
from pathlib import Path
from typing import List, Optional

from ficrypt import __version__, config
from ficrypt.errors import FicryptError
from ficrypt.models import Job
from ficrypt.runner import run

PROMPT = "Introduce la clave de cifrado: "

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Construye el parser de argumentos de la herramienta."""

    parser = argparse.ArgumentParser(
        prog="ficrypt",
        description="Herramienta de línea de comandos para cifrar ficheros.",
    )
    parser.add_argument("file", type=Path, help="Ruta del fichero a cifrar")
    parser.add_argument("output_file", type=Path, help="Ruta del fichero de salida")
    parser.add_argument("-d", action="store_true", help="Descifrar el fichero")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Muestra trazas de depuración"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Analiza argumentos, pide la passphrase y ejecuta el trabajo.

    Args:
        argv (Optional[List[str]]): Argumentos sin el nombre del programa.

    Returns:
        int: Código de salida del proceso.

    """

    args = build_parser().parse_args(argv)
    level = logging.DEBUG if args.verbose else logging.getLevelName(config.LOG_LEVEL)
    if not isinstance(level, int):
        print(
            f"Error de la aplicación: nivel de log desconocido {config.LOG_LEVEL!r}",
            file=sys.stderr,
        )
        return 1
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )

    try:
        key = getpass(PROMPT)
    except KeyboardInterrupt:
        print(file=sys.stderr)
        return 130
    except EOFError:
        print("Error de la aplicación: no se pudo leer la clave de cifrado", file=sys.stderr)
        return 1

    job = Job.build(args, key)
    try:
        run(job)
    except (FicryptError, OSError) as exc:
        logger.debug("Fallo procesando %s", job.file, exc_info=True)
        print(f"Error de la aplicación: {exc}", file=sys.stderr)
        return 1
    return 0
