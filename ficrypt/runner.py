# --------------------------------------------------------------
# File: runner.py
# Description: Ejecuta un trabajo de cifrado de principio a fin sobre disco.
# --------------------------------------------------------------
"""Une la lectura del fichero, el pipeline en memoria y la escritura."""

import logging
import os

from ficrypt.crypto_iv import RandomSource
from ficrypt.models import Job
from ficrypt.pipeline import transform
from ficrypt.storage import read_file, write_file_atomic

logger = logging.getLogger(__name__)


def run(job: Job, random_source: RandomSource = os.urandom) -> int:
    """Procesa el fichero del trabajo y escribe el resultado.

    El resultado se calcula por completo antes de escribir, así que un
    descifrado fallido nunca crea el fichero de salida.

    Args:
        job (Job): Trabajo con rutas, dirección y passphrase.
        random_source (RandomSource): Fuente de bytes aleatorios para el IV.

    Returns:
        int: Número de bytes escritos en `job.output_file`.

    """

    contents = read_file(job.file)
    action = "Cifrando" if job.encrypt else "Descifrando"
    logger.info("%s %s (%d bytes)", action, job.file, len(contents))

    result = transform(
        contents,
        job.key.get_secret_value(),
        encrypt=job.encrypt,
        random_source=random_source,
    )
    write_file_atomic(job.output_file, result)
    logger.info("Escritos %d bytes en %s", len(result), job.output_file)
    return len(result)
