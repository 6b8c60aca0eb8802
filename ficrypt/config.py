import os
from dotenv import load_dotenv
load_dotenv()

LOG_LEVEL = os.getenv("FICRYPT_LOG_LEVEL", "WARNING").upper()
TMP_SUFFIX = os.getenv("FICRYPT_TMP_SUFFIX", ".tmp")
