# --------------------------------------------------------------
# File: Home.py
# Description: Página de Streamlit para cifrar y descifrar un fichero con passphrase.
# --------------------------------------------------------------

import streamlit as st

from ficrypt.errors import FicryptError
from ficrypt.pipeline import transform

ENC_SUFFIX = ".enc"


def output_name(name: str, encrypt: bool) -> str:
    """Propone el nombre del fichero resultante.

    Args:
        name (str): Nombre original del fichero subido.
        encrypt (bool): Dirección de la operación.

    Returns:
        str: Nombre con `.enc` añadido al cifrar o retirado al descifrar.
    """
    if encrypt:
        return name + ENC_SUFFIX
    if name.endswith(ENC_SUFFIX) and len(name) > len(ENC_SUFFIX):
        return name[: -len(ENC_SUFFIX)]
    return name + ".dec"


# Configura los metadatos de la página principal de la aplicación.
st.set_page_config(page_title="ficrypt", page_icon="🔐", layout="centered")

st.title("🔐 ficrypt")
st.write("Cifra un fichero con AES-128-CBC. El IV se guarda al principio del resultado.")
st.caption("Sin autenticación: un fichero alterado solo se detecta si rompe el relleno.")

f = st.file_uploader("Selecciona un archivo", type=None)
passphrase = st.text_input("Passphrase", type="password")
mode = st.radio("Operación", ["Cifrar", "Descifrar"], horizontal=True)

if f and st.button(f"🔑 {mode}"):
    encrypt = mode == "Cifrar"
    try:
        result = transform(f.read(), passphrase, encrypt=encrypt)
    except FicryptError as exc:
        st.error(f"Error procesando el archivo: {exc}")
        st.stop()

    st.success(f"Operación completada ({len(result)} bytes).")
    st.download_button(
        "⬇️ Descargar resultado",
        data=result,
        file_name=output_name(f.name, encrypt),
        mime="application/octet-stream",
    )
