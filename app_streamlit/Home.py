# --------------------------------------------------------------
# File: Home.py
# Description: Página de demostración para sellar y abrir texto con AES-GCM.
# --------------------------------------------------------------

import streamlit as st

from gencrypt import GencryptError, generate_key, new_gcm
from gencrypt.config import KEY_ENV_VAR, load_key
from gencrypt.encoding import open_text, seal_text


def _session_key() -> bytes:
    """Obtiene la clave del entorno o genera una efímera para la sesión.

    Returns:
        bytes: Clave AES de la sesión actual.
    """
    if "gcm_key" not in st.session_state:
        try:
            st.session_state["gcm_key"] = load_key()
            st.session_state["key_source"] = f"variable `{KEY_ENV_VAR}`"
        except GencryptError:
            st.session_state["gcm_key"] = generate_key()
            st.session_state["key_source"] = "clave efímera generada para esta sesión"
    return st.session_state["gcm_key"]


# Configura los metadatos de la página principal de la aplicación.
st.set_page_config(page_title="gencrypt", page_icon="🔐", layout="centered")

st.title("🔐 gencrypt")
st.write("Sellado AES-GCM con nonce aleatorio: `nonce ‖ ciphertext ‖ tag` en Base64 URL-safe.")

gcm = new_gcm(_session_key())
st.caption(f"{gcm!r} · clave: {st.session_state['key_source']}")

if st.button("Nueva clave efímera"):
    st.session_state["gcm_key"] = generate_key()
    st.session_state["key_source"] = "clave efímera generada para esta sesión"
    st.rerun()

st.subheader("Sellar")
plain = st.text_area("Texto en claro", value="test data")
if st.button("Sellar"):
    st.code(seal_text(gcm, plain))

st.subheader("Abrir")
token = st.text_input("Payload sellado (Base64 URL-safe)")
if st.button("Abrir") and token:
    try:
        st.success(open_text(gcm, token.strip()))
    except GencryptError as exc:
        st.error(f"No se pudo abrir el payload: {exc}")
