# app.py
import streamlit as st
from asset_sentiment.config import configure_logging, get_settings
from asset_sentiment.views.page import TITLE, render_analyzer

st.set_page_config(page_title=TITLE, page_icon="📈", layout="centered")
configure_logging(get_settings().log_level)

# Single route: the analyzer mounted at "/".
page = st.navigation([st.Page(render_analyzer, title=TITLE, icon="📈", default=True)])
page.run()
