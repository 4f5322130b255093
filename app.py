# app.py
import logging
from pathlib import Path
import streamlit as st

st.set_page_config(page_title="Energy Futures Explorer", page_icon="📊", layout="wide")
logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

pages: dict[str, list] = {}

# Helper to add pages
def add(section: str, path: str, title: str, icon: str):
    if Path(path).exists():
        pages.setdefault(section, []).append(st.Page(path, title=title, icon=icon))


# Overview
add("Overview", "pages/01_Home.py", "Home", ":material/home:")
add("Overview", "pages/99_About.py", "About", ":material/info:")


# Exploration
add("Exploration", "pages/10_Dataset_Explorer.py", "Dataset Explorer", ":material/insights:")
add("Exploration", "pages/11_Scenario_Region.py", "Scenario & Region", ":material/bolt:")


pg = st.navigation(pages, position="sidebar", expanded=True)
pg.run()
