"""
Montage des fichiers statiques.
Expose /_next/static: préfixe d'assets internes, exempté du routeur de locale.
"""
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from atelier.config import STATIC_DIR

def mount_static_files(app: FastAPI) -> None:
    app.mount("/_next/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
