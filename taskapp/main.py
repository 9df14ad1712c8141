"""
➡️ But : assembler toutes les pièces du puzzle.

Crée l’instance FastAPI (app).

Configure :

les logs (une seule fois, avant tout le reste)

CORS (autorisations de qui peut appeler ces API)

titre, version, tags

schéma OpenAPI personnalisé

Inclut les routers (/api/v1/auth, /api/v1/tasks).

Initialise la base au démarrage (@app.on_event("startup")).

🔹 Avantages :

Centralise la configuration du serveur HTTP.

Point unique d’exécution : uvicorn taskapp.main:app --reload.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from taskapp.core.config import settings
from taskapp.core.logging import setup_logging
from taskapp.core.openapi import custom_openapi
from taskapp.db.session import init_db

from taskapp.api.v1.routers import authentication, tasks

import uvicorn

setup_logging(level=settings.LOG_LEVEL, log_dir=settings.LOG_DIR)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    openapi_tags=[
        {"name": "auth", "description": "Opérations liées à l'authentification"},
        {"name": "tasks", "description": "Gestion des tâches de l'utilisateur courant"},
    ],
)

# CORS (ajustez via CORS_ORIGINS)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins, allow_credentials=True,
    allow_methods=["*"], allow_headers=["*"],
)

# Routers
app.include_router(authentication.router, prefix="/api/v1")
app.include_router(tasks.router, prefix="/api/v1")

# Génération du schéma OpenAPI custom
app.openapi = lambda: custom_openapi(app)


@app.get("/health", tags=["health"], summary="Vérifier que l'API répond")
def health():
    return {"status": "healthy", "version": app.version}


# Démarrage
@app.on_event("startup")
def on_startup():
    init_db()
    logger.info("%s started (env=%s)", settings.APP_NAME, settings.ENV)

if __name__ == "__main__":
    uvicorn.run("taskapp.main:app", host="127.0.0.1", port=8080, reload=(settings.ENV == "dev")) # http://localhost:8080
