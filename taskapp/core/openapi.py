"""
➡️ But : Personnaliser la documentation Swagger/OpenAPI.

custom_openapi(app) modifie le schéma généré par FastAPI pour :

ajouter une description détaillée avec les conventions de l'API,

centraliser la personnalisation du Swagger.
"""

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi

def custom_openapi(app: FastAPI):
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=(
            "API de gestion de tâches personnelles (FastAPI + SQLModel).\n\n"
            "### Conventions\n"
            "- Toutes les heures sont en UTC.\n"
            "- Authentification : header `Authorization: Bearer <access_token>` (voir `/auth/sign-in`).\n"
            "- Chaque utilisateur ne voit que ses propres tâches ; une tâche d'autrui répond 404.\n"
            "- Pas de pagination ni de filtre côté serveur : le filtrage par statut est fait par le client.\n"
        ),
        tags=app.openapi_tags,
        routes=app.routes,
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema
