"""
➡️ But : Configurer la base SQLite et gérer les sessions de base de données.

engine : connexion à la base (sqlite:///tasks.db par défaut).

init_db() : crée les tables à partir des modèles SQLModel.

get_session() : dépendance FastAPI qui ouvre une session, la fournit aux routes, puis la ferme proprement.

🔹 Avantages :

Un seul endroit pour gérer les connexions DB.

Réutilisable par injection (Depends(get_session)).
"""

import logging
from typing import Dict, Any, Optional
from sqlmodel import SQLModel, create_engine, Session
from sqlalchemy.engine import Engine

# Import all models for creating all tables
from taskapp.db.models.users import User  # noqa: F401
from taskapp.db.models.refresh_tokens import RefreshToken  # noqa: F401
from taskapp.db.models.tasks import Task  # noqa: F401

from taskapp.core.config import settings

logger = logging.getLogger(__name__)


def build_engine(url: Optional[str] = None, **kwargs: Any) -> Engine:
    url = url or settings.DATABASE_URL
    assert url, "DATABASE_URL must be set"

    is_sqlite = url.startswith("sqlite:")

    connect_args: Dict[str, Any] = {}
    if is_sqlite:
        # Requis pour SQLite quand utilisé dans un app serveur (multi-threads)
        connect_args["check_same_thread"] = False

    # echo seulement en dev pour ne pas polluer les logs en prod
    return create_engine(
        url,
        echo=(settings.ENV == "dev"),
        connect_args=connect_args,
        pool_pre_ping=not is_sqlite,  # ping utile pour Postgres/MySQL ; inutile pour SQLite
        **kwargs,
    )

engine: Engine = build_engine()

def init_db(bind: Optional[Engine] = None) -> None:
    """
    Crée les tables si elles n'existent pas (usage dev/demo).
    En prod avec Alembic, préfère des migrations.
    """
    bind = bind or engine
    SQLModel.metadata.create_all(bind)
    logger.info("Database ready (%s)", bind.url.render_as_string(hide_password=True))


def get_session():
    """
    Dépendance FastAPI : fournit une session par requête.
    Utilisation :
        def route(..., session: Session = Depends(get_session)):
            ...
    """
    with Session(engine) as session:
        yield session
