"""
➡️ But : Remplir une base de dev avec des utilisateurs et leurs tâches, depuis un YAML.

Format attendu :

users:
  - username: alice
    password: motdepasse
    tasks:
      - description: Acheter du lait
      - description: Réviser
        completed: true

Idempotent côté utilisateurs : un username déjà présent n'est pas recréé (ni ses tâches).
"""

import logging
from pathlib import Path
from typing import Any, Dict, Union

import yaml
from sqlmodel import Session

from taskapp.db.repositories.users import UserRepository
from taskapp.db.repositories.tasks import TaskRepository
from taskapp.features.tasks.schemas import TaskCreateIn
from taskapp.security.password import hash_password

logger = logging.getLogger(__name__)


# -----------------------------
# YAML loader
# -----------------------------
def load_seed_yaml(seed_path: Union[str, Path]) -> Dict[str, Any]:
    path = Path(seed_path)
    if not path.exists():
        raise FileNotFoundError(f"Seed YAML introuvable: {path}")

    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("Le YAML de seed doit contenir un objet racine (mapping).")
    return data


# -----------------------------
# Seed
# -----------------------------
def seed_all(*, session: Session, data: Dict[str, Any]) -> Dict[str, int]:
    users = UserRepository(session)
    tasks = TaskRepository(session)
    created = {"users": 0, "tasks": 0}

    for entry in data.get("users", []):
        if users.get_by_username(entry["username"]):
            logger.info("Seed: user %s already present, skipped", entry["username"])
            continue
        user = users.create(
            commit=False,
            username=entry["username"],
            hashed_password=hash_password(entry["password"]),
        )
        created["users"] += 1
        for t in entry.get("tasks", []):
            # mêmes règles que POST /tasks : ValidationError (ValueError) sinon, rien n'est commité
            payload = TaskCreateIn.model_validate(t)
            tasks.create(
                commit=False,
                owner_id=user.id,
                description=payload.description,
                completed=payload.completed,
            )
            created["tasks"] += 1

    session.commit()
    logger.info("Seed done: %(users)d users, %(tasks)d tasks", created)
    return created
