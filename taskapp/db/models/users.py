"""
➡️ But : Définir la structure des tables de la base (ORM).

Représente les propriétaires des tâches : un User possède zéro ou plusieurs Task.

🔹 Avantages :

Tu manipules des objets Python, pas du SQL brut.

Facile à migrer vers PostgreSQL ou MySQL plus tard.
"""

from sqlmodel import Field

from .base import BaseModelDB

class User(BaseModelDB, table=True):
    username: str = Field(index=True, unique=True)
    hashed_password: str
