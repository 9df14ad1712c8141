"""
➡️ But : Définir les formats de sortie de l’API pour les utilisateurs.

UserOut → réponse de /auth/sign-up et /auth/me

Empêche d’exposer par erreur des infos sensibles (ex: hash de mot de passe).
"""

from datetime import datetime
from pydantic import BaseModel

class UserOut(BaseModel):
    id: int
    username: str
    created_at: datetime

    model_config = {"from_attributes": True}
