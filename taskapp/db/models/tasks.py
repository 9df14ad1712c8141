from sqlmodel import Field

from .base import BaseModelDB


class Task(BaseModelDB, table=True):
    """Tâche personnelle : un seul propriétaire, fixé à la création."""

    owner_id: int = Field(foreign_key="user.id", index=True, nullable=False)
    description: str = Field(nullable=False, description="Texte de la tâche")
    completed: bool = Field(default=False, nullable=False, description="Tâche terminée ?")
