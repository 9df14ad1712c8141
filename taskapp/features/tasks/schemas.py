"""
➡️ But : Définir les formats d’entrée/sortie de l’API (couche validation).

Contient les modèles Pydantic utilisés par FastAPI :

TaskCreateIn → corps de requête POST /tasks

TaskUpdateIn → corps PUT /tasks/{id} (champs partiels)

TaskOut, TaskEnvelopeOut, TaskListOut → réponses de l’API

Sépare les modèles "de stockage" (ORM) de ceux "de transfert" (I/O API).

🔹 Avantages :

Validation automatique (description obligatoire, non vide une fois nettoyée).

Documente les champs dans Swagger (types, exemples...).
"""

from datetime import datetime
from typing import Annotated, List, Optional

from pydantic import AfterValidator, BaseModel, Field as PydField, StrictBool, field_validator


def _clean_description(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError("Description must not be empty")
    return value


# Texte nettoyé, jamais vide
Description = Annotated[str, AfterValidator(_clean_description)]


# ---------- IN / UPDATE ----------

class TaskCreateIn(BaseModel):
    description: Description = PydField(..., examples=["Acheter du lait"])
    completed: StrictBool = PydField(False, examples=[False])


class TaskUpdateIn(BaseModel):
    description: Optional[Description] = PydField(None, examples=["Aller courir"])
    completed: Optional[StrictBool] = PydField(None, examples=[True])

    @field_validator("description", "completed", mode="before")
    @classmethod
    def _no_null(cls, value):
        # absent = inchangé ; null est refusé (pas de troisième état)
        if value is None:
            raise ValueError("must not be null")
        return value


# ---------- OUT ----------

class TaskOut(BaseModel):
    id: int
    owner_id: int
    description: str
    completed: bool
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class TaskEnvelopeOut(BaseModel):
    task: TaskOut


class TaskListOut(BaseModel):
    tasks: List[TaskOut]
    total: int
