"""
➡️ But : Définir les endpoints de l’API des tâches.

C’est la couche la plus proche du web :

Réceptionne les requêtes HTTP (GET, POST, PUT, PATCH, DELETE…)

Résout le propriétaire depuis le token, appelle le TaskService

Traduit les erreurs métier (LookupError → 404) et retourne les schémas de sortie (response_model)

🔹 Avantages :

Automatiquement documentée dans Swagger :

summary, description, response_model, examples

Isolation totale du reste du code : les routes ne contiennent ni SQL ni logique métier.
"""

from fastapi import APIRouter, Depends, HTTPException, Path, status

from taskapp.api.v1.dependencies import get_current_user, get_task_service
from taskapp.db.models.users import User
from taskapp.features.tasks.schemas import (
    TaskCreateIn,
    TaskUpdateIn,
    TaskOut,
    TaskEnvelopeOut,
    TaskListOut,
)
from taskapp.features.tasks.services import TaskService

router = APIRouter(
    prefix="/tasks",
    tags=["tasks"],
    responses={
        401: {"description": "Token absent, invalide ou expiré"},
        404: {"description": "Not Found"},
    },
)


def _not_found(e: LookupError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get(
    "",
    summary="Lister mes tâches",
    description="Toutes les tâches de l'utilisateur courant, dans l'ordre de création. Pas de filtre côté serveur.",
    response_model=TaskListOut,
    responses={
        200: {
            "description": "Liste complète",
            "content": {
                "application/json": {
                    "example": {"tasks": [{"id": 1, "owner_id": 1, "description": "Acheter du lait",
                                           "completed": False, "created_at": "2025-01-01T10:00:00Z",
                                           "updated_at": "2025-01-01T10:00:00Z"}],
                                "total": 1}
                }
            },
        }
    },
)
def list_tasks(user: User = Depends(get_current_user), svc: TaskService = Depends(get_task_service)):
    tasks = [TaskOut.model_validate(t) for t in svc.list(user.id)]
    return TaskListOut(tasks=tasks, total=len(tasks))

@router.post(
    "",
    summary="Créer une tâche",
    status_code=status.HTTP_201_CREATED,
    response_model=TaskEnvelopeOut,
)
def create_task(
    payload: TaskCreateIn,
    user: User = Depends(get_current_user),
    svc: TaskService = Depends(get_task_service),
):
    task = svc.create(user.id, payload)
    return TaskEnvelopeOut(task=TaskOut.model_validate(task))

@router.get(
    "/{task_id}",
    summary="Récupérer une tâche",
    response_model=TaskEnvelopeOut,
)
def get_task(
    task_id: int = Path(..., ge=1),
    user: User = Depends(get_current_user),
    svc: TaskService = Depends(get_task_service),
):
    try:
        task = svc.get(task_id, user.id)
    except LookupError as e:
        raise _not_found(e)
    return TaskEnvelopeOut(task=TaskOut.model_validate(task))

@router.put(
    "/{task_id}",
    summary="Mettre à jour une tâche",
    description="Seuls les champs présents dans le corps sont modifiés.",
    response_model=TaskEnvelopeOut,
)
def update_task(
    payload: TaskUpdateIn,
    task_id: int = Path(..., ge=1),
    user: User = Depends(get_current_user),
    svc: TaskService = Depends(get_task_service),
):
    try:
        task = svc.update(task_id, user.id, payload)
    except LookupError as e:
        raise _not_found(e)
    return TaskEnvelopeOut(task=TaskOut.model_validate(task))

@router.patch(
    "/{task_id}/toggle",
    summary="Basculer l'état terminé / en cours",
    response_model=TaskEnvelopeOut,
)
def toggle_task(
    task_id: int = Path(..., ge=1),
    user: User = Depends(get_current_user),
    svc: TaskService = Depends(get_task_service),
):
    try:
        task = svc.toggle(task_id, user.id)
    except LookupError as e:
        raise _not_found(e)
    return TaskEnvelopeOut(task=TaskOut.model_validate(task))

@router.delete(
    "/{task_id}",
    summary="Supprimer une tâche",
    status_code=status.HTTP_204_NO_CONTENT,
)
def delete_task(
    task_id: int = Path(..., ge=1),
    user: User = Depends(get_current_user),
    svc: TaskService = Depends(get_task_service),
):
    try:
        svc.delete(task_id, user.id)
    except LookupError as e:
        raise _not_found(e)
    return None
