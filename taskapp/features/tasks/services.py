"""
➡️ But : Contenir la logique métier des tâches : orchestrer le repo, appliquer les règles de propriété.

TaskService : toute opération est bornée au propriétaire authentifié.
Une tâche d'un autre utilisateur est traitée exactement comme une tâche inexistante (LookupError).

🔹 Avantages :

Code métier découplé du web.

Test unitaire possible sans passer par FastAPI.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, List

from taskapp.db.models.tasks import Task
from taskapp.db.repositories.tasks import TaskRepository
from taskapp.features.tasks.schemas import TaskCreateIn, TaskUpdateIn

logger = logging.getLogger(__name__)


class TaskService:
    def __init__(
        self,
        repo: TaskRepository,
        *,
        now_fn: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ):
        self.repo = repo
        self.now_fn = now_fn

    # --------------- Queries ---------------
    def list(self, owner_id: int) -> List[Task]:
        return list(self.repo.list_for_owner(owner_id))

    def get(self, task_id: int, owner_id: int) -> Task:
        task = self.repo.get_for_owner(task_id, owner_id)
        if not task:
            raise LookupError("Task not found.")
        return task

    # --------------- Commands ---------------
    def create(self, owner_id: int, payload: TaskCreateIn) -> Task:
        task = self.repo.create(
            owner_id=owner_id,
            description=payload.description,
            completed=payload.completed,
        )
        logger.info("Task %s created for owner %s", task.id, owner_id)
        return task

    def update(self, task_id: int, owner_id: int, payload: TaskUpdateIn) -> Task:
        task = self.get(task_id, owner_id)
        changes = payload.model_dump(exclude_unset=True)
        if not changes:
            return task
        changes["updated_at"] = self.now_fn()
        task = self.repo.update(task, **changes)
        logger.info("Task %s updated (%s)", task_id, ", ".join(sorted(changes)))
        return task

    def toggle(self, task_id: int, owner_id: int) -> Task:
        task = self.get(task_id, owner_id)
        task = self.repo.update(task, completed=not task.completed, updated_at=self.now_fn())
        logger.info("Task %s marked %s", task_id, "completed" if task.completed else "pending")
        return task

    def delete(self, task_id: int, owner_id: int) -> None:
        task = self.get(task_id, owner_id)
        self.repo.delete(task)
        logger.info("Task %s deleted by owner %s", task_id, owner_id)
