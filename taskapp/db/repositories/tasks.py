"""
➡️ But : Encapsuler toutes les opérations de base de données sur les tâches.

TaskRepository : CRUD sur la table Task, toujours filtrable par propriétaire.

Pas de pagination, de filtre ni de recherche côté serveur : le filtrage par statut se fait côté client.
"""

from typing import Optional, Sequence
from sqlmodel import select

from taskapp.db.repositories.base import BaseRepository
from taskapp.db.models.tasks import Task


class TaskRepository(BaseRepository[Task]):
    model = Task

    def list_for_owner(self, owner_id: int) -> Sequence[Task]:
        """Tâches d'un propriétaire, dans l'ordre d'insertion."""
        stmt = select(Task).where(Task.owner_id == owner_id).order_by(Task.id)
        return self.session.exec(stmt).all()

    def get_for_owner(self, task_id: int, owner_id: int) -> Optional[Task]:
        stmt = select(Task).where(Task.id == task_id, Task.owner_id == owner_id)
        return self.session.exec(stmt).first()
