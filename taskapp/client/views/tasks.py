"""
➡️ But : Vue "liste des tâches" (état + actions), indépendante de tout toolkit graphique.

TaskListView :

charge toutes les tâches de l'utilisateur au montage (et quand la session devient active),

filtre côté client (all / pending / completed) sans jamais modifier `tasks`,

supprime / bascule une tâche PUIS recharge toute la liste (pas de mise à jour optimiste :
la vue reflète toujours l'état du serveur, au prix d'un aller-retour).

🔹 Avantages :

Le filtrage est une fonction pure (filter_tasks), testable seule.

Le rendu est indexé par l'id de la tâche, pas par sa position.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Union

from taskapp.client.fetch import ApiClient, ApiError, RequestConfig
from taskapp.client.navigation import TASK_ADD, Navigator, task_edit_path
from taskapp.client.session import AuthState

logger = logging.getLogger(__name__)

TaskDict = Dict[str, Any]


class FilterStatus(str, Enum):
    ALL = "all"
    PENDING = "pending"
    COMPLETED = "completed"


def filter_tasks(tasks: Sequence[TaskDict], status: Union[FilterStatus, str]) -> List[TaskDict]:
    status = FilterStatus(status)
    if status is FilterStatus.COMPLETED:
        return [t for t in tasks if t["completed"] is True]
    if status is FilterStatus.PENDING:
        return [t for t in tasks if t["completed"] is False]
    return list(tasks)


@dataclass(frozen=True)
class TaskRow:
    key: int
    index: int
    description: str
    completed: bool

    @property
    def edit_path(self) -> str:
        return task_edit_path(self.key)


class TaskListView:
    def __init__(self, api: ApiClient, auth: AuthState, navigator: Optional[Navigator] = None):
        self.api = api
        self.auth = auth
        self.navigator = navigator or Navigator()
        self.tasks: List[TaskDict] = []
        self.filter_status = FilterStatus.ALL
        self.mounted = False

    @property
    def loading(self) -> bool:
        return self.api.loading

    # ---------- Cycle de vie ----------
    def mount(self) -> None:
        self.mounted = True
        if self.auth.is_logged_in:
            self.fetch_tasks()

    def unmount(self) -> None:
        self.mounted = False

    def on_session_change(self, auth: AuthState) -> None:
        previous_token = self.auth.token
        self.auth = auth
        if auth.is_logged_in and auth.token != previous_token and self.mounted:
            self.fetch_tasks()

    # ---------- Requêtes ----------
    def fetch_tasks(self) -> None:
        config = RequestConfig(url="/tasks", method="get", headers=self.auth.headers())
        data = self.api.fetch_data(config, show_success_toast=False)
        # réponse arrivée après démontage : ignorée
        if not self.mounted:
            return
        self.tasks = data["tasks"]
        logger.debug("Loaded %d tasks", len(self.tasks))

    def _write_then_refresh(self, config: RequestConfig) -> None:
        """Écriture puis rechargement, même en cas d'échec ; l'erreur de l'écriture reste celle relevée."""
        try:
            self.api.fetch_data(config)
        except ApiError:
            try:
                self.fetch_tasks()
            except ApiError as refresh_error:
                logger.warning("Reload after failed %s %s failed too: %s", config.method, config.url, refresh_error)
            raise
        self.fetch_tasks()

    def delete(self, task_id: int) -> None:
        config = RequestConfig(url=f"/tasks/{task_id}", method="delete", headers=self.auth.headers())
        self._write_then_refresh(config)

    def toggle_complete(self, task: TaskDict) -> None:
        config = RequestConfig(
            url=f"/tasks/{task['id']}",
            method="put",
            headers=self.auth.headers(),
            data={"description": task["description"], "completed": not task["completed"]},
        )
        self._write_then_refresh(config)

    # ---------- Filtre ----------
    def set_filter(self, status: Union[FilterStatus, str]) -> None:
        self.filter_status = FilterStatus(status)

    @property
    def visible_tasks(self) -> List[TaskDict]:
        return filter_tasks(self.tasks, self.filter_status)

    # ---------- Rendu ----------
    def rows(self) -> List[TaskRow]:
        return [
            TaskRow(key=t["id"], index=i, description=t["description"], completed=t["completed"])
            for i, t in enumerate(self.visible_tasks, start=1)
        ]

    def empty_message(self) -> Optional[str]:
        if self.visible_tasks:
            return None
        if not self.tasks:
            return "No tasks found"
        return f"No {self.filter_status.value} tasks"

    def go_to_add(self) -> None:
        self.navigator.navigate(TASK_ADD)

    def go_to_edit(self, task_id: int) -> None:
        self.navigator.navigate(task_edit_path(task_id))

    def render(self) -> str:
        lines: List[str] = []
        if self.tasks:
            lines.append(f"Your tasks ({len(self.tasks)})")
        lines.append(" ".join(
            f"[{s.value.capitalize()}]" if s is self.filter_status else s.value.capitalize()
            for s in FilterStatus
        ))
        if self.loading:
            lines.append("Loading...")
            return "\n".join(lines)

        empty = self.empty_message()
        if empty:
            lines.append(f"{empty}  + Add new task ({TASK_ADD})")
            return "\n".join(lines)

        for row in self.rows():
            box = "[x]" if row.completed else "[ ]"
            text = f"~~{row.description}~~" if row.completed else row.description
            lines.append(f"Task #{row.index} {box} {text}  ({row.edit_path})")
        return "\n".join(lines)
