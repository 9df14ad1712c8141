"""
➡️ But : Vue "formulaire de tâche", en mode ajout ou mise à jour.

Le mode dépend uniquement de la présence d'un identifiant de tâche :

pas d'id → "add" (formulaire vide, completed = False)

id présent → "update" (la tâche est chargée au montage, le bouton Reset restaure ses valeurs)

La soumission valide d'abord le formulaire (aucun appel réseau si invalide), puis envoie un TaskDraft :
POST /tasks ou PUT /tasks/{id} selon que le brouillon porte un id ou non. Retour à la liste en cas de succès.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from taskapp.client.fetch import ApiClient, RequestConfig
from taskapp.client.navigation import TASKS_HOME, Navigator
from taskapp.client.session import AuthState
from taskapp.client.validations import validate_many_fields

ADD = "add"
UPDATE = "update"


@dataclass(frozen=True)
class TaskDraft:
    """Corps commun aux deux opérations ; `id` absent = création."""

    description: str
    completed: bool = False
    id: Optional[int] = None

    @property
    def is_update(self) -> bool:
        return self.id is not None

    def payload(self) -> Dict[str, Any]:
        return {"description": self.description, "completed": self.completed}

    def to_request(self, headers: Dict[str, str]) -> RequestConfig:
        if self.is_update:
            return RequestConfig(url=f"/tasks/{self.id}", method="put", data=self.payload(), headers=headers)
        return RequestConfig(url="/tasks", method="post", data=self.payload(), headers=headers)


def _blank_form() -> Dict[str, Any]:
    return {"description": "", "completed": False}


class TaskFormView:
    def __init__(
        self,
        api: ApiClient,
        auth: AuthState,
        navigator: Navigator,
        task_id: Optional[int] = None,
    ):
        self.api = api
        self.auth = auth
        self.navigator = navigator
        self.task_id = task_id
        self.task: Optional[Dict[str, Any]] = None
        self.form_data: Dict[str, Any] = _blank_form()
        self.form_errors: Dict[str, str] = {}

    @property
    def mode(self) -> str:
        return ADD if self.task_id is None else UPDATE

    @property
    def title(self) -> str:
        return "Add Task" if self.mode == ADD else "Update Task"

    @property
    def loading(self) -> bool:
        return self.api.loading

    def mount(self) -> None:
        if self.mode != UPDATE:
            return
        config = RequestConfig(url=f"/tasks/{self.task_id}", method="get", headers=self.auth.headers())
        data = self.api.fetch_data(config, show_success_toast=False)
        self.task = data["task"]
        self.form_data = {
            "description": self.task["description"],
            "completed": self.task["completed"],
        }

    def change(self, name: str, value: Any) -> None:
        if name not in self.form_data:
            raise KeyError(f"Unknown task field: {name!r}")
        # la case à cocher ne produit que des booléens
        if name == "completed" and not isinstance(value, bool):
            raise TypeError(f"'completed' expects a bool, got {type(value).__name__}")
        self.form_data[name] = value

    def reset(self) -> None:
        if self.mode != UPDATE or self.task is None:
            return
        self.form_data = {
            "description": self.task["description"],
            "completed": self.task["completed"],
        }

    def field_error(self, field: str) -> Optional[str]:
        return self.form_errors.get(field)

    def draft(self) -> TaskDraft:
        return TaskDraft(
            description=self.form_data["description"],
            completed=self.form_data["completed"],
            id=self.task_id,
        )

    def submit(self) -> bool:
        """Retourne False si le formulaire est invalide ; ApiError remonte si le serveur refuse."""
        errors = validate_many_fields("task", self.form_data)
        self.form_errors = {}
        if errors:
            self.form_errors = {e["field"]: e["err"] for e in errors}
            return False

        self.api.fetch_data(self.draft().to_request(self.auth.headers()))
        self.navigator.navigate(TASKS_HOME)
        return True

    def cancel(self) -> None:
        self.navigator.navigate(TASKS_HOME)
