from typing import List


class Navigator:
    """Routeur minimal : garde le chemin courant et l'historique."""

    def __init__(self, path: str = "/") -> None:
        self.path = path
        self.history: List[str] = [path]

    def navigate(self, path: str) -> None:
        self.path = path
        self.history.append(path)


def task_edit_path(task_id: int) -> str:
    return f"/tasks/{task_id}"


TASKS_HOME = "/"
TASK_ADD = "/tasks/add"
