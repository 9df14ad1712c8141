"""
➡️ But : Configurer les logs de l'application une seule fois, au démarrage.

setup_logging() installe :

un handler console (lisible, filtré : nos logs au niveau choisi, le reste à partir de WARNING)

un handler fichier optionnel (tout, niveau DEBUG) si un dossier est fourni

🔹 Avantages :

Chaque module fait simplement `logger = logging.getLogger(__name__)`.

Les libs bavardes (sqlalchemy, httpx, uvicorn.access) ne noient pas la console.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, Union

_APP_LOGGER = "taskapp"


class _ConsoleNoiseFilter(logging.Filter):
    """Laisse passer nos logs ; les tiers seulement à partir de WARNING."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == _APP_LOGGER or record.name.startswith(_APP_LOGGER + "."):
            return True
        # uvicorn.error porte les messages de démarrage du serveur
        if record.name.startswith("uvicorn.error"):
            return record.levelno >= logging.INFO
        return record.levelno >= logging.WARNING


def setup_logging(
    *,
    level: Union[int, str] = logging.INFO,
    log_dir: Optional[Union[str, Path]] = None,
) -> None:
    """
    Configure le logger racine. À appeler UNE fois, avant le premier logger.info.
    Un second appel remplace les handlers (pas de doublons).
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    if log_dir:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_dir / "tasks.log"), encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(fmt)
        root.addHandler(fh)

    logging.captureWarnings(True)
