from sqlmodel import Session

from taskapp.core.config import settings
from taskapp.core.logging import setup_logging
from taskapp.db.session import engine, init_db
from taskapp.db.seed import load_seed_yaml, seed_all


def run_seed(seed_path: str = "taskapp/db/seed_data.yaml") -> None:
    setup_logging(level=settings.LOG_LEVEL)
    init_db()
    with Session(engine) as session:
        seed_all(session=session, data=load_seed_yaml(seed_path))


if __name__ == "__main__":
    run_seed()
