import os
from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

DEFAULT_DATABASE_URL = "sqlite:///./kisaanmitra.db"


def _database_url() -> str:
    """DATABASE_URL from the environment, local SQLite file otherwise."""
    url = os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL).strip()
    # Hosting providers still hand out the pre-SQLAlchemy-2 scheme
    if url.startswith("postgres://"):
        url = "postgresql+psycopg2://" + url[len("postgres://"):]
    return url


DATABASE_URL = _database_url()

# Requests are served from a threadpool, so SQLite must accept other threads
connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(DATABASE_URL, connect_args=connect_args, future=True)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def log_database_target():
    backend = engine.url.get_backend_name()
    print(f"[DB] backend={backend} url={engine.url.render_as_string(hide_password=True)}", flush=True)
    if backend == "sqlite" and engine.url.database:
        path = Path(engine.url.database).resolve()
        size = path.stat().st_size if path.exists() else 0
        print(f"[DB] sqlite file={path} exists={path.exists()} size_bytes={size}", flush=True)


try:
    log_database_target()
except OSError as exc:
    print(f"[DB] could not inspect database target: {exc!r}", flush=True)
