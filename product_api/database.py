# product_api/database.py
from __future__ import annotations

from typing import Generator

from sqlalchemy import MetaData, create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import NullPool, StaticPool

from product_api.core.settings import settings

# -----------------------------
# Helpers
# -----------------------------
_MEMORY_URLS = {"sqlite://", "sqlite:///:memory:", "sqlite+pysqlite://", "sqlite+pysqlite:///:memory:"}


def mask_url(url: str) -> str:
    """Ascunde parola din DSN înainte de a-l scrie în loguri."""
    if "://" not in url:
        return url
    scheme, rest = url.split("://", 1)
    if "@" not in rest or ":" not in rest.split("@", 1)[0]:
        return url
    creds, tail = rest.split("@", 1)
    user = creds.split(":", 1)[0]
    return f"{scheme}://{user}:***@{tail}"


# -----------------------------
# Config din settings
# -----------------------------
DATABASE_URL = (settings.DATABASE_URL or "").strip()
if not DATABASE_URL:
    raise RuntimeError("DATABASE_URL este gol. Setează o valoare validă.")

# -----------------------------
# Naming convention pentru Alembic/op.f()
# -----------------------------
NAMING_CONVENTION = {
    "ix": "ix_%(table_name)s_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

metadata = MetaData(naming_convention=NAMING_CONVENTION)
Base = declarative_base(metadata=metadata)


# -----------------------------
# Engine factory
# -----------------------------
def build_engine_kwargs(url: str = DATABASE_URL) -> dict:
    kwargs: dict = {
        "echo": settings.DB_ECHO,
        "pool_pre_ping": not settings.DB_DISABLE_PRE_PING,
    }

    if url.startswith("sqlite"):
        # SQLite: driverul e single-thread → dezactivează check_same_thread
        kwargs["connect_args"] = {"check_same_thread": False}
        # In-memory → StaticPool (altfel fiecare conexiune are DB separat)
        if url in _MEMORY_URLS:
            kwargs["poolclass"] = StaticPool
        else:
            kwargs["poolclass"] = NullPool
    else:
        # Postgres / MySQL
        kwargs.update(
            {
                "pool_size": settings.DB_POOL_SIZE,
                "max_overflow": settings.DB_MAX_OVERFLOW,
                "pool_recycle": settings.DB_POOL_RECYCLE,
                "pool_timeout": settings.DB_POOL_TIMEOUT,
            }
        )
    return kwargs


engine: Engine = create_engine(DATABASE_URL, **build_engine_kwargs())

# -----------------------------
# Session factory
# -----------------------------
# expire_on_commit=False → obiectele rămân utilizabile după commit (evită re-load imediat)
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency: o sesiune SQLAlchemy per request, închisă garantat.
    Face rollback automat dacă apare o excepție în request handler.
    """
    db: Session = SessionLocal()
    try:
        yield db
        # commit-ul e responsabilitatea store adapter-ului (crud)
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def init_db_if_requested() -> bool:
    """
    Creează tabelele din modele când SQLALCHEMY_CREATE_ALL=1.
    Util în prototip/demo; în producție folosește Alembic.
    """
    if not settings.SQLALCHEMY_CREATE_ALL:
        return False
    from product_api import models  # noqa: F401
    Base.metadata.create_all(bind=engine)
    return True


__all__ = [
    "engine",
    "SessionLocal",
    "Base",
    "get_db",
    "init_db_if_requested",
    "mask_url",
]
