from __future__ import annotations
import os
from contextlib import contextmanager
from typing import Iterator
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase

DEFAULT_DB_PATH = os.path.join(os.path.dirname(__file__), "..", "..", "team_builder.db")
DEFAULT_DB_URL = os.environ.get("TEAM_DB_URL", f"sqlite:///{os.path.abspath(DEFAULT_DB_PATH)}")

engine = create_engine(DEFAULT_DB_URL, echo=False, future=True)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)

class Base(DeclarativeBase):
    pass

def make_session_factory(url: str) -> sessionmaker:
    """Engine + sessionmaker para otra base (tests, otra ruta)."""
    eng = create_engine(url, echo=False, future=True)
    return sessionmaker(bind=eng, autoflush=False, autocommit=False, future=True)

@contextmanager
def session_scope(factory: sessionmaker | None = None) -> Iterator:
    session = (factory or SessionLocal)()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
