from __future__ import annotations

from sqlalchemy import Engine
from sqlalchemy.orm import Session
from .base import Base, engine as default_engine
from .models import Setting

STORAGE_HIGH_SCORE_KEY_PREFIX = "highScore_"

def init_db(bind: Engine | None = None):
    Base.metadata.create_all(bind=bind or default_engine)

def get_setting(session: Session, key: str) -> str | None:
    row = session.get(Setting, key)
    return row.value if row else None

def set_setting(session: Session, key: str, value: str) -> Setting:
    row = session.get(Setting, key)
    if not row:
        row = Setting(key=key)
        session.add(row)
    row.value = value
    session.flush()
    return row

def high_score_key(mode: str) -> str:
    return f"{STORAGE_HIGH_SCORE_KEY_PREFIX}{mode}"

def load_high_score(session: Session, mode: str) -> int:
    stored = get_setting(session, high_score_key(mode))
    if not stored:
        return 0
    try:
        return int(stored.strip())
    except ValueError:
        return 0

def save_high_score(session: Session, mode: str, score: int) -> None:
    set_setting(session, high_score_key(mode), str(int(score)))
