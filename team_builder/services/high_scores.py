# team_builder/services/high_scores.py
import logging
from typing import Dict, Optional

from sqlalchemy.orm import sessionmaker

from ..db.base import session_scope
from ..db import repository

logger = logging.getLogger(__name__)


class HighScoreStore:
    """Récord por modo sobre la tabla settings (clave 'highScore_<modo>')."""

    def __init__(self, factory: Optional[sessionmaker] = None):
        self.factory = factory
        bind = factory.kw.get("bind") if factory is not None else None
        repository.init_db(bind)

    def load(self, mode: str) -> int:
        with session_scope(self.factory) as s:
            return repository.load_high_score(s, mode)

    def save(self, mode: str, score: int) -> None:
        with session_scope(self.factory) as s:
            repository.save_high_score(s, mode, score)
        logger.info("High score guardado: %s = %s", repository.high_score_key(mode), score)


class InMemoryHighScoreStore:
    """Mismo contrato que HighScoreStore, sin base de datos."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.values: Dict[str, str] = dict(initial or {})

    def load(self, mode: str) -> int:
        stored = self.values.get(repository.high_score_key(mode))
        try:
            return int(stored) if stored else 0
        except ValueError:
            return 0

    def save(self, mode: str, score: int) -> None:
        self.values[repository.high_score_key(mode)] = str(int(score))
