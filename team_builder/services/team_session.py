# team_builder/services/team_session.py
"""Estado y lógica del armado de equipo.

Máquina de estados:
    idle -> generating -> awaiting_selection -> (select_stat) -> idle | complete
    cualquier estado -> idle con start_new_team / set_mode

El puntaje es la suma de los stats elegidos; el récord se guarda por modo
cada vez que se supera.
"""
from __future__ import annotations

import logging
from typing import Callable, List, Optional

from ..models.pokemon import (
    Candidate, SessionState, StatBundle,
    STAT_KEYS, TEAM_MODES, TEAM_SIZE, DEFAULT_TEAM_MODE,
)
from .errors import InvalidStatError, SessionBusyError, StatAlreadyUsedError, TeamFullError
from .pokemon_source import GenerationOptions

logger = logging.getLogger(__name__)


class TeamSessionListener:
    """Callbacks para la capa de presentación. Por defecto no hacen nada."""

    def on_state_changed(self) -> None:
        pass

    def on_loading_changed(self, loading: bool) -> None:
        pass

    def on_no_candidate_available(self) -> None:
        pass

    def on_team_complete(self, is_new_high_score: bool, had_positive_high_score: bool) -> None:
        pass

    # avisos que emite el controlador
    def on_team_full(self) -> None:
        pass

    def on_duplicate_stat_rejected(self) -> None:
        pass

    def on_busy(self) -> None:
        pass


class TeamSession:
    def __init__(self, source, stat_provider, store,
                 listener: TeamSessionListener | None = None,
                 options_provider: Callable[[], GenerationOptions] | None = None,
                 mode: str = DEFAULT_TEAM_MODE):
        if mode not in TEAM_MODES:
            raise ValueError(f"Modo inválido: '{mode}'.")
        self.source = source
        self.stat_provider = stat_provider
        self.store = store
        self.listener = listener or TeamSessionListener()
        self.options_provider = options_provider or GenerationOptions

        self.mode = mode
        self.current_candidate: Optional[Candidate] = None
        self.roster: List[Candidate] = []
        self.current_score = 0
        self.used_stats: set[str] = set()
        self.high_score = store.load(mode)

        self._state = SessionState.IDLE
        self._loading = False

    # ---------- lectura ----------
    @property
    def state(self) -> str:
        return self._state

    @property
    def loading(self) -> bool:
        return self._loading

    @property
    def is_complete(self) -> bool:
        return len(self.roster) >= TEAM_SIZE

    def remaining_stats(self) -> list[str]:
        return [k for k in STAT_KEYS if k not in self.used_stats]

    def member_for_stat(self, stat: str) -> Optional[Candidate]:
        for c in self.roster:
            if c.selected_stat == stat:
                return c
        return None

    def snapshot(self) -> dict:
        return {
            "state": self._state,
            "mode": self.mode,
            "roster": [(c.name, c.selected_stat, c.selected_stat_value) for c in self.roster],
            "current_score": self.current_score,
            "high_score": self.high_score,
            "used_stats": sorted(self.used_stats),
            "current": self.current_candidate.name if self.current_candidate else None,
        }

    # ---------- operaciones ----------
    def _set_loading(self, value: bool) -> None:
        self._loading = value
        self.listener.on_loading_changed(value)

    def generate_next(self, options: GenerationOptions | None = None) -> Optional[Candidate]:
        if self.is_complete:
            raise TeamFullError("El equipo ya está completo. Empieza uno nuevo para seguir.")
        if self._state == SessionState.GENERATING:
            raise SessionBusyError("Ya se está generando un Pokémon.")

        previous_state = self._state
        self._state = SessionState.GENERATING
        self._set_loading(True)
        try:
            opts = (options or self.options_provider()).with_count(1)
            try:
                candidates = self.source.get_candidates(opts)
            except Exception:
                logger.exception("Fallo generando candidato")
                candidates = []

            if not candidates:
                self.current_candidate = None
                self._state = SessionState.IDLE
                logger.warning("Sin candidato disponible")
                self.listener.on_no_candidate_available()
                self.listener.on_state_changed()
                return None

            candidate = candidates[0]
            try:
                stats = self.stat_provider.fetch_stats(candidate.id, candidate.form_name)
            except Exception:
                logger.exception("StatProvider lanzó una excepción; se usan stats por defecto")
                stats = StatBundle.default()

            candidate.stats = stats
            self.current_candidate = candidate
            self._state = SessionState.AWAITING_SELECTION
        finally:
            if self._state == SessionState.GENERATING:
                # salida por excepción inesperada
                self._state = previous_state if self.current_candidate else SessionState.IDLE
            self._set_loading(False)

        self.listener.on_state_changed()
        return candidate

    def select_stat(self, stat: str) -> Optional[Candidate]:
        if stat not in STAT_KEYS:
            raise InvalidStatError(stat)
        candidate = self.current_candidate
        if (self._state != SessionState.AWAITING_SELECTION
                or candidate is None or candidate.stats is None):
            logger.debug("select_stat(%s) ignorado en estado %s", stat, self._state)
            return None
        if stat in self.used_stats:
            raise StatAlreadyUsedError(stat)

        value = candidate.stats.get(stat)
        new_score = self.current_score + value
        # se persiste antes de tocar el estado: si falla, la sesión queda igual
        if new_score > self.high_score:
            self.store.save(self.mode, new_score)
            self.high_score = new_score

        candidate.commit(stat, value)
        self.used_stats.add(stat)
        self.current_score = new_score
        self.roster.append(candidate)
        self.current_candidate = None
        logger.info("%s -> %s (%s). Puntaje: %s", candidate.name, stat, value, self.current_score)

        if self.is_complete:
            self._state = SessionState.COMPLETE
            self.listener.on_state_changed()
            self.listener.on_team_complete(
                self.current_score == self.high_score,
                self.high_score > 0,
            )
        else:
            self._state = SessionState.IDLE
            self.listener.on_state_changed()
            self.generate_next()
        return candidate

    def start_new_team(self, reset_high_score: bool = False) -> None:
        self.roster = []
        self.current_score = 0
        self.current_candidate = None
        self.used_stats.clear()
        self._state = SessionState.IDLE

        if reset_high_score:
            self.high_score = 0
            self.store.save(self.mode, 0)

        self.listener.on_state_changed()

    def set_mode(self, mode: str) -> None:
        if mode not in TEAM_MODES:
            raise ValueError(f"Modo inválido: '{mode}'.")
        if self.mode == mode:
            return
        self.mode = mode
        self.start_new_team(reset_high_score=True)
