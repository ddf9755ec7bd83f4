from ..models.pokemon import TEAM_SIZE
from ..services.errors import SessionBusyError, StatAlreadyUsedError, TeamFullError
from ..services.team_session import TeamSession

class TeamBuilderController:
    """Puente entre la UI y TeamSession: convierte los rechazos en avisos."""

    def __init__(self, session: TeamSession):
        self.session = session

    @property
    def listener(self):
        return self.session.listener

    def initialize(self) -> bool:
        # primer Pokémon automático si no hay nada en curso
        if not self.session.roster and self.session.current_candidate is None:
            return self.generate()
        self.listener.on_state_changed()
        return True

    def generate(self) -> bool:
        try:
            self.session.generate_next()
        except TeamFullError:
            self.listener.on_team_full()
            return False
        except SessionBusyError:
            self.listener.on_busy()
            return False
        return True

    def select(self, stat: str) -> bool:
        try:
            self.session.select_stat(stat)
        except StatAlreadyUsedError:
            self.listener.on_duplicate_stat_rejected()
            return False
        except SessionBusyError:
            self.listener.on_busy()
            return False
        return True

    def new_team(self, reset_high_score: bool = False) -> None:
        self.session.start_new_team(reset_high_score)

    def change_mode(self, mode: str) -> None:
        self.session.set_mode(mode)

    def progress(self) -> str:
        return f"Progreso: {len(self.session.roster)} / {TEAM_SIZE} Pokémon"
