from dataclasses import dataclass, field
from typing import Dict, Optional

from ..services.errors import CandidateAlreadyCommittedError

TEAM_SIZE = 6

STAT_KEYS = ("hp", "attack", "defense", "special_attack", "special_defense", "speed")

# Etiquetas para botones y para la grilla de stats elegidos
STAT_LABELS = {
    "hp": "HP",
    "attack": "Attack",
    "defense": "Defense",
    "special_attack": "Sp. Atk",
    "special_defense": "Sp. Def",
    "speed": "Speed",
}
STAT_SHORT_LABELS = {
    "hp": "HP",
    "attack": "ATK",
    "defense": "DEF",
    "special_attack": "SP.A",
    "special_defense": "SP.D",
    "speed": "SPD",
}

TEAM_MODES = ("visible", "hidden")
DEFAULT_TEAM_MODE = "visible"

DEFAULT_STAT_VALUE = 50


class SessionState:
    IDLE = "idle"
    GENERATING = "generating"
    AWAITING_SELECTION = "awaiting_selection"
    COMPLETE = "complete"


@dataclass(frozen=True)
class StatBundle:
    hp: int = 0
    attack: int = 0
    defense: int = 0
    special_attack: int = 0
    special_defense: int = 0
    speed: int = 0
    sprite_url: str = ""
    shiny_sprite_url: str = ""

    @classmethod
    def default(cls) -> "StatBundle":
        """Stats de respaldo cuando PokéAPI no responde (50 en todo, sin sprites)."""
        return cls(**{k: DEFAULT_STAT_VALUE for k in STAT_KEYS})

    def get(self, stat: str) -> int:
        if stat not in STAT_KEYS:
            return 0
        return int(getattr(self, stat) or 0)

    def as_dict(self) -> Dict[str, int]:
        return {k: self.get(k) for k in STAT_KEYS}

    def max_core(self) -> int:
        return max(max(self.as_dict().values()), 1)


@dataclass
class Candidate:
    id: int
    name: str
    base_name: str
    shiny: bool = False
    gender: Optional[str] = None   # "male" | "female" | None
    nature: Optional[str] = None
    show_sprite: bool = True
    show_name: bool = True
    stats: Optional[StatBundle] = None
    selected_stat: Optional[str] = None
    selected_stat_value: Optional[int] = None
    generation: Optional[int] = field(default=None, compare=False)

    @property
    def form_name(self) -> Optional[str]:
        # si el nombre mostrado difiere del base, es una forma/variante
        return self.name if self.base_name != self.name else None

    @property
    def is_committed(self) -> bool:
        return self.selected_stat is not None

    def commit(self, stat: str, value: int) -> None:
        if self.is_committed:
            raise CandidateAlreadyCommittedError(
                f"{self.name} ya tiene stat asignado ({self.selected_stat})."
            )
        self.selected_stat = stat
        self.selected_stat_value = int(value)
