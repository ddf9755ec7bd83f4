# team_builder/services/pokemon_source.py
import json
import logging
import os
import random
from dataclasses import dataclass, replace
from typing import Dict, List, Optional, Sequence

from ..models.pokemon import Candidate

logger = logging.getLogger(__name__)

DEFAULT_REGISTRY_PATH = os.path.join(os.path.dirname(__file__), "..", "data", "pokemon.json")

NATURES = sorted([
    'Adamant', 'Lonely', 'Brave', 'Naughty',
    'Impish', 'Bold', 'Relaxed', 'Lax',
    'Modest', 'Mild', 'Quiet', 'Rash',
    'Calm', 'Gentle', 'Sassy', 'Careful',
    'Jolly', 'Hasty', 'Naive', 'Timid',
    'Serious', 'Bashful', 'Docile', 'Hardy', 'Quirky',
])

SHINY_CHANCE = 1 / 4096


@dataclass
class GenerationOptions:
    n: int = 1
    generations: Optional[List[int]] = None   # None = todas
    include_forms: bool = True
    shiny_chance: float = SHINY_CHANCE
    natures: bool = True
    genders: bool = True
    show_sprites: bool = True
    show_names: bool = True

    def with_count(self, n: int) -> "GenerationOptions":
        return replace(self, n=n)


def load_registry(path: str = DEFAULT_REGISTRY_PATH) -> List[Dict]:
    with open(os.path.abspath(path), "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"Registro de Pokémon inválido en {path}: se esperaba una lista.")
    return data


def choose_random(entries: Sequence[Dict], options: GenerationOptions,
                  rng: Optional[random.Random] = None) -> List[Candidate]:
    """
    Elige hasta options.n entradas distintas y les tira los cosméticos
    (shiny, género, naturaleza).
    """
    rng = rng or random.Random()
    if not entries or options.n <= 0:
        return []
    picked = rng.sample(list(entries), min(options.n, len(entries)))
    out = []
    for e in picked:
        gender = None
        if options.genders and not e.get("genderless"):
            gender = rng.choice(("male", "female"))
        out.append(Candidate(
            id=int(e["id"]),
            name=e["name"],
            base_name=e.get("baseName") or e["name"],
            shiny=rng.random() < options.shiny_chance,
            gender=gender,
            nature=rng.choice(NATURES) if options.natures else None,
            show_sprite=options.show_sprites,
            show_name=options.show_names,
            generation=e.get("generation"),
        ))
    return out


class PokemonSource:
    """Candidatos a partir del registro JSON local."""

    def __init__(self, entries: Optional[Sequence[Dict]] = None, rng: Optional[random.Random] = None):
        self.entries = list(entries) if entries is not None else load_registry()
        self.rng = rng or random.Random()

    def get_eligible(self, options: GenerationOptions) -> List[Dict]:
        out = []
        for e in self.entries:
            if options.generations and e.get("generation") not in options.generations:
                continue
            if not options.include_forms and e.get("form"):
                continue
            out.append(e)
        return out

    def get_candidates(self, options: GenerationOptions) -> List[Candidate]:
        eligible = self.get_eligible(options)
        if not eligible:
            logger.warning("No hay Pokémon elegibles con los filtros actuales.")
        return choose_random(eligible, options, self.rng)
