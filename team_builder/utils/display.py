# team_builder/utils/display.py
from __future__ import annotations

import re

from ..models.pokemon import Candidate

PATH_TO_SPRITES = "sprites/normal/"
PATH_TO_SHINY_SPRITES = "sprites/shiny/"
SPRITE_EXTENSION = ".webp"

HIDDEN_VALUE = "???"

# los Nidoran ya llevan el símbolo en el nombre
_GENDERED_NAMES = {"Nidoran ♀", "Nidoran ♂"}


def sprite_path(pokemon: Candidate) -> str:
    """URL de PokéAPI si vino con los stats; si no, sprite local por nombre base."""
    if pokemon.stats:
        api_sprite = pokemon.stats.shiny_sprite_url if pokemon.shiny else pokemon.stats.sprite_url
        if api_sprite:
            return api_sprite

    path = PATH_TO_SHINY_SPRITES if pokemon.shiny else PATH_TO_SPRITES
    name = (pokemon.base_name or pokemon.name).lower()
    name = name.replace("é", "e").replace("♀", "f").replace("♂", "m")
    name = re.sub(r"['.:% \-]", "", name)
    return path + name + SPRITE_EXTENSION


def display_name(pokemon: Candidate) -> str:
    parts = []
    if pokemon.nature:
        parts.append(pokemon.nature)
    parts.append(pokemon.name)
    if pokemon.name not in _GENDERED_NAMES:
        if pokemon.gender == "male":
            parts.append("♂")
        elif pokemon.gender == "female":
            parts.append("♀")
    if pokemon.shiny:
        parts.append("★")
    return " ".join(parts)


def stat_display_value(value: int | None, mode: str) -> str:
    if mode == "hidden":
        return HIDDEN_VALUE
    return "—" if value is None else str(value)


def stat_bar_percent(value: int | None, max_value: int, mode: str = "visible") -> float:
    if mode == "hidden" or not value or max_value <= 0:
        return 0.0
    return min(100.0, value / max_value * 100)


def completion_message(score: int, high_score: int) -> str:
    if score == high_score and high_score > 0:
        title = "🎉 ¡Felicitaciones! ¡Nuevo récord!"
    else:
        title = "✅ ¡Equipo completo!"
    return f"{title}\n\nPuntaje final: {score}\nRécord: {high_score}"
