# team_builder/services/stat_provider.py
import logging
import os
import re
import unicodedata
from typing import Dict, Optional, Union

import requests

from ..models.pokemon import StatBundle

logger = logging.getLogger(__name__)

POKEAPI_ROOT = os.environ.get("POKEAPI_ROOT", "https://pokeapi.co/api/v2/pokemon/")
POKEAPI_TIMEOUT = float(os.environ.get("POKEAPI_TIMEOUT", "15"))

# nombre de stat en PokéAPI -> campo de StatBundle
API_STAT_MAP = {
    "hp": "hp",
    "attack": "attack",
    "defense": "defense",
    "special-attack": "special_attack",
    "special-defense": "special_defense",
    "speed": "speed",
}

REGIONAL_FORMS = ("alola", "galar", "hisui", "paldea")


def _slug(text: str) -> str:
    s = unicodedata.normalize("NFKD", (text or "").lower())
    s = "".join(ch for ch in s if not unicodedata.combining(ch))
    s = re.sub(r"[^a-z0-9\s\-]", "", s)
    s = re.sub(r"\s+", "-", s.strip())
    return s


def derive_stat_identifier(pokemon_id: int, form_name: Optional[str] = None) -> Union[int, str]:
    """
    Identificador para /pokemon/<id> en PokéAPI (heurística best-effort):
    - sin forma -> id numérico
    - Mega X / Mega Y / Mega -> <base>-mega-x | <base>-mega-y | <base>-mega
    - Gigantamax -> <base>-gmax
    - regionales (Alola, Galar, Hisui, Paldea) -> <base>-<región>
    - resto -> slug completo del nombre
    """
    if not form_name:
        return pokemon_id
    parts = form_name.split()
    base_slug = _slug(parts[0] if parts else form_name)
    form_slug = _slug(form_name)

    if "mega-x" in form_slug:
        return f"{base_slug}-mega-x"
    if "mega-y" in form_slug:
        return f"{base_slug}-mega-y"
    if "mega" in form_slug:
        return f"{base_slug}-mega"
    if "gigantamax" in form_slug:
        return f"{base_slug}-gmax"
    for region in REGIONAL_FORMS:
        if region in form_slug:
            return f"{base_slug}-{region}"
    return form_slug


def parse_stats_payload(data: Dict) -> StatBundle:
    """Convierte la respuesta JSON de /pokemon/<id> en un StatBundle."""
    values = {field: 0 for field in API_STAT_MAP.values()}
    for stat_obj in data["stats"]:
        field = API_STAT_MAP.get(stat_obj["stat"]["name"])
        if field:
            values[field] = int(stat_obj["base_stat"] or 0)

    sprites = data.get("sprites") or {}
    artwork = (sprites.get("other") or {}).get("official-artwork") or {}
    sprite_url = artwork.get("front_default") or sprites.get("front_default") or ""
    shiny_url = artwork.get("front_shiny") or sprites.get("front_shiny") or ""
    return StatBundle(sprite_url=sprite_url, shiny_sprite_url=shiny_url, **values)


class StatProvider:
    """
    Trae base stats + sprites desde PokéAPI.
    Nunca lanza: ante cualquier fallo devuelve StatBundle.default().
    """

    def __init__(self, root: str = POKEAPI_ROOT, timeout: float = POKEAPI_TIMEOUT,
                 http: Optional[requests.Session] = None):
        self.root = root if root.endswith("/") else root + "/"
        self.timeout = timeout
        self.http = http or requests.Session()
        self._cache: Dict[str, StatBundle] = {}

    def fetch_stats(self, pokemon_id: int, form_name: Optional[str] = None) -> StatBundle:
        identifier = derive_stat_identifier(pokemon_id, form_name)
        key = str(identifier)
        if key in self._cache:
            return self._cache[key]
        try:
            r = self.http.get(self.root + key, timeout=self.timeout)
            r.raise_for_status()
            bundle = parse_stats_payload(r.json())
        except Exception as exc:
            logger.error("Error trayendo stats de %s (%s): %s", pokemon_id, key, exc)
            return StatBundle.default()
        self._cache[key] = bundle
        return bundle
