# team_builder/services/sprite_provider.py
import base64
import logging
from typing import Dict, Optional

import requests

from .stat_provider import POKEAPI_TIMEOUT

logger = logging.getLogger(__name__)


class SpriteProvider:
    """
    Descarga sprites PNG (artwork oficial de PokéAPI) y los devuelve en
    base64, que es lo que acepta tk.PhotoImage(data=...).
    Las rutas locales .webp no se pueden mostrar con Tk y se ignoran.
    """

    def __init__(self, timeout: float = POKEAPI_TIMEOUT, http: Optional[requests.Session] = None):
        self.timeout = timeout
        self.http = http or requests.Session()
        self._cache: Dict[str, Optional[str]] = {}

    def fetch(self, url: str) -> Optional[str]:
        if not url or not url.startswith(("http://", "https://")):
            return None
        if url in self._cache:
            return self._cache[url]
        try:
            r = self.http.get(url, timeout=self.timeout)
            r.raise_for_status()
            data = base64.b64encode(r.content).decode("ascii")
        except Exception as exc:
            logger.warning("No se pudo descargar el sprite %s: %s", url, exc)
            data = None
        self._cache[url] = data
        return data
