"""Errores del armado de equipo.

Ninguno es fatal: el controlador traduce los que son avisos al usuario
(equipo completo, stat repetido, generación en curso) y la sesión queda
siempre en un estado válido.
"""


class TeamBuilderError(Exception):
    pass


class TeamFullError(TeamBuilderError):
    """Se pidió otro Pokémon con el equipo ya completo."""


class StatAlreadyUsedError(TeamBuilderError):
    def __init__(self, stat: str):
        super().__init__(f"El stat '{stat}' ya fue elegido.")
        self.stat = stat


class SessionBusyError(TeamBuilderError):
    """Ya hay una generación en curso."""


class InvalidStatError(TeamBuilderError, ValueError):
    def __init__(self, stat: str):
        super().__init__(f"Stat desconocido: '{stat}'.")
        self.stat = stat


class CandidateAlreadyCommittedError(TeamBuilderError):
    pass
