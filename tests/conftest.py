import pytest

from team_builder.models.pokemon import Candidate, StatBundle
from team_builder.services.high_scores import InMemoryHighScoreStore
from team_builder.services.team_session import TeamSession, TeamSessionListener


def make_bundle(hp=50, attack=50, defense=50, special_attack=50, special_defense=50, speed=50, **kw):
    return StatBundle(hp=hp, attack=attack, defense=defense, special_attack=special_attack,
                      special_defense=special_defense, speed=speed, **kw)


class FakeSource:
    """Entrega candidatos en orden; vacío cuando se acaban."""

    def __init__(self, candidates=None, error=None):
        self.candidates = list(candidates or [])
        self.error = error
        self.requested = []

    def get_candidates(self, options):
        self.requested.append(options)
        if self.error:
            raise self.error
        if not self.candidates:
            return []
        return [self.candidates.pop(0)]


class EndlessSource(FakeSource):
    def get_candidates(self, options):
        self.requested.append(options)
        n = len(self.requested)
        return [Candidate(id=n, name=f"Mon{n}", base_name=f"Mon{n}")]


class FakeStatProvider:
    def __init__(self, by_id=None, default=None):
        self.by_id = by_id or {}
        self.default = default or StatBundle.default()
        self.calls = []

    def fetch_stats(self, pokemon_id, form_name=None):
        self.calls.append((pokemon_id, form_name))
        return self.by_id.get(pokemon_id, self.default)


class RecordingListener(TeamSessionListener):
    def __init__(self):
        self.events = []

    def on_state_changed(self):
        self.events.append(("state",))

    def on_loading_changed(self, loading):
        self.events.append(("loading", loading))

    def on_no_candidate_available(self):
        self.events.append(("no_candidate",))

    def on_team_complete(self, is_new_high_score, had_positive_high_score):
        self.events.append(("complete", is_new_high_score, had_positive_high_score))

    def on_team_full(self):
        self.events.append(("team_full",))

    def on_duplicate_stat_rejected(self):
        self.events.append(("duplicate",))

    def on_busy(self):
        self.events.append(("busy",))

    def named(self, name):
        return [e for e in self.events if e[0] == name]


@pytest.fixture
def listener():
    return RecordingListener()


@pytest.fixture
def store():
    return InMemoryHighScoreStore()


@pytest.fixture
def endless_session(store, listener):
    return TeamSession(EndlessSource(), FakeStatProvider(), store, listener=listener)
