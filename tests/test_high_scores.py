import pytest

from team_builder.db import repository
from team_builder.db.base import make_session_factory, session_scope
from team_builder.services.high_scores import HighScoreStore, InMemoryHighScoreStore
from team_builder.services.team_session import TeamSession

from conftest import EndlessSource, FakeStatProvider


@pytest.fixture
def factory(tmp_path):
    return make_session_factory(f"sqlite:///{tmp_path / 'scores.db'}")


def test_missing_high_score_loads_as_zero(factory):
    store = HighScoreStore(factory)
    assert store.load("visible") == 0
    assert store.load("hidden") == 0


def test_save_and_load_per_mode(factory):
    store = HighScoreStore(factory)
    store.save("visible", 143)
    store.save("hidden", 77)
    assert store.load("visible") == 143
    assert store.load("hidden") == 77

    # otra instancia sobre la misma base ve los valores
    assert HighScoreStore(factory).load("visible") == 143


def test_values_are_stored_as_strings_under_mode_key(factory):
    store = HighScoreStore(factory)
    store.save("visible", 65)
    with session_scope(factory) as s:
        assert repository.get_setting(s, "highScore_visible") == "65"
        assert repository.get_setting(s, "highScore_hidden") is None


def test_unparsable_value_loads_as_zero(factory):
    store = HighScoreStore(factory)
    with session_scope(factory) as s:
        repository.set_setting(s, repository.high_score_key("visible"), "not-a-number")
    assert store.load("visible") == 0


def test_overwrite_keeps_single_row(factory):
    store = HighScoreStore(factory)
    store.save("visible", 10)
    store.save("visible", 0)
    with session_scope(factory) as s:
        assert repository.load_high_score(s, "visible") == 0
        assert s.query(repository.Setting).count() == 1


def test_session_writes_through_to_database(factory):
    store = HighScoreStore(factory)
    session = TeamSession(EndlessSource(), FakeStatProvider(), store)
    session.generate_next()
    session.select_stat("hp")
    session.select_stat("speed")
    assert HighScoreStore(factory).load("visible") == 100

    reloaded = TeamSession(EndlessSource(), FakeStatProvider(), HighScoreStore(factory))
    assert reloaded.high_score == 100


def test_in_memory_store_contract():
    store = InMemoryHighScoreStore({"highScore_hidden": "abc"})
    assert store.load("hidden") == 0
    assert store.load("visible") == 0
    store.save("visible", 12)
    assert store.values == {"highScore_hidden": "abc", "highScore_visible": "12"}
    assert store.load("visible") == 12
