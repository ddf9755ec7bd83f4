from team_builder.controllers.team_builder_controller import TeamBuilderController
from team_builder.models.pokemon import STAT_KEYS
from team_builder.services.team_session import TeamSession

from conftest import EndlessSource, FakeStatProvider


def test_initialize_generates_first_candidate(endless_session):
    controller = TeamBuilderController(endless_session)
    assert controller.initialize()
    assert endless_session.current_candidate is not None
    assert controller.progress() == "Progreso: 0 / 6 Pokémon"


def test_initialize_with_pending_candidate_only_refreshes(endless_session, listener):
    endless_session.generate_next()
    controller = TeamBuilderController(endless_session)
    requested = len(endless_session.source.requested)
    controller.initialize()
    assert len(endless_session.source.requested) == requested
    assert listener.events[-1] == ("state",)


def test_duplicate_stat_becomes_notice(endless_session, listener):
    controller = TeamBuilderController(endless_session)
    controller.generate()
    assert controller.select("hp")
    assert not controller.select("hp")
    assert listener.named("duplicate") == [("duplicate",)]
    assert len(endless_session.roster) == 1


def test_team_full_becomes_notice(endless_session, listener):
    controller = TeamBuilderController(endless_session)
    controller.generate()
    for key in STAT_KEYS:
        controller.select(key)
    assert not controller.generate()
    assert listener.named("team_full") == [("team_full",)]
    assert len(endless_session.roster) == 6


def test_new_team_and_mode_change(store, listener):
    session = TeamSession(EndlessSource(), FakeStatProvider(), store, listener=listener)
    controller = TeamBuilderController(session)
    controller.generate()
    controller.select("attack")
    controller.new_team()
    assert session.roster == [] and session.high_score == 50

    controller.change_mode("hidden")
    assert session.mode == "hidden"
    assert session.high_score == 0
