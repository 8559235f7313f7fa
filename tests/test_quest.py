import pytest

from bounceengine.quest import Objective, ObjectiveState, Quest


@pytest.fixture
def quest():
    return Quest(1, "Rescue", "Find the lost cat")


def add(quest, name, state=ObjectiveState.UNKNOWN):
    objective = Objective(quest, name, "", state)
    quest.objectives.append(objective)
    return objective


def test_incomplete_is_inactive_alias(quest):
    objective = Objective(quest, "a", state=ObjectiveState.ACTIVE)
    objective.ignore()
    assert objective.state is ObjectiveState.INCOMPLETE
    assert objective.state is ObjectiveState.INACTIVE


def test_objective_ids_are_sequential(quest):
    ids = [Objective(quest, f"o{n}").id for n in range(3)]
    assert ids == [0, 1, 2]
    assert quest.request_new_id() == 3


def test_objective_defaults(quest):
    objective = Objective(quest, "Look around")
    assert objective.state is ObjectiveState.UNKNOWN
    assert objective.description == ""
    assert objective.name == "Look around"


def test_discover_only_from_unknown(quest):
    objective = Objective(quest, "a")
    objective.discover()
    assert objective.state is ObjectiveState.ACTIVE
    objective.ignore()
    objective.discover()
    assert objective.state is ObjectiveState.INACTIVE


def test_highlight_ignore_forget(quest):
    objective = Objective(quest, "a", state=ObjectiveState.INACTIVE)
    objective.highlight()
    assert objective.state is ObjectiveState.ACTIVE
    objective.forget()
    assert objective.state is ObjectiveState.UNKNOWN


def test_failed_objective_is_frozen(quest):
    objective = Objective(quest, "a", state=ObjectiveState.ACTIVE)
    objective.fail()
    assert not objective.can_change()
    objective.complete()
    objective.highlight()
    assert objective.state is ObjectiveState.FAILED


def test_complete_objective_cannot_fail(quest):
    objective = Objective(quest, "a", state=ObjectiveState.ACTIVE)
    objective.complete()
    objective.fail()
    objective.forget()
    assert objective.state is ObjectiveState.COMPLETE


def test_quest_state_all_complete(quest):
    add(quest, "a").complete()
    add(quest, "b").complete()
    assert quest.state() is ObjectiveState.COMPLETE


def test_quest_state_all_failed(quest):
    add(quest, "a").fail()
    add(quest, "b").fail()
    assert quest.state() is ObjectiveState.FAILED


def test_quest_state_active_with_pending(quest):
    add(quest, "a", ObjectiveState.ACTIVE)
    add(quest, "b", ObjectiveState.INACTIVE)
    assert quest.state() is ObjectiveState.ACTIVE


def test_quest_state_active_without_pending_is_incomplete(quest):
    add(quest, "a", ObjectiveState.ACTIVE)
    add(quest, "b", ObjectiveState.UNKNOWN)
    assert quest.state() is ObjectiveState.INCOMPLETE


def test_quest_complete_skips_failed(quest):
    first = add(quest, "a", ObjectiveState.ACTIVE)
    second = add(quest, "b", ObjectiveState.ACTIVE)
    second.fail()
    quest.complete()
    assert first.state is ObjectiveState.COMPLETE
    assert second.state is ObjectiveState.FAILED