import pytest

from quest.deduction.verdict import (
    SUSTAIN_THRESHOLD,
    clue_associations,
    count_matches,
    evaluate_accusation,
    judge,
)
from quest.domain.enums import Command, Verdict
from quest.investigation.session import start_session
from quest.suspects.directory import SuspectDirectory


def test_judge_threshold():
    assert SUSTAIN_THRESHOLD == 2
    assert judge(0) == Verdict.NOT_SUSTAINED
    assert judge(1) == Verdict.NOT_SUSTAINED
    assert judge(2) == Verdict.SUSTAINED
    assert judge(5) == Verdict.SUSTAINED


def test_count_is_case_insensitive_full_match():
    directory = SuspectDirectory.from_pairs(
        [("a", "Jardineiro"), ("b", "JARDINEIRO"), ("c", "Jardineiro Chefe"), ("d", "Marido")]
    )
    assert count_matches(["a", "b", "c", "d"], directory, "jardineiro") == 2
    assert count_matches(["a", "b", "c", "d"], directory, "Jardin") == 0


def test_count_is_order_invariant():
    directory = SuspectDirectory.from_pairs([("a", "X"), ("b", "X"), ("c", "Y")])
    assert count_matches(["a", "b", "c"], directory, "x") == count_matches(["c", "b", "a"], directory, "x")


def test_clues_without_entry_never_match():
    directory = SuspectDirectory()
    assert count_matches(["orphan"], directory, "Unknown") == 0


def test_blank_accusation_rejected():
    with pytest.raises(ValueError):
        evaluate_accusation([], SuspectDirectory(), "   ")


def test_accusation_without_clues():
    result = evaluate_accusation([], SuspectDirectory(), "Marido")
    assert result.match_count == 0
    assert result.verdict == Verdict.NOT_SUSTAINED
    assert result.explanation[0] == "No clues were collected."


def test_kitchen_path_does_not_sustain(mansion_case):
    session = start_session(mansion_case)
    session.explorer.apply(Command.RIGHT)
    assert session.explorer.apply(Command.LEFT).blocked
    session.explorer.apply(Command.EXIT)
    assert set(session.collected()) == {"pegadas molhadas", "pegador de panelas sujo"}
    result = session.accuse("Jardineiro")
    assert result.match_count == 1
    assert result.verdict == Verdict.NOT_SUSTAINED
    assert not result.is_sustained


def test_garden_path_sustains(mansion_case):
    session = start_session(mansion_case)
    for _ in range(3):
        session.explorer.apply(Command.LEFT)
    assert session.explorer.current.name == "Jardim"
    assert set(session.collected()) == {
        "pegadas molhadas",
        "charuto queimado",
        "marcador de livro rasgado",
        "sementes pisoteadas",
    }
    result = session.accuse("Jardineiro")
    assert result.match_count == 2
    assert result.verdict == Verdict.SUSTAINED
    assert session.accuse("jardineiro").match_count == 2
    assert session.accuse("Marido").verdict == Verdict.NOT_SUSTAINED


def test_associations_are_ordered_with_unknown_default():
    directory = SuspectDirectory.from_pairs([("b clue", "Marido")])
    associations = clue_associations(["a clue", "b clue"], directory)
    assert [(a.clue, a.suspect) for a in associations] == [
        ("a clue", "Unknown"),
        ("b clue", "Marido"),
    ]


def test_surrounding_whitespace_ignored_in_both_entry_points():
    directory = SuspectDirectory.from_pairs([("a", "Jardineiro"), ("b", "Jardineiro")])
    assert count_matches(["a", "b"], directory, " Jardineiro ") == 2
    result = evaluate_accusation(["a", "b"], directory, " Jardineiro ")
    assert result.match_count == 2
    assert result.accused == "Jardineiro"
