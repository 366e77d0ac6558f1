import pytest

from problems.registry import PROBLEMS, get_problem
from simulator.turing_machine import TuringMachine


@pytest.mark.parametrize("problem", PROBLEMS, ids=lambda p: p.name)
def test_every_case_produces_expected_tape(problem):
    machine = TuringMachine(problem.build_table())
    for tape, expected in problem.cases:
        assert machine.run(tape) == expected, tape


@pytest.mark.parametrize("problem", PROBLEMS, ids=lambda p: p.name)
def test_cases_keep_tape_length(problem):
    for tape, expected in problem.cases:
        assert len(tape) == len(expected)


def test_problem_names_are_unique():
    names = [p.name for p in PROBLEMS]
    assert len(names) == len(set(names))


def test_get_problem():
    assert get_problem("increment").name == "increment"
    with pytest.raises(ValueError, match="Unknown problem"):
        get_problem("matrix")


def test_build_table_returns_fresh_tables():
    problem = get_problem("dummy")
    first = problem.build_table()
    first.freeze()
    assert not problem.build_table().frozen


def test_palindrome_verdicts():
    machine = TuringMachine(get_problem("palindrome").build_table())
    assert machine.run(">aabaa#_")[-1] == "Y"
    assert machine.run(">aabba#_")[-1] == "N"


def test_count_zeros_restores_word():
    machine = TuringMachine(get_problem("count_zeros").build_table())
    assert machine.run(">000#___") == ">000#111"


def test_anagrams_verdicts():
    machine = TuringMachine(get_problem("anagrams").build_table())
    assert machine.run(">abab#bbaa$_")[-1] == "Y"
    assert machine.run(">abb#aab$_")[-1] == "N"
    assert machine.run(">ab#abb$_")[-1] == "N"
