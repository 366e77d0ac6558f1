from multiprocessing.pool import ThreadPool

import pytest

from problems.increment import INCREMENT
from simulator.errors import OutOfBoundsHead, StepBudgetExceeded, TableFrozen, UndefinedTransition
from simulator.transition_table import Move, TransitionTable
from simulator.turing_machine import TuringMachine


@pytest.fixture
def increment():
    return TuringMachine(INCREMENT.build_table())


@pytest.mark.parametrize("tape, expected", [
    (">0001#", ">0010#"),
    (">0000#", ">0001#"),
    (">1111#", ">0000#"),
    (">0101#", ">0110#"),
])
def test_binary_increment(increment, tape, expected):
    assert increment.run(tape) == expected


def test_carry_overflow_halts_on_sentinel(increment):
    outcome = increment.execute(">1111#")
    assert outcome.state == 2
    assert outcome.tape.head == 0


def test_step_count(increment):
    outcome = increment.execute(">0001#")
    assert outcome.steps == 7
    assert outcome.tape.head == 3


def test_empty_table_leaves_tape_unchanged():
    machine = TuringMachine(TransitionTable())
    assert machine.run(">#01#") == ">#01#"
    assert machine.run(">") == ">"


def test_runs_are_deterministic(increment):
    assert increment.run(">0101#") == increment.run(">0101#")


def test_input_sequence_is_not_mutated(increment):
    cells = list(">0011#")
    assert increment.run(cells) == ">0100#"
    assert cells == list(">0011#")


def test_missing_transition_is_fatal():
    table = TransitionTable.from_transitions([
        (0, '0', 0, '0', Move.RIGHT),
        (0, '#', 2, '#', Move.HOLD),
    ])
    machine = TuringMachine(table)
    assert machine.run(">00#") == ">00#"
    with pytest.raises(UndefinedTransition) as exc:
        machine.run(">01#")
    assert (exc.value.state, exc.value.symbol, exc.value.head) == (0, '1', 2)


def test_moving_off_the_right_end_fails():
    machine = TuringMachine(TransitionTable.from_transitions([(0, 'a', 1, 'a', Move.RIGHT)]))
    with pytest.raises(OutOfBoundsHead):
        machine.run(">a")


def test_moving_off_the_left_end_fails():
    machine = TuringMachine(TransitionTable.from_transitions([
        (0, 'a', 0, 'a', Move.LEFT),
        (0, '>', 0, '>', Move.LEFT),
        (0, '#', 1, '#', Move.HOLD),
    ]))
    with pytest.raises(OutOfBoundsHead) as exc:
        machine.run(">a#")
    assert exc.value.head == -1


def test_step_budget_stops_looping_table():
    table = TransitionTable.from_transitions([
        (0, 'a', 0, 'a', Move.HOLD),
        (0, '#', 1, '#', Move.HOLD),
    ])
    machine = TuringMachine(table, max_steps=100)
    assert machine.run(">#") == ">#"
    with pytest.raises(StepBudgetExceeded) as exc:
        machine.run(">a#")
    assert exc.value.max_steps == 100


def test_explicit_final_state_below_transient_states():
    table = TransitionTable.from_transitions([
        (0, 'a', 2, 'b', Move.RIGHT),
        (2, 'a', 1, 'c', Move.HOLD),
    ], final_states={1})
    assert TuringMachine(table).run(">aa") == ">bc"


def test_machine_freezes_its_table():
    table = TransitionTable()
    TuringMachine(table)
    with pytest.raises(TableFrozen):
        table.add_transition(0, 'a', 1, 'a', Move.HOLD)


def test_custom_head_start():
    table = TransitionTable.from_transitions([(0, '0', 1, '1', Move.HOLD)])
    assert TuringMachine(table, head_start=0).run("0#") == "1#"


def test_trace_prints_each_configuration(capsys):
    machine = TuringMachine(TransitionTable.from_transitions([(0, '#', 1, '0', Move.RIGHT)]), trace=True)
    machine.run(">#01#")
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Current State: 0", ">#01#", " ^   ",
        "Final state: 1", ">001#", "  ^  ",
    ]


def test_concurrent_runs_share_one_table(increment):
    tapes = [f">{n:04b}#" for n in range(15)]
    with ThreadPool(processes=4) as pool:
        results = pool.map(increment.run, tapes)
    assert results == [f">{n + 1:04b}#" for n in range(15)]


def test_negative_step_budget_is_rejected():
    with pytest.raises(ValueError, match="max_steps"):
        TuringMachine(TransitionTable(), max_steps=-1)
