from typing import NamedTuple

import numpy as np

from simulator.errors import OutOfBoundsHead, StepBudgetExceeded, TuringMachineError, UndefinedTransition
from simulator.simulator_jit import HALTED, OUT_OF_BOUNDS, STEP_BUDGET, UNDEFINED, simulate_tape
from simulator.tape import Tape


class CompiledTable(NamedTuple):
    alphabet: list
    index: dict
    delta: np.ndarray
    final_mask: np.ndarray


def compile_table(table):
    """
    Lay a TransitionTable out as dense arrays for the compiled loop.
    Symbols outside the table's alphabet share one extra column that is
    always undefined.
    """
    alphabet = table.symbols()
    index = {symbol: i for i, symbol in enumerate(alphabet)}
    num_states = table.highest_state + 1

    delta = np.full((num_states, len(alphabet) + 1, 3), -1, dtype=np.int32)
    for key, value in table:
        delta[key.state, index[key.symbol]] = (value.next_state, index[value.write], int(value.move))

    final_mask = np.array([table.is_final(state) for state in range(num_states)], dtype=np.bool_)

    return CompiledTable(alphabet, index, delta, final_mask)


def encode_tape(compiled, cells):
    unknown = len(compiled.alphabet)
    return np.array([compiled.index.get(symbol, unknown) for symbol in cells], dtype=np.int32)


def decode_tape(compiled, encoded, original):
    unknown = len(compiled.alphabet)
    return "".join(
        original[i] if code == unknown else compiled.alphabet[code]
        for i, code in enumerate(encoded.tolist())
    )


def evaluate_tape(compiled, symbols, head_start=1, max_steps=None):
    """
    Host-side wrapper around the compiled loop.
    Returns the final tape as a string or raises the same errors as TuringMachine.run.
    """
    if max_steps is not None and max_steps < 0:
        raise ValueError(f"max_steps must not be negative, got {max_steps}.")

    original = Tape(symbols, head=head_start).cells
    tape = encode_tape(compiled, original)
    budget = -1 if max_steps is None else max_steps

    status, state, head, steps = simulate_tape(
        compiled.delta, compiled.final_mask, tape, head_start, budget
    )
    state, head = int(state), int(head)

    if status == UNDEFINED:
        raise UndefinedTransition(state, decode_tape(compiled, tape, original)[head], head)
    if status == OUT_OF_BOUNDS:
        raise OutOfBoundsHead(head, len(original))
    if status == STEP_BUDGET:
        raise StepBudgetExceeded(max_steps, state, head)
    if status != HALTED:
        raise RuntimeError(f"Unknown status {status} from compiled loop")

    return decode_tape(compiled, tape, original)


def evaluate_batch(compiled, tapes, head_start=1, max_steps=None):
    """
    Run every tape against one compiled table.
    Each entry is either the final tape string or the error that stopped it.
    """
    results = []
    for symbols in tapes:
        try:
            results.append(evaluate_tape(compiled, symbols, head_start, max_steps))
        except TuringMachineError as e:
            results.append(e)
    return results
