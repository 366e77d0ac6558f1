from typing import NamedTuple

from simulator.errors import StepBudgetExceeded, UndefinedTransition
from simulator.tape import Tape


class RunOutcome(NamedTuple):
    tape: Tape
    state: int
    steps: int


class TuringMachine:
    """
    Runs a frozen TransitionTable against tapes.

    The machine starts in state 0 with the head at ``head_start`` and halts
    as soon as the table reports the current state as final. Every run
    works on its own copy of the input, so one machine can serve many tapes,
    including from several threads at once.
    """

    def __init__(self, table, head_start=1, max_steps=None, trace=False):
        if max_steps is not None and max_steps < 0:
            raise ValueError(f"max_steps must not be negative, got {max_steps}.")
        self.table = table.freeze()
        self.head_start = head_start
        self.max_steps = max_steps
        self.trace = trace

    def step(self, tape, state):
        symbol = tape.read()
        key = (state, symbol)
        if not self.table.contains(key):
            raise UndefinedTransition(state, symbol, tape.head)
        next_state, write, move = self.table.lookup(key)
        tape.write(write)
        tape.move(move)
        return next_state

    def execute(self, symbols):
        tape = Tape(symbols, head=self.head_start)
        state = 0
        steps = 0

        while not self.table.is_final(state):
            if self.max_steps is not None and steps >= self.max_steps:
                raise StepBudgetExceeded(self.max_steps, state, tape.head)
            if self.trace:
                self.visualize(tape, state)
            state = self.step(tape, state)
            steps += 1

        if self.trace:
            self.visualize(tape, state)
        return RunOutcome(tape, state, steps)

    def run(self, symbols):
        """Run to a final state and return the final tape as a string."""
        return self.execute(symbols).tape.contents()

    def visualize(self, tape, state):
        tape_str, head_str = tape.render()
        if self.table.is_final(state):
            print(f"Final state: {state}")
        else:
            print(f"Current State: {state}")
        print(tape_str)
        print(head_str)
