from typing import NamedTuple, Optional

from simulator.transition_table import TransitionTable


class Problem(NamedTuple):
    """A machine and the tapes it is expected to produce."""

    name: str
    transitions: list
    cases: list
    final_states: Optional[frozenset] = None
    description: str = ""

    def build_table(self):
        return TransitionTable.from_transitions(self.transitions, final_states=self.final_states)
