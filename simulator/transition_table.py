import hashlib
import json
from enum import IntEnum
from typing import NamedTuple

from simulator.errors import DuplicateTransition, TableFrozen, UndefinedTransition


class Move(IntEnum):
    LEFT = -1
    HOLD = 0
    RIGHT = 1


class TransitionKey(NamedTuple):
    state: int
    symbol: str


class TransitionValue(NamedTuple):
    next_state: int
    write: str
    move: Move


def _check_state(state):
    if isinstance(state, bool) or not isinstance(state, int):
        raise TypeError(f"State must be an int, got {type(state)}.")
    if state < 0:
        raise ValueError(f"State must be non-negative, got {state}.")


def _check_symbol(symbol):
    if not isinstance(symbol, str) or len(symbol) != 1:
        raise ValueError(f"Symbol must be a single character, got {symbol!r}.")


class TransitionTable:
    """
    Deterministic transition function (state, symbol) -> (state, symbol, move).

    Unless an explicit set of final states is given, every state at or above
    the highest state referenced by any transition counts as final. An empty
    table therefore makes state 0 final.
    """

    def __init__(self, final_states=None):
        self._delta = {}
        self.highest_state = 0
        self.final_states = frozenset(final_states) if final_states is not None else None
        self.frozen = False
        if self.final_states is not None:
            for state in self.final_states:
                _check_state(state)

    @classmethod
    def from_transitions(cls, transitions, final_states=None):
        """Build a table from (state, symbol, next_state, write, move) rows."""
        table = cls(final_states=final_states)
        for row in transitions:
            table.add_transition(*row)
        return table

    def add_transition(self, state, symbol, next_state, write, move):
        self.insert(TransitionKey(state, symbol), TransitionValue(next_state, write, move))

    def insert(self, key, value):
        if self.frozen:
            raise TableFrozen()

        key = TransitionKey(*key)
        state, symbol = key
        next_state, write, move = value
        _check_state(state)
        _check_state(next_state)
        _check_symbol(symbol)
        _check_symbol(write)
        try:
            move = Move(move)
        except ValueError:
            raise ValueError(f"Move must be -1, 0 or 1, got {move!r}.") from None
        value = TransitionValue(next_state, write, move)

        if key in self._delta:
            raise DuplicateTransition(key, self._delta[key], value)

        self._delta[key] = value
        self.highest_state = max(self.highest_state, state, next_state)

    def contains(self, key):
        return TransitionKey(*key) in self._delta

    def __contains__(self, key):
        return self.contains(key)

    def lookup(self, key):
        key = TransitionKey(*key)
        try:
            return self._delta[key]
        except KeyError:
            raise UndefinedTransition(key.state, key.symbol) from None

    def is_final(self, state):
        if self.final_states is not None:
            return state in self.final_states
        return state >= self.highest_state

    def freeze(self):
        self.frozen = True
        return self

    def __len__(self):
        return len(self._delta)

    def __iter__(self):
        """Yield (key, value) pairs in (state, symbol) order."""
        for key in sorted(self._delta):
            yield key, self._delta[key]

    def symbols(self):
        """Every symbol the table reads or writes, sorted."""
        alphabet = set()
        for key, value in self._delta.items():
            alphabet.add(key.symbol)
            alphabet.add(value.write)
        return sorted(alphabet)

    def rows(self):
        return [
            [key.state, key.symbol, value.next_state, value.write, int(value.move)]
            for key, value in self
        ]

    def fingerprint(self):
        """Hash the table deterministically."""
        payload = {"rows": self.rows(), "final_states": sorted(self.final_states or [])}
        rows_json = json.dumps(payload, sort_keys=True)
        return hashlib.sha256(rows_json.encode('utf-8')).hexdigest()
