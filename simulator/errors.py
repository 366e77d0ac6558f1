class TuringMachineError(Exception):
    """Base class for table build and run failures."""


class DuplicateTransition(TuringMachineError):
    def __init__(self, key, existing, attempted):
        self.key = key
        self.existing = existing
        self.attempted = attempted
        super().__init__(
            f"Transition for state {key.state}, symbol {key.symbol!r} already defined "
            f"as {tuple(existing)}; refusing {tuple(attempted)}"
        )


class UndefinedTransition(TuringMachineError):
    def __init__(self, state, symbol, head=None):
        self.state = state
        self.symbol = symbol
        self.head = head
        where = f" at head {head}" if head is not None else ""
        super().__init__(f"No transition for state {state}, symbol {symbol!r}{where}")


class OutOfBoundsHead(TuringMachineError):
    def __init__(self, head, tape_size):
        self.head = head
        self.tape_size = tape_size
        super().__init__(f"Head moved to {head}, outside tape of size {tape_size}")


class StepBudgetExceeded(TuringMachineError):
    def __init__(self, max_steps, state, head):
        self.max_steps = max_steps
        self.state = state
        self.head = head
        super().__init__(f"No final state after {max_steps:,} steps (state {state}, head {head})")


class TableFrozen(TuringMachineError):
    def __init__(self):
        super().__init__("Transition table is frozen; build it completely before running")


class InvalidTape(TuringMachineError, ValueError):
    def __init__(self, symbol):
        self.symbol = symbol
        super().__init__(f"Tape cells must be single characters, got {symbol!r}.")
