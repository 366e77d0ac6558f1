from problems.problem import Problem
from simulator.transition_table import Move

EMPTY = Problem(
    name="empty",
    description="No transitions; state 0 is already final so tapes come back unchanged",
    transitions=[],
    cases=[
        (">#01#", ">#01#"),
        (">", ">"),
        (">9$1#", ">9$1#"),
    ],
)

# The only state referenced besides 0 is 1, which makes 1 the final state.
DUMMY = Problem(
    name="dummy",
    description="Overwrite a leading '#' with '0' and stop",
    transitions=[
        (0, '#', 1, '0', Move.RIGHT),
    ],
    cases=[
        (">#01#", ">001#"),
    ],
)
