from problems.problem import Problem
from simulator.transition_table import Move

L, R, H = Move.LEFT, Move.RIGHT, Move.HOLD

# Scan right to '#', then carry leftward: trailing 1s become 0s, the first 0
# becomes 1. Reaching '>' means the carry overflowed; halt on the sentinel.
INCREMENT = Problem(
    name="increment",
    description="Binary increment of the word between '>' and '#'",
    transitions=[
        (0, '0', 0, '0', R),
        (0, '1', 0, '1', R),
        (0, '#', 1, '#', L),

        (1, '1', 1, '0', L),
        (1, '0', 2, '1', H),
        (1, '>', 2, '>', H),
    ],
    cases=[
        (">0100#", ">0101#"),
        (">0000#", ">0001#"),
        (">0001#", ">0010#"),
        (">0101#", ">0110#"),
        (">1111#", ">0000#"),
        (">00010#", ">00011#"),
    ],
)
