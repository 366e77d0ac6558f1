from problems.problem import Problem
from simulator.transition_table import Move

L, R, H = Move.LEFT, Move.RIGHT, Move.HOLD

# Tape layout: '>' word '#' followed by enough blanks for the answer.
# Each '0' of the binary word is marked 'z' in turn and a '1' is appended
# after '#', so the count ends up in unary. The marks are restored to '0'
# on the way back to '>'.
COUNT_ZEROS = Problem(
    name="count_zeros",
    description="Write the number of zeros in a binary word in unary after '#'",
    transitions=[
        (0, '0', 1, 'z', R),
        (0, '1', 0, '1', R),
        (0, 'z', 0, 'z', R),
        (0, '#', 3, '#', L),

        (1, '0', 1, '0', R),
        (1, '1', 1, '1', R),
        (1, '#', 2, '#', R),

        (2, '1', 2, '1', R),
        (2, '_', 4, '1', L),

        (3, 'z', 3, '0', L),
        (3, '1', 3, '1', L),
        (3, '>', 5, '>', H),

        (4, '0', 4, '0', L),
        (4, '1', 4, '1', L),
        (4, 'z', 4, 'z', L),
        (4, '#', 4, '#', L),
        (4, '>', 0, '>', R),
    ],
    cases=[
        (">#_", ">#_"),
        (">111#_", ">111#_"),
        (">00#__", ">00#11"),
        (">1010#__", ">1010#11"),
        (">0100#___", ">0100#111"),
    ],
)
