from problems.problem import Problem
from simulator.transition_table import Move

L, R, H = Move.LEFT, Move.RIGHT, Move.HOLD

# Tape layout: '>' word '#' '_'. The word over {a, b} is consumed from both
# ends, each matched pair crossed out with 'x'. On a mismatch the whole word
# is crossed out. The verdict ('Y' or 'N') lands in the cell after '#'.
#
# 0: take the leftmost letter          1/2: carry 'a'/'b' to the right end
# 3/4: match 'a'/'b' at the right end  5: walk back to the left end
# 6: accept sweep to '#'               7: reject, rewind to '>'
# 8: reject, cross out to '#'          9/10: write Y/N
# 11: halt
PALINDROME = Problem(
    name="palindrome",
    description="Decide whether a word over {a, b} reads the same both ways",
    transitions=[
        (0, 'a', 1, 'x', R),
        (0, 'b', 2, 'x', R),
        (0, 'x', 6, 'x', R),
        (0, '#', 9, '#', R),

        (1, 'a', 1, 'a', R),
        (1, 'b', 1, 'b', R),
        (1, 'x', 3, 'x', L),
        (1, '#', 3, '#', L),

        (2, 'a', 2, 'a', R),
        (2, 'b', 2, 'b', R),
        (2, 'x', 4, 'x', L),
        (2, '#', 4, '#', L),

        (3, 'a', 5, 'x', L),
        (3, 'b', 7, 'b', L),
        (3, 'x', 6, 'x', R),

        (4, 'b', 5, 'x', L),
        (4, 'a', 7, 'a', L),
        (4, 'x', 6, 'x', R),

        (5, 'a', 5, 'a', L),
        (5, 'b', 5, 'b', L),
        (5, 'x', 0, 'x', R),

        (6, 'x', 6, 'x', R),
        (6, '#', 9, '#', R),

        (7, 'a', 7, 'a', L),
        (7, 'b', 7, 'b', L),
        (7, 'x', 7, 'x', L),
        (7, '>', 8, '>', R),

        (8, 'a', 8, 'x', R),
        (8, 'b', 8, 'x', R),
        (8, 'x', 8, 'x', R),
        (8, '#', 10, '#', R),

        (9, '_', 11, 'Y', H),
        (10, '_', 11, 'N', H),
    ],
    cases=[
        (">#_", ">#Y"),
        (">a#_", ">x#Y"),
        (">abba#_", ">xxxx#Y"),
        (">aba#_", ">xxx#Y"),
        (">ab#_", ">xx#N"),
        (">abab#_", ">xxxx#N"),
        (">babbab#_", ">xxxxxx#Y"),
    ],
)
