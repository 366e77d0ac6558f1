from problems.problem import Problem
from simulator.transition_table import Move

L, R, H = Move.LEFT, Move.RIGHT, Move.HOLD

# Tape layout: '>' u '#' v '$' '_' with u, v over {a, b}. Each letter of u is
# crossed out together with a matching letter of v. The machine accepts when
# u runs out and v has nothing left; any leftover or missing letter rejects.
# Either way every letter ends crossed out and the verdict lands after '$'.
#
# 0: take the next letter of u         1/2: carry 'a'/'b' to '#'
# 3/4: find an 'a'/'b' in v            5: u exhausted, check v is empty
# 6: walk back to '>'                  7: reject, rewind to '>'
# 8: reject, cross out everything      9/10: write N/Y
# 11: halt
ANAGRAMS = Problem(
    name="anagrams",
    description="Decide whether the two words around '#' are anagrams",
    transitions=[
        (0, 'x', 0, 'x', R),
        (0, 'a', 1, 'x', R),
        (0, 'b', 2, 'x', R),
        (0, '#', 5, '#', R),

        (1, 'a', 1, 'a', R),
        (1, 'b', 1, 'b', R),
        (1, 'x', 1, 'x', R),
        (1, '#', 3, '#', R),

        (2, 'a', 2, 'a', R),
        (2, 'b', 2, 'b', R),
        (2, 'x', 2, 'x', R),
        (2, '#', 4, '#', R),

        (3, 'x', 3, 'x', R),
        (3, 'b', 3, 'b', R),
        (3, 'a', 6, 'x', L),
        (3, '$', 7, '$', L),

        (4, 'x', 4, 'x', R),
        (4, 'a', 4, 'a', R),
        (4, 'b', 6, 'x', L),
        (4, '$', 7, '$', L),

        (5, 'x', 5, 'x', R),
        (5, 'a', 7, 'a', L),
        (5, 'b', 7, 'b', L),
        (5, '$', 10, '$', R),

        (6, 'a', 6, 'a', L),
        (6, 'b', 6, 'b', L),
        (6, 'x', 6, 'x', L),
        (6, '#', 6, '#', L),
        (6, '>', 0, '>', R),

        (7, 'a', 7, 'a', L),
        (7, 'b', 7, 'b', L),
        (7, 'x', 7, 'x', L),
        (7, '#', 7, '#', L),
        (7, '$', 7, '$', L),
        (7, '>', 8, '>', R),

        (8, 'a', 8, 'x', R),
        (8, 'b', 8, 'x', R),
        (8, 'x', 8, 'x', R),
        (8, '#', 8, '#', R),
        (8, '$', 9, '$', R),

        (9, '_', 11, 'N', H),
        (10, '_', 11, 'Y', H),
    ],
    cases=[
        (">#$_", ">#$Y"),
        (">ab#ba$_", ">xx#xx$Y"),
        (">aab#aba$_", ">xxx#xxx$Y"),
        (">ab#aa$_", ">xx#xx$N"),
        (">a#$_", ">x#$N"),
        (">#b$_", ">#x$N"),
    ],
)
