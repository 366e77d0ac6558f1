from problems.anagrams import ANAGRAMS
from problems.count_zeros import COUNT_ZEROS
from problems.increment import INCREMENT
from problems.palindrome import PALINDROME
from problems.trivial import DUMMY, EMPTY

PROBLEMS = [EMPTY, DUMMY, INCREMENT, PALINDROME, COUNT_ZEROS, ANAGRAMS]


def get_problem(name):
    for problem in PROBLEMS:
        if problem.name == name:
            return problem
    raise ValueError(f"Unknown problem '{name}'. Choose from: {', '.join(p.name for p in PROBLEMS)}")
