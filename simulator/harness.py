from multiprocessing.pool import ThreadPool
from typing import NamedTuple, Optional

from simulator.errors import TuringMachineError
from simulator.evaluator import compile_table, evaluate_tape
from simulator.turing_machine import TuringMachine

BACKENDS = ("python", "jit")


class CaseResult(NamedTuple):
    index: int
    input: str
    expected: str
    actual: Optional[str]
    error: Optional[TuringMachineError] = None

    @property
    def passed(self):
        return self.error is None and self.actual == self.expected


class ProblemReport(NamedTuple):
    problem: str
    table_hash: str
    results: list

    @property
    def passed(self):
        return sum(1 for r in self.results if r.passed)

    @property
    def failed(self):
        return len(self.results) - self.passed


def make_runner(table, backend="python", head_start=1, max_steps=None, trace=False):
    """Return a callable mapping an input tape to its final tape."""
    if backend == "python":
        return TuringMachine(table, head_start=head_start, max_steps=max_steps, trace=trace).run
    if backend == "jit":
        compiled = compile_table(table.freeze())
        return lambda tape: evaluate_tape(compiled, tape, head_start=head_start, max_steps=max_steps)
    raise ValueError(f"Unknown backend '{backend}'. Choose from: {', '.join(BACKENDS)}")


def run_case(runner, index, case):
    tape, expected = case
    try:
        actual = runner(tape)
    except TuringMachineError as e:
        return CaseResult(index, tape, expected, None, e)
    return CaseResult(index, tape, expected, actual)


def run_problem(problem, backend="python", head_start=1, max_steps=None, workers=1,
                trace=False, on_result=None):
    """
    Run every case of a problem and collect one CaseResult per case.

    A failing case never stops the batch. Errors in the table itself
    (e.g. a duplicate transition) propagate, since no case can run.
    Tracing runs the cases one at a time so their output does not interleave.
    """
    table = problem.build_table().freeze()
    runner = make_runner(table, backend, head_start, max_steps, trace)
    jobs = [(runner, i, case) for i, case in enumerate(problem.cases, start=1)]

    results = []
    if workers > 1 and len(jobs) > 1 and not trace:
        with ThreadPool(processes=workers) as pool:
            for result in pool.starmap(run_case, jobs):
                results.append(result)
                if on_result:
                    on_result(result)
    else:
        for job in jobs:
            result = run_case(*job)
            results.append(result)
            if on_result:
                on_result(result)

    return ProblemReport(problem.name, table.fingerprint(), results)


def format_case(result):
    if result.passed:
        return f"Test {result.index} succeeded"
    if result.error is not None:
        return (f"Test {result.index} failed: Expected: {result.expected}; "
                f"Error: {type(result.error).__name__}: {result.error}")
    return f"Test {result.index} failed: Expected: {result.expected}; Actual: {result.actual}"
