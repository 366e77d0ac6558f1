import json

from logger.logger import JSONLogger
from problems.problem import Problem
from simulator.harness import run_problem
from simulator.transition_table import Move

PROBLEM = Problem(
    name="gap",
    transitions=[
        (0, '0', 0, '0', Move.RIGHT),
        (0, '#', 1, '#', Move.HOLD),
    ],
    cases=[
        (">0#", ">0#"),
        (">1#", ">1#"),
    ],
)


def read_jsonl(path):
    with open(path, "r", encoding="utf-8") as f:
        return [json.loads(line) for line in f]


def test_log_report(tmp_path):
    logger = JSONLogger(output_directory=str(tmp_path), log_file_prefix="run_")
    report = run_problem(PROBLEM)
    logger.log_report(report, "python")

    entries = read_jsonl(logger.current_log)
    assert len(entries) == 3
    assert entries[0]["passed"] is True
    assert entries[1]["error"] == "UndefinedTransition"
    assert entries[1]["actual"] is None
    assert entries[2]["summary"] is True
    assert (entries[2]["passed"], entries[2]["failed"]) == (1, 1)
    assert {e["table_hash"] for e in entries} == {report.table_hash}

    failures = read_jsonl(tmp_path / f"failures_{logger.today}.jsonl")
    assert [f["case"] for f in failures] == [2]


def test_no_failures_file_when_everything_passes(tmp_path):
    logger = JSONLogger(output_directory=str(tmp_path))
    report = run_problem(PROBLEM._replace(cases=[(">00#", ">00#")]))
    logger.log_report(report, "jit")

    assert not (tmp_path / f"failures_{logger.today}.jsonl").exists()
    assert read_jsonl(logger.current_log)[0]["backend"] == "jit"
