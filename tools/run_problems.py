# tools/run_problems.py

import argparse

from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, BarColumn, TextColumn, TimeElapsedColumn

from config.config_loader import DEFAULT_CONFIG
from logger.logger import JSONLogger
from problems.registry import PROBLEMS, get_problem
from simulator.harness import BACKENDS, format_case, run_problem

console = Console()

def print_result(result):
    color = "green" if result.passed else "red"
    console.print(f"[{color}]{escape(format_case(result))}[/{color}]", highlight=False)

# === Main Runner ===
def run_problems(problems, config=None, logger=None, show_progress=False):
    """
    Run each problem's cases and print one pass/fail line per case.
    Returns the list of ProblemReports.
    """
    config = config or DEFAULT_CONFIG
    if logger is None and config["log_results"]:
        logger = JSONLogger(config["output_directory"], config["log_file_prefix"])

    reports = []
    for problem in problems:
        console.print(f"[bold cyan]Running {problem.name}[/bold cyan]")

        with Progress(
                SpinnerColumn(),
                BarColumn(),
                "[progress.percentage]{task.percentage:>3.0f}%",
                TextColumn("{task.completed}/{task.total} Cases"),
                TimeElapsedColumn(),
                console=console,
                disable=not show_progress,
                transient=True
        ) as progress:

            task = progress.add_task("[cyan]Simulating...", total=len(problem.cases))

            def on_result(result):
                print_result(result)
                progress.update(task, advance=1)

            report = run_problem(
                problem,
                backend=config["backend"],
                head_start=config["head_start"],
                max_steps=config["max_steps"],
                workers=config["workers"],
                trace=config["trace"],
                on_result=on_result
            )

        if logger is not None:
            logger.log_report(report, config["backend"])

        summary_color = "green" if report.failed == 0 else "yellow"
        console.print(f"[{summary_color}]{report.passed}/{len(report.results)} cases passed[/{summary_color}]\n")
        reports.append(report)

    return reports

# === CLI ===
def main():
    parser = argparse.ArgumentParser(description="Run the example Turing machines against their expected tapes.")
    parser.add_argument("--problem", action="append", help="Problem name (repeatable). Defaults to all problems.")
    parser.add_argument("--backend", choices=BACKENDS, default=DEFAULT_CONFIG["backend"], help="Execution backend")
    parser.add_argument("--max_steps", type=int, default=DEFAULT_CONFIG["max_steps"], help="Step budget per case")
    parser.add_argument("--workers", type=int, default=DEFAULT_CONFIG["workers"], help="Threads per problem")
    parser.add_argument("--trace", action="store_true", help="Print every machine configuration")
    parser.add_argument("--no_log", action="store_true", help="Do not write JSONL result logs")
    args = parser.parse_args()

    config = DEFAULT_CONFIG.copy()
    config.update({
        "backend": args.backend,
        "max_steps": args.max_steps,
        "workers": args.workers,
        "trace": args.trace,
        "log_results": not args.no_log
    })

    problems = [get_problem(name) for name in args.problem] if args.problem else PROBLEMS
    reports = run_problems(problems, config, show_progress=True)

    if any(report.failed for report in reports):
        raise SystemExit(1)

if __name__ == "__main__":
    main()
