# app.py

import argparse
from pathlib import Path

from rich.console import Console
from rich.prompt import Prompt, IntPrompt, Confirm
from rich.table import Table

from config.config_loader import DEFAULT_CONFIG, DEFAULT_CONFIG_PATH, load_config, save_config
from problems.registry import PROBLEMS, get_problem
from simulator.harness import BACKENDS
from tools.run_problems import run_problems
from tools.table_inspect import inspect_problem

console = Console()

# === Utilities ===
def load_runtime_config(path=DEFAULT_CONFIG_PATH):
    if not Path(path).exists():
        console.print(f"[yellow]{path} not found, using defaults.[/yellow]")
        return DEFAULT_CONFIG.copy()
    return load_config(path)

def save_runtime_config(config, path=DEFAULT_CONFIG_PATH):
    save_config(config, path)
    console.print("[green]Configuration updated successfully.[/green]")

def show_main_menu():
    console.print("\n[bold cyan]Turing Machine Simulator[/bold cyan]")
    console.print("[1] Run All Problems")
    console.print("[2] Run One Problem")
    console.print("[3] Inspect Transition Table")
    console.print("[4] Edit Config")
    console.print("[5] Exit")

def show_problems():
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Index", justify="center")
    table.add_column("Problem", justify="center")
    table.add_column("Cases", justify="center")
    table.add_column("Description")

    for idx, problem in enumerate(PROBLEMS):
        table.add_row(str(idx), problem.name, str(len(problem.cases)), problem.description)

    console.print(table)

def choose_problem():
    show_problems()
    idx_choice = IntPrompt.ask("\nChoose a problem by Index")
    if idx_choice < 0 or idx_choice >= len(PROBLEMS):
        console.print("[red]Invalid choice.[/red]")
        return None
    return PROBLEMS[idx_choice]

def handle_run_all(config):
    console.print("\n[bold]Run All Problems[/bold]")
    run_problems(PROBLEMS, config, show_progress=True)

def handle_run_one(config):
    console.print("\n[bold]Run One Problem[/bold]")
    problem = choose_problem()
    if problem is not None:
        run_problems([problem], config, show_progress=True)

def handle_inspect():
    console.print("\n[bold]Inspect Transition Table[/bold]")
    problem = choose_problem()
    if problem is not None:
        inspect_problem(problem)

def handle_edit_config(config):
    console.print("\n[bold]Edit Configuration[/bold]")

    backend = Prompt.ask("Backend", choices=list(BACKENDS), default=config.get("backend", "python"))
    max_steps = IntPrompt.ask("Max Steps", default=config.get("max_steps", 1000000))
    head_start = IntPrompt.ask("Head Start", default=config.get("head_start", 1))
    workers = IntPrompt.ask("Worker Threads", default=config.get("workers", 1))
    trace = Confirm.ask("Trace every step?", default=config.get("trace", False))
    log_results = Confirm.ask("Write JSONL result logs?", default=config.get("log_results", True))

    config.update({
        "backend": backend,
        "max_steps": max_steps,
        "head_start": head_start,
        "workers": workers,
        "trace": trace,
        "log_results": log_results
    })

    try:
        save_runtime_config(config)
    except (TypeError, ValueError) as e:
        console.print(f"[red]Configuration not saved: {e}[/red]")

def interactive_main(config_path=DEFAULT_CONFIG_PATH):
    config = load_runtime_config(config_path)

    while True:
        show_main_menu()
        choice = Prompt.ask("\nChoose an option", choices=["1", "2", "3", "4", "5"], default="5")

        if choice == "1":
            handle_run_all(config)
        elif choice == "2":
            handle_run_one(config)
        elif choice == "3":
            handle_inspect()
        elif choice == "4":
            handle_edit_config(config)
            config = load_runtime_config(config_path)
        elif choice == "5":
            console.print("[bold green]Goodbye![/bold green]")
            break

# === CLI Mode for Automation ===
def cli_main(args):
    config = load_runtime_config(args.config)
    if args.backend:
        config["backend"] = args.backend

    if args.inspect:
        inspect_problem(get_problem(args.inspect))
    if args.run:
        problems = [get_problem(name) for name in args.problem] if args.problem else PROBLEMS
        reports = run_problems(problems, config)
        if any(report.failed for report in reports):
            raise SystemExit(1)

def main():
    parser = argparse.ArgumentParser(description="Turing Machine Simulator Application")
    parser.add_argument("--run", action="store_true", help="Run problems immediately")
    parser.add_argument("--problem", action="append", help="Problem to run (repeatable, default: all)")
    parser.add_argument("--inspect", help="Print the transition table of a problem")
    parser.add_argument("--backend", choices=BACKENDS, help="Override the configured backend")
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="Path to runtime_config.json")
    args = parser.parse_args()

    if args.run or args.inspect:
        cli_main(args)
    else:
        interactive_main(args.config)

if __name__ == "__main__":
    main()
