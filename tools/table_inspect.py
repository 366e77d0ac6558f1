import argparse

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from problems.registry import PROBLEMS, get_problem
from simulator.transition_table import Move

console = Console()

MOVE_LETTERS = {Move.LEFT: "L", Move.RIGHT: "R", Move.HOLD: "H"}

def transition_grid(table):
    """State x symbol grid with compact 'write move next' cells; final states print as HALT."""
    symbols = table.symbols()
    states = sorted({key.state for key, _ in table} | {value.next_state for _, value in table} | {0})

    grid = Table(title="Transition Table", show_header=True, header_style="bold magenta")
    grid.add_column("State", justify="center")
    for symbol in symbols:
        grid.add_column(escape(repr(symbol)), justify="center")

    for state in states:
        if table.is_final(state):
            row = [f"[green]{state}[/green]"] + ["HALT"] * len(symbols)
        else:
            row = [str(state)]
            for symbol in symbols:
                if table.contains((state, symbol)):
                    next_state, write, move = table.lookup((state, symbol))
                    row.append(escape(f"{write}{MOVE_LETTERS[move]}{next_state}"))
                else:
                    row.append("[dim]---[/dim]")
        grid.add_row(*row)

    return grid

def inspect_problem(problem):
    table = problem.build_table()

    console.print(f"[bold]Problem {problem.name}[/bold]")
    if problem.description:
        console.print(f"  {problem.description}")
    console.print(f"  Transitions: {len(table)}")
    console.print(f"  Highest state: {table.highest_state}")
    console.print(f"  Alphabet: {escape(' '.join(table.symbols())) or '(none)'}", highlight=False)
    console.print(f"  Table hash: {table.fingerprint()}")
    console.print(f"  Cases: {len(problem.cases)}")
    console.print(transition_grid(table))

def main():
    parser = argparse.ArgumentParser(description="Turing Machine Transition Table Inspector")
    parser.add_argument("--problem", help="Problem to inspect, e.g., increment")
    parser.add_argument("--list", action="store_true", help="List the available problems")
    args = parser.parse_args()

    if args.list or not args.problem:
        for problem in PROBLEMS:
            console.print(f"{problem.name}: {problem.description}")
        return

    inspect_problem(get_problem(args.problem))

if __name__ == "__main__":
    main()
