"""
solver/solver_cli.py

Interactive Wordle hint expander:
- Type your green and yellow letters on one line.
- The tool prints every 5-slot skeleton consistent with them.
- Invalid input is reported and you are asked again.

Run:
  python -m solver.solver_cli
  python -m solver.solver_cli --line "ly15 hg3"

Shortcuts:
  qq -> exit (change with --exit-word)
"""
from __future__ import annotations

import argparse
import sys
from typing import Callable, List, Optional

from wordle_hints.data_utils import solutions_frame
from wordle_hints.errors import HintError
from wordle_hints.generator import solve_line

HEADER = """
  Please input wordle progress in the following format with each letter separated by a space, or {exit_word} to exit:
      - Yellow letters: [letter]y[list of invalid spaces]
          Note: a '-' can be added to the end for each additional duplicate yellow letter.
      - Green letters: [letter]g[space #]

      E.g. Given a puzzle with a green H and yellow L with the pattern L_H__ or __H_L, input 'ly15 hg3'
           or, given two yellow Fs and a green E in the pattern F__EF, input 'fy15- eg4'
"""


def format_solutions(solutions: List[str], *, table: bool = False) -> str:
    lines = ["", "Potential solutions:"]
    if not solutions:
        lines.append("\tNo solutions found.")
    elif table:
        lines.append(solutions_frame(solutions).to_string(index=False))
    else:
        lines.extend(f"\t{s}" for s in solutions)
    return "\n".join(lines)


def read_line(exit_word: str, read: Optional[Callable[[str], str]] = None) -> Optional[str]:
    """Prompt until a non-blank line arrives. Returns None on the exit word or EOF."""
    read = read or input
    while True:
        try:
            raw = read("> ")
        except EOFError:
            return None
        if raw.strip().lower() == exit_word.lower():
            return None
        if raw.strip():
            return raw


def solve_and_print(line: str, *, table: bool = False) -> Optional[List[str]]:
    """Solve one line and print the result. Returns None if the input was invalid."""
    try:
        solutions = solve_line(line)
    except HintError as e:
        print("Invalid input:", e)
        return None
    print(format_solutions(solutions, table=table))
    return solutions


def hint_loop(exit_word: str = "qq", *, table: bool = False, pause: bool = True,
              read: Optional[Callable[[str], str]] = None) -> None:
    read = read or input
    while True:
        print(HEADER.format(exit_word=exit_word))
        line = read_line(exit_word, read)
        if line is None:
            print("bye!")
            return
        solutions = solve_and_print(line, table=table)
        if solutions and pause:
            try:
                read("\nPress Enter to continue...")
            except EOFError:
                print("bye!")
                return


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Expand Wordle green/yellow hints into 5-slot patterns")
    ap.add_argument("--exit-word", default="qq", help="Keyword that ends the interactive loop")
    ap.add_argument("--table", action="store_true", help="Print solutions as a table, one column per slot")
    ap.add_argument(
        "--pause",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Wait for Enter after printing solutions",
    )
    ap.add_argument("--line", default=None, help="Solve a single line and exit")
    args = ap.parse_args(argv)

    if args.line is not None:
        return 0 if solve_and_print(args.line, table=args.table) is not None else 1

    hint_loop(args.exit_word, table=args.table, pause=args.pause)
    return 0


if __name__ == "__main__":
    sys.exit(main())
