"""The interactive read loop of the shell."""

from __future__ import annotations

import os
import sys
from typing import Optional, Sequence

from minishell.environment import Environment, Shell
from minishell.lines import LineReader

PROMPT = "Promting (write whatever): "
_QUIT_WORDS = ("exit", "adios")


def run_line(line: str, shell: Shell) -> int:
    """Process one input line and return its exit status."""
    err = sys.stderr
    err.write("Tokenizing (seprar en palabras).\n")
    err.write("Commanding (Pasar de palabras a algo mejor).\n")
    err.write("Executting (Ejecutar esa estructura de comandos).\n")
    err.write("Retturning last exit status.\n\n")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the prompt loop on standard input; return the last exit status."""
    shell = Shell(
        env=Environment.from_strings(f"{key}={value}" for key, value in os.environ.items()),
        status=2,
    )
    reader = LineReader(sys.stdin)
    while not shell.finished:
        sys.stdout.write(PROMPT)
        sys.stdout.flush()
        line = reader.readline()
        if line is None:
            break
        if line.startswith(_QUIT_WORDS):
            return shell.status
        sys.stderr.write(f"Line reached is: \n{line}\n")
        sys.stderr.write("Minishell process:\n\n")
        shell.status = run_line(line, shell)
    return shell.status


if __name__ == "__main__":
    sys.exit(main())