"""Interactive menu that runs the word podium over the test batches."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from .text import PodiumEntry, format_counts, format_podium, generate_podium, process_text

MENU_MESSAGE = (
    "BIENVENIDO AL PROCESADOR DE TEXTOS\n"
    "Elija un lote de pruebas:\n"
    "A - LOTE 1\n"
    "B - LOTE 2\n"
    "C - LOTE 3\n"
    "D - LOTE 4\n"
    "S - Salir\n"
    "-->"
)
MENU_OPTIONS = "ABCDS"
INVALID_OPTION = " Opcion incorrecta. Vuelva a ingresar nuevamente.\n"
PAUSE_PROMPT = "Presione Enter para continuar . . .\n"

BATCHES = {
    "A": ("lote1.txt", 100, 5),
    "B": ("lote2.txt", 200, 5),
    "C": ("lote3.txt", 300, 5),
    "D": ("lote4.txt", 2000, 5),
}


def run_batch(
    path: str, capacity: int, steps: int, out: TextIO
) -> list[PodiumEntry] | None:
    """Process the text at ``path`` and write its counts and podium.

    ``capacity`` is the expected number of distinct words and must be
    positive. Returns the podium, or None when the file cannot be opened.
    """
    if capacity < 1:
        raise ValueError("capacity must be positive")
    try:
        handle = open(path, encoding="latin-1")
    except OSError:
        return None

    counts: dict[str, int] = {}
    with handle:
        stats = process_text(handle, counts)

    out.write(f"Cantidad de palabras: {stats.words}\n")
    out.write(f"Cantidad de espacios: {stats.spaces}\n")
    out.write(f"Cantidad de signos de puntuacion: {stats.punctuation}\n")
    out.write(format_counts(counts))
    out.write(
        f"------------------------- PODIO DE {steps} ESCALONES "
        "-------------------------\n"
    )
    podium = generate_podium(counts, steps)
    out.write(format_podium(podium))
    return podium


def _pause(stdin: TextIO, stdout: TextIO) -> None:
    stdout.write(PAUSE_PROMPT)
    stdout.flush()
    stdin.readline()


def menu_loop(stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
    """Offer the batches until the user chooses to leave or input ends."""
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    while True:
        stdout.write(MENU_MESSAGE)
        stdout.flush()
        line = stdin.readline()
        if not line:
            return
        option = line[0].upper()

        if option not in MENU_OPTIONS:
            stdout.write(MENU_MESSAGE)
            stdout.write(INVALID_OPTION)
            _pause(stdin, stdout)
            continue

        if option == "S":
            return

        path, capacity, steps = BATCHES[option]
        run_batch(path, capacity, steps, stdout)
        _pause(stdin, stdout)


def main(argv: list[str] | None = None) -> int:
    """Start the interactive menu."""
    parser = argparse.ArgumentParser(
        prog="wordpodium",
        description="Count words in the test batches and show a podium.",
    )
    parser.parse_args(argv)
    menu_loop(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())