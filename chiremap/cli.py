"""Typer CLI entrypoint for chiremap."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from pathlib import Path
from typing import Annotated, TextIO

import typer

from chiremap.exceptions import RenumberError
from chiremap.record import process_line

logger = logging.getLogger(__name__)

app = typer.Typer(help="Compact atom map numbers in mapped SMILES records.", add_completion=False)


def run_lines(
    lines: Iterable[str],
    out: TextIO,
    sentinel: str | None = None,
    strict: bool = False,
) -> int:
    """Renumber each record line and write the results.
    
    A failing record is logged and skipped unless strict is set.
    
    Returns:
        Number of records that failed.
    """
    failures = 0
    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if sentinel is not None and line == sentinel:
            logger.debug("sentinel reached at line %d", lineno)
            break
        if not line:
            continue
        try:
            result = process_line(line)
        except RenumberError as exc:
            failures += 1
            logger.error("line %d: %s", lineno, exc)
            if strict:
                break
            continue
        out.write(result + "\n")
        out.flush()
    return failures


@app.command()
def main(
    input_file: Annotated[
        Path | None,
        typer.Argument(exists=True, dir_okay=False, help="Record file; reads stdin when omitted."),
    ] = None,
    sentinel: Annotated[
        str | None,
        typer.Option("--sentinel", help="Stop at the first line equal to this value."),
    ] = None,
    strict: Annotated[
        bool, typer.Option("--strict", help="Stop at the first record that fails.")
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging.")
    ] = False,
) -> None:
    """Renumber `<id> <smiles> (<i0>, ...)` records, one per line."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    
    if input_file is None:
        failures = run_lines(sys.stdin, sys.stdout, sentinel=sentinel, strict=strict)
    else:
        with input_file.open(encoding="utf-8") as handle:
            failures = run_lines(handle, sys.stdout, sentinel=sentinel, strict=strict)
    
    if failures:
        logger.debug("%d record(s) failed", failures)
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
