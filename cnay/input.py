"""
Hostname input: a list file or piped stdin

Undecodable bytes are replaced rather than raised, so a corrupt line becomes
one hostname that fails to resolve instead of aborting the run.
"""

from typing import IO, Iterator, Optional

import click

from .errors import InputUnavailableError


def open_input(list_file: Optional[str] = None, stdin: Optional[IO[str]] = None) -> IO[str]:
    """
    Pick the hostname source.

    Args:
        list_file: Path to a file with one hostname per line
        stdin: Stream to use when no file is given (defaults to the
            process stdin, decoded as UTF-8 with replacement)

    Returns:
        Open text stream

    Raises:
        InputUnavailableError: no file given and stdin is a terminal, or
            the file cannot be opened
    """
    if not list_file:
        if stdin is None:
            stdin = click.get_text_stream('stdin', encoding='utf-8', errors='replace')
        if stdin.isatty():
            raise InputUnavailableError("no input provided")
        return stdin

    try:
        return open(list_file, 'r', encoding='utf-8', errors='replace')
    except OSError as e:
        raise InputUnavailableError(f"error opening file: {e}") from e


def read_hostnames(stream: IO[str]) -> Iterator[str]:
    """Yield one stripped hostname per line. Blank lines are kept."""
    for line in stream:
        yield line.strip()
