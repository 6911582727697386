"""Titles of the topic sections."""

from __future__ import annotations

import argparse
from enum import Enum


class Section(Enum):
    """A topic section and the banner it prints."""

    ARRAYS = "Array Folder"
    STRINGS = "Strings Problems"
    OOPS = "OOPs Section"
    LINKED_LIST = "LinkedList"
    RECURSION = "Recursion"
    HEAPS = "Heaps"
    GRAPHS = "Graphs"
    TRIES = "tries"
    STRINGS_HARD = "Strings Hard"


def section_title(name: str | Section) -> str:
    """Banner of a section given by member or by name, case-insensitively."""
    if isinstance(name, Section):
        return name.value
    key = name.strip().upper().replace("-", "_").replace(" ", "_")
    try:
        return Section[key].value
    except KeyError:
        raise ValueError(f"unknown section: {name!r}") from None


def main(argv: list[str] | None = None) -> int:
    """Print the banner of a section."""
    parser = argparse.ArgumentParser(description="Print a section banner.")
    parser.add_argument("section", nargs="?", default=Section.ARRAYS.name.lower())
    args = parser.parse_args(argv)
    try:
        title = section_title(args.section)
    except ValueError as error:
        parser.error(str(error))
    print(title, end="")
    return 0