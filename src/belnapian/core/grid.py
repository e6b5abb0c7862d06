from typing import Callable, Dict, Tuple, TypeVar

from loguru import logger

R = TypeVar("R")
C = TypeVar("C")
V = TypeVar("V")


def parse_grid(
    name: str,
    text: str,
    row_key: Callable[[str], R],
    col_key: Callable[[str], C],
    cell: Callable[[str], V],
) -> Dict[Tuple[R, C], V]:
    """
    Parse a whitespace-aligned operation table.

    The first line holds the column headers, every following line starts
    with its row header. Headers and cells are decoded by the given callables.
    """
    lines = [line.split() for line in text.strip().splitlines() if line.strip()]
    header, body = lines[0], lines[1:]

    table: Dict[Tuple[R, C], V] = {}
    for line in body:
        row, cells = line[0], line[1:]
        if len(cells) != len(header):
            raise ValueError(
                f"Table {name}: row {row} has {len(cells)} cells, expected {len(header)}"
            )
        for col, token in zip(header, cells):
            table[(row_key(row), col_key(col))] = cell(token)

    logger.debug("Loaded table {name} ({n} entries)", name=name, n=len(table))
    return table
