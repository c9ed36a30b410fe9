"""
Table Parser for Markdown Preview Parser

This module recognizes pipe tables: a header row, a delimiter row that sets
the alignment of each column, and one or more body rows.

    | Name | Qty |
    |:-----|----:|
    | foo  |   1 |

A candidate without any body row is rejected so that two lines of text that
happen to contain pipes are not shown as an empty table.
"""

from typing import List, Optional, Sequence, Tuple

from .blocks import Alignment, Table

MIN_COLUMNS = 2
MIN_DELIMITER_WIDTH = 3


def split_table_row(line: str) -> Optional[List[str]]:
    """
    Split a table row into trimmed cell texts.

    Cells are separated by unescaped pipes; \\| is a literal pipe. One empty
    cell produced by a leading pipe and one produced by a trailing pipe are
    dropped.

    Args:
        line: Raw source line

    Returns:
        List of cells, or None if the line has no separator or no cells
    """
    stripped = line.strip()
    cells: List[str] = []
    current: List[str] = []
    has_separator = False

    pos = 0
    while pos < len(stripped):
        char = stripped[pos]
        if char == "\\" and stripped[pos + 1:pos + 2] == "|":
            current.append("|")
            pos += 2
            continue
        if char == "|":
            has_separator = True
            cells.append("".join(current))
            current = []
        else:
            current.append(char)
        pos += 1
    cells.append("".join(current))

    if not has_separator:
        return None

    cells = [cell.strip() for cell in cells]
    if cells and not cells[0]:
        cells.pop(0)
    if cells and not cells[-1]:
        cells.pop()

    return cells or None


def parse_alignment(cell: str) -> Optional[Alignment]:
    """
    Parse one delimiter row cell.

    Args:
        cell: Cell text such as "---", ":---", "---:" or ":---:"

    Returns:
        Column alignment, or None if the cell is not a valid delimiter
    """
    core = cell.strip()
    if len(core) < MIN_DELIMITER_WIDTH:
        return None

    left_colon = core.startswith(":")
    if left_colon:
        core = core[1:]
    right_colon = core.endswith(":")
    if right_colon:
        core = core[:-1]

    # ":-:" is accepted, the width counts the colons
    if not core or core.strip("-"):
        return None

    if left_colon and right_colon:
        return Alignment.CENTER
    if right_colon:
        return Alignment.RIGHT
    return Alignment.LEFT


def try_parse_table(lines: Sequence[str], start: int) -> Optional[Tuple[Table, int]]:
    """
    Try to parse a table whose header row is lines[start].

    Args:
        lines: All document lines
        start: Index of the candidate header row

    Returns:
        (table, index of the first line after the table), or None if the
        lines at start do not form a table with at least one body row
    """
    if start < 0 or start + 1 >= len(lines):
        return None

    headers = split_table_row(lines[start])
    if headers is None:
        return None

    delimiters = split_table_row(lines[start + 1])
    if delimiters is None:
        return None

    alignments: List[Alignment] = []
    for cell in delimiters:
        alignment = parse_alignment(cell)
        if alignment is None:
            return None
        alignments.append(alignment)

    if len(headers) != len(alignments) or len(headers) < MIN_COLUMNS:
        return None

    rows: List[Tuple[str, ...]] = []
    index = start + 2
    while index < len(lines):
        line = lines[index]
        if not line.strip():
            break
        cells = split_table_row(line)
        if cells is None or len(cells) != len(headers):
            break
        rows.append(tuple(cells))
        index += 1

    if not rows:
        return None

    table = Table(headers=tuple(headers), alignments=tuple(alignments), rows=tuple(rows))
    return table, index
