r"""
This module implements :py:class:`~latex_table.table.Table` to LaTeX
conversion in the following routine:

.. autofunction:: render_table

The generated block takes the form::

    \begin{tabularx}{\textwidth}{llXrr}
      a & b & c & d & e \\
      ...
    \end{tabularx}

The environment is chosen by the table's
:py:class:`~latex_table.table.TableKind`. Only the ``tabularx`` and
``xltabular`` environments are given the table width. A width which is just
the name of a length command (e.g. ``textwidth``) has a backslash added,
anything else (e.g. ``0.8\linewidth`` or ``12cm``) is used verbatim.

For the page-breaking kinds (``longtable`` and ``xltabular``) the header flags
of the leading rows are honoured: the rows marked
:py:attr:`~latex_table.table.Row.is_first_header` are terminated with
``\endfirsthead`` and the following rows marked
:py:attr:`~latex_table.table.Row.is_header` are terminated with ``\endhead``.
Other kinds render header rows like any other row.

The helpers used by :py:func:`render_table` are also available:

.. autofunction:: render_begin

.. autofunction:: render_end

.. autofunction:: render_width

.. autofunction:: render_rows
"""

from typing import Callable, List, Sequence

import re

from textwrap import indent

from latex_table.table import Table, Row


END_FIRST_HEAD = r"\endfirsthead"
END_HEAD = r"\endhead"


def render_width(width: str) -> str:
    r"""
    Format a table width for use as an environment argument.

    Examples::

        >>> render_width("textwidth")
        '\\textwidth'
        >>> render_width("0.5\\linewidth")
        '0.5\\linewidth'
    """
    if re.fullmatch(r"[A-Za-z]+", width):
        return "\\" + width
    else:
        return width


def render_begin(table: Table) -> str:
    """Render the ``\\begin{...}`` line which opens the table's environment."""
    name = table.kind.environment_name()
    if table.kind.has_width:
        return (
            f"\\begin{{{name}}}"
            f"{{{render_width(table.table_width)}}}"
            f"{{{table.column_types}}}"
        )
    else:
        return f"\\begin{{{name}}}{{{table.column_types}}}"


def render_end(table: Table) -> str:
    """Render the ``\\end{...}`` line which closes the table's environment."""
    return f"\\end{{{table.kind.environment_name()}}}"


def _leading_run(rows: Sequence[Row], predicate: Callable[[Row], bool]) -> int:
    """Count the rows at the start of ``rows`` for which predicate holds."""
    count = 0
    for row in rows:
        if not predicate(row):
            break
        count += 1
    return count


def render_rows(table: Table) -> List[str]:
    """
    Render the rows of a table, one line per row, inserting header
    terminators for the page-breaking table kinds.
    """
    first_head_end = _leading_run(table.rows, lambda row: row.is_first_header)
    head_end = _leading_run(
        table.rows, lambda row: row.is_header or row.is_first_header
    )

    lines = []
    for number, row in enumerate(table.rows, 1):
        lines.append(row.render())
        if table.kind.is_long:
            if number == first_head_end:
                lines.append(END_FIRST_HEAD)
            if number == head_end and head_end > first_head_end:
                lines.append(END_HEAD)

    return lines


def render_table(table: Table) -> str:
    """
    Render a table as a complete LaTeX environment block (with no trailing
    newline).
    """
    body = "\n".join(render_rows(table))
    lines = [render_begin(table)]
    if body:
        lines.append(indent(body, "  "))
    lines.append(render_end(table))
    return "\n".join(lines)
