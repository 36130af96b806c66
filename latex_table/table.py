r"""
The following data structure is used to describe a LaTeX table prior to
rendering.

A :py:class:`Table` holds a list of :py:class:`Row` objects, each of which
holds a list of :py:class:`Cell` objects. The number of columns in a table is
fixed when it is constructed (it is the number of characters in the column
types string, e.g. ``"llXrr"`` gives five columns) and every row pushed into
the table must contain exactly that many cells.

.. autoclass:: Table
    :members:

.. autoclass:: Row
    :members:
    :undoc-members:

.. autoclass:: Cell
    :members:
    :undoc-members:

The environment used to render a table is chosen by its kind:

.. autoclass:: TableKind
    :members:

Rows with the wrong number of cells are rejected with the following
exceptions:

.. autoclass:: TableError

.. autoclass:: WrongNumberOfColumnsError
"""

from typing import List, TYPE_CHECKING

from dataclasses import dataclass, field

from enum import Enum

import logging

if TYPE_CHECKING:
    from latex_table.document import Document


logger = logging.getLogger(__name__)


CELL_SEPARATOR = " & "
"""The separator placed between cells in a rendered row."""

ROW_TERMINATOR = " \\\\"
"""The token ending every rendered row (a space and two backslashes)."""

TABLE_PACKAGE = "tabularx"
"""The LaTeX package registered by :py:meth:`Table.prepare_document`."""


class TableError(ValueError):
    """
    Base class for exceptions thrown when a table is given inconsistent
    content.
    """


class WrongNumberOfColumnsError(TableError):
    """
    Thrown when a row with a different number of cells to the number of
    columns in the table is pushed.
    """

    def __init__(self, provided: int, required: int) -> None:
        super().__init__(provided, required)
        self.provided = provided
        self.required = required

    def __str__(self) -> str:
        return (
            f"Wrong number of cells provided. "
            f"Provided {self.provided} cells, require {self.required} columns"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WrongNumberOfColumnsError):
            return NotImplemented
        return (self.provided, self.required) == (other.provided, other.required)

    def __hash__(self) -> int:
        return hash((type(self), self.provided, self.required))


@dataclass(frozen=True)
class Cell:
    value: str
    """
    The content of this cell. This should be a single line of LaTeX and is
    inserted into the output verbatim (i.e. without escaping).
    """

    def render(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.render()


@dataclass
class Row:
    cells: List[Cell] = field(default_factory=list)
    """The cells in this row, in left-to-right order."""

    is_header: bool = False
    """Is this row a (repeated) header row?"""

    is_first_header: bool = False
    """Is this row part of the header shown only at the start of the table?"""

    def append_cell(self, content: str) -> None:
        """Add a new cell containing ``content`` to the end of this row."""
        self.cells.append(Cell(content))

    def render(self) -> str:
        r"""
        Render this row as a line of LaTeX, e.g. ``a & b & c \\``.

        A row with no cells renders as just the terminating ``" \\"``.
        """
        row = CELL_SEPARATOR.join(cell.render() for cell in self.cells)
        return row + ROW_TERMINATOR

    def __str__(self) -> str:
        return self.render()

    def __len__(self) -> int:
        return len(self.cells)


class TableKind(Enum):
    Tabular = "tabular"
    """A standard ``tabular`` environment."""

    Tabularx = "tabularx"
    """A fixed-width ``tabularx`` environment."""

    LongTable = "longtable"
    """A ``longtable`` which may be broken across pages."""

    XLTabular = "xltabular"
    """A fixed-width ``xltabular`` which may be broken across pages."""

    def environment_name(self) -> str:
        """The name of the LaTeX environment used for this kind of table."""
        return self.value

    @property
    def has_width(self) -> bool:
        """True if this environment takes a table width argument."""
        return self in (TableKind.Tabularx, TableKind.XLTabular)

    @property
    def is_long(self) -> bool:
        """True if this environment may span several pages."""
        return self in (TableKind.LongTable, TableKind.XLTabular)


@dataclass
class Table:
    kind: TableKind
    """The kind of table (and so the environment it will be rendered in)."""

    table_width: str
    """
    The width of the table, e.g. ``textwidth``. Only used by the kinds for
    which :py:attr:`TableKind.has_width` is True.
    """

    column_types: str
    """The LaTeX column types, one character per column, e.g. ``llXrr``."""

    rows: List[Row] = field(default_factory=list, init=False)
    """The rows of the table in the order they will be rendered."""

    _column_count: int = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._column_count = len(self.column_types)

    def column_count(self) -> int:
        """
        The number of columns in this table.

        This is the number of characters in :py:attr:`column_types` at the
        time the table was constructed. For example, ``llXrr`` gives five
        columns.
        """
        return self._column_count

    def push_row(self, row: Row) -> "Table":
        """
        Append a row to the end of the table, returning the table to allow
        chaining.

        Raises :py:exc:`WrongNumberOfColumnsError` if the row does not have
        exactly :py:meth:`column_count` cells, in which case the table is left
        unchanged.
        """
        provided = len(row.cells)
        if provided != self.column_count():
            logger.debug(
                "Rejected row with %d cells for a %d column table",
                provided,
                self.column_count(),
            )
            raise WrongNumberOfColumnsError(provided, self.column_count())

        self.rows.append(row)
        return self

    def prepare_document(self, document: "Document") -> None:
        """
        Register the LaTeX package required by this table with the provided
        document.

        The same package is registered regardless of :py:attr:`kind`.
        """
        document.preamble.use_package(TABLE_PACKAGE)
