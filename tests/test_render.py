import pytest

from textwrap import dedent

from latex_table.table import Table, TableKind, Row, Cell

from latex_table.render import (
    render_width,
    render_begin,
    render_end,
    render_rows,
    render_table,
)


def make_row(*values: str, is_header: bool = False, is_first: bool = False) -> Row:
    return Row(
        [Cell(value) for value in values],
        is_header=is_header,
        is_first_header=is_first,
    )


@pytest.mark.parametrize(
    "width, exp",
    [
        ("textwidth", r"\textwidth"),
        ("linewidth", r"\linewidth"),
        (r"0.8\linewidth", r"0.8\linewidth"),
        (r"\textwidth", r"\textwidth"),
        ("12cm", "12cm"),
        ("", ""),
    ],
)
def test_render_width(width: str, exp: str) -> None:
    assert render_width(width) == exp


@pytest.mark.parametrize(
    "kind, exp_begin, exp_end",
    [
        (TableKind.Tabular, r"\begin{tabular}{llXrr}", r"\end{tabular}"),
        (
            TableKind.Tabularx,
            r"\begin{tabularx}{\textwidth}{llXrr}",
            r"\end{tabularx}",
        ),
        (TableKind.LongTable, r"\begin{longtable}{llXrr}", r"\end{longtable}"),
        (
            TableKind.XLTabular,
            r"\begin{xltabular}{\textwidth}{llXrr}",
            r"\end{xltabular}",
        ),
    ],
)
def test_render_begin_and_end(kind: TableKind, exp_begin: str, exp_end: str) -> None:
    table = Table(kind, "textwidth", "llXrr")
    assert render_begin(table) == exp_begin
    assert render_end(table) == exp_end


class TestRenderRows:
    def test_empty(self) -> None:
        assert render_rows(Table(TableKind.LongTable, "", "ll")) == []

    def test_plain_rows(self) -> None:
        table = Table(TableKind.Tabular, "", "ll")
        table.push_row(make_row("a", "b")).push_row(make_row("c", "d"))
        assert render_rows(table) == [r"a & b \\", r"c & d \\"]

    @pytest.mark.parametrize("kind", [TableKind.Tabular, TableKind.Tabularx])
    def test_header_flags_ignored_by_short_tables(self, kind: TableKind) -> None:
        table = Table(kind, "textwidth", "l")
        table.push_row(make_row("first", is_first=True))
        table.push_row(make_row("head", is_header=True))
        table.push_row(make_row("body"))
        assert render_rows(table) == [r"first \\", r"head \\", r"body \\"]

    @pytest.mark.parametrize("kind", [TableKind.LongTable, TableKind.XLTabular])
    def test_first_and_repeated_headers(self, kind: TableKind) -> None:
        table = Table(kind, "textwidth", "l")
        table.push_row(make_row("first 1", is_first=True))
        table.push_row(make_row("first 2", is_first=True))
        table.push_row(make_row("head", is_header=True))
        table.push_row(make_row("body"))
        assert render_rows(table) == [
            r"first 1 \\",
            r"first 2 \\",
            r"\endfirsthead",
            r"head \\",
            r"\endhead",
            r"body \\",
        ]

    def test_first_header_only(self) -> None:
        table = Table(TableKind.LongTable, "", "l")
        table.push_row(make_row("first", is_first=True))
        table.push_row(make_row("body"))
        assert render_rows(table) == [r"first \\", r"\endfirsthead", r"body \\"]

    def test_repeated_header_only(self) -> None:
        table = Table(TableKind.LongTable, "", "l")
        table.push_row(make_row("head", is_header=True))
        table.push_row(make_row("body"))
        assert render_rows(table) == [r"head \\", r"\endhead", r"body \\"]

    def test_header_flags_after_body_ignored(self) -> None:
        table = Table(TableKind.LongTable, "", "l")
        table.push_row(make_row("body"))
        table.push_row(make_row("head", is_header=True))
        assert render_rows(table) == [r"body \\", r"head \\"]


class TestRenderTable:
    def test_tabularx(self) -> None:
        table = Table(TableKind.Tabularx, "textwidth", "llXrr")
        table.push_row(make_row("a", "b", "c", "d", "e"))
        table.push_row(make_row("1", "2", "3", "4", "5"))
        assert render_table(table) == dedent(
            r"""
            \begin{tabularx}{\textwidth}{llXrr}
              a & b & c & d & e \\
              1 & 2 & 3 & 4 & 5 \\
            \end{tabularx}
            """
        ).strip("\n")

    def test_longtable_with_headers(self) -> None:
        table = Table(TableKind.LongTable, "", "lr")
        table.push_row(make_row("Name", "Value", is_first=True))
        table.push_row(make_row("Name (cont.)", "Value", is_header=True))
        table.push_row(make_row("foo", "1"))
        assert render_table(table) == dedent(
            r"""
            \begin{longtable}{lr}
              Name & Value \\
              \endfirsthead
              Name (cont.) & Value \\
              \endhead
              foo & 1 \\
            \end{longtable}
            """
        ).strip("\n")

    def test_empty_table(self) -> None:
        table = Table(TableKind.Tabular, "", "l")
        assert render_table(table) == "\\begin{tabular}{l}\n\\end{tabular}"

    def test_empty_row(self) -> None:
        table = Table(TableKind.Tabular, "", "")
        table.push_row(Row())
        assert render_table(table) == "\\begin{tabular}{}\n   \\\\\n\\end{tabular}"
