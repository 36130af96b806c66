r"""
A minimal LaTeX document model into which tables are placed.

A :py:class:`Document` consists of a document class, a :py:class:`Preamble`
recording the packages used, and a list of tables forming the document body.
Tables register the packages they need via
:py:meth:`~latex_table.table.Table.prepare_document` when they are pushed
into a document.

.. autoclass:: Document
    :members:

.. autoclass:: Preamble
    :members:
"""

from typing import List

from dataclasses import dataclass, field

import logging

from latex_table.table import Table

from latex_table.render import render_table


logger = logging.getLogger(__name__)


@dataclass
class Preamble:
    packages: List[str] = field(default_factory=list)
    """The names of the packages used, in the order they were registered."""

    def use_package(self, name: str) -> None:
        """
        Register a package. Packages which have already been registered are
        ignored.
        """
        if name not in self.packages:
            logger.debug("Using package %s", name)
            self.packages.append(name)

    def render(self) -> str:
        return "\n".join(f"\\usepackage{{{name}}}" for name in self.packages)


@dataclass
class Document:
    document_class: str = "article"
    preamble: Preamble = field(default_factory=Preamble)
    elements: List[Table] = field(default_factory=list)

    def push(self, table: Table) -> "Document":
        """
        Append a table to the body of the document, registering any packages
        it requires. Returns the document to allow chaining.
        """
        table.prepare_document(self)
        self.elements.append(table)
        return self

    def render(self) -> str:
        """Render the complete document source, ending with a newline."""
        lines = [f"\\documentclass{{{self.document_class}}}"]
        preamble = self.preamble.render()
        if preamble:
            lines.append(preamble)
        lines.append(r"\begin{document}")
        lines.extend(render_table(table) for table in self.elements)
        lines.append(r"\end{document}")
        return "\n".join(lines) + "\n"
