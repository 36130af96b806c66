"""
Programmatic generation of LaTeX tables.

:py:mod:`latex_table.table`: Table description
==============================================

.. automodule:: latex_table.table

:py:mod:`latex_table.render`: LaTeX environment renderer
========================================================

.. automodule:: latex_table.render

:py:mod:`latex_table.document`: Document and preamble
=====================================================

.. automodule:: latex_table.document
"""

__version__ = "0.1.0"
