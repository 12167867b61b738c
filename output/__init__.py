# -*- coding: utf-8 -*-
"""
Output Package
==============

Everything that turns results into text: pure row builders in
:mod:`output.tables` and the printing :class:`ConsoleReport`.

Quick start::

    from output import ConsoleReport
    report = ConsoleReport(console)
    report.show_ranking(ranked)
"""

from .console_report import ConsoleReport
from . import tables

__all__ = ['ConsoleReport', 'tables']
