#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
decision-kit — Main Entry Point
===============================

Usage
-----
    python main.py group
    python main.py uncertainty [--criteria savage,laplace] [--alpha 0.6]

Global options ``--verbose`` (DEBUG diagnostics on stderr) and
``--no-color`` go before the command.

Exit status: 0 on success, 1 when input is aborted or invalid,
2 on bad command-line arguments.
"""

import argparse
import sys
from typing import List, Optional


def _parse_criteria(text: str):
    from uncertainty import Criterion
    names = [part for part in text.split(',') if part.strip()]
    if not names:
        raise argparse.ArgumentTypeError("at least one criterion is required")
    try:
        return [Criterion.parse(n) for n in names]
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from None


def _parse_alpha(text: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}") from None
    if not 0.0 <= value <= 1.0:
        raise argparse.ArgumentTypeError("alpha must lie in [0, 1]")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='decision-kit',
        description='Classroom decision-theory algorithms: group Pareto '
                    'ranking and criteria for decisions under uncertainty.')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='write DEBUG diagnostics to stderr')
    parser.add_argument('--no-color', action='store_true',
                        help='disable ANSI colours')

    sub = parser.add_subparsers(dest='command', required=True)
    sub.add_parser('group', help='multi-expert ranking with Pareto dominance')

    unc = sub.add_parser('uncertainty',
                         help='Savage, Laplace, Wald, MaxiMax and Hurwicz criteria')
    unc.add_argument('--criteria', type=_parse_criteria, default=None,
                     help='comma-separated subset of: savage, laplace, wald, '
                          'maximax, hurwicz (default: all)')
    unc.add_argument('--alpha', type=_parse_alpha, default=None,
                     help='Hurwicz optimism coefficient (prompted if omitted)')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Configure and execute the selected pipeline."""
    args = build_parser().parse_args(argv)

    # ------------------------------------------------------------------
    # Lazy imports (keeps --help fast)
    # ------------------------------------------------------------------
    from config import get_default_config
    from loggers import setup_logging
    from pipeline import GroupRankingPipeline, UncertaintyPipeline

    config = get_default_config()
    if args.verbose:
        config.logging.level = 'DEBUG'
    if args.no_color:
        config.display.use_color = False
    if args.command == 'uncertainty':
        if args.criteria:
            config.uncertainty.criteria = args.criteria
        config.uncertainty.alpha = args.alpha

    console = setup_logging(config.logging.level,
                            use_color=config.display.use_color)

    try:
        if args.command == 'group':
            GroupRankingPipeline(config, console).run()
        else:
            UncertaintyPipeline(config, console).run()
    except (EOFError, KeyboardInterrupt):
        console.error('Input aborted.')
        return 1
    except ValueError as exc:
        console.error(str(exc))
        return 1

    console.success('Done.')
    return 0


if __name__ == '__main__':
    sys.exit(main())
