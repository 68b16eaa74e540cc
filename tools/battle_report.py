#!/usr/bin/env python3
"""Compare two armies described in JSON files and print the result.

The attacker file and the defender file use the format accepted by
:func:`loaders.army_loader.parse_army`.  The defender file is always treated
as the defending side; when it does not give a ``wall_level`` the configured
``KS_DEFAULT_WALL_LEVEL`` is used.

Errors in the input files are printed to stderr and the script exits with
status 1.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

import settings
from core.combat_rules import compare_armies
from core.report import format_report
from loaders.army_loader import load_army
from loaders.core import default_context
from loaders.hero_loader import load_heroes
from loaders.i18n import load_locale
from loaders.units_loader import default_catalog, load_units

logger = logging.getLogger(__name__)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("attacker", help="JSON file describing the attacking army")
    parser.add_argument("defender", help="JSON file describing the defending army")
    parser.add_argument("--units", default=None,
                        help="unit manifest replacing the bundled catalog")
    parser.add_argument("--wall-level", type=int, default=None,
                        help="wall level used when the defender file has none")
    parser.add_argument("--language", default=settings.LANGUAGE,
                        help="language of the report labels")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _parser().parse_args(argv)
    logging.basicConfig(level=settings.LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")

    ctx = default_context()
    wall_level = settings.DEFAULT_WALL_LEVEL if args.wall_level is None else args.wall_level

    try:
        catalog = load_units(ctx, args.units) if args.units else default_catalog()
        if not catalog:
            raise ValueError("unit catalog is empty")
        heroes = load_heroes(ctx, settings.HEROES_MANIFEST)
        attacker = load_army(args.attacker, catalog=catalog, heroes=heroes)
        defender = load_army(
            args.defender,
            catalog=catalog,
            heroes=heroes,
            default_wall_level=wall_level,
            defender=True,
        )
    except (OSError, ValueError, KeyError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    logger.debug("Attacker %s, defender %s", attacker, defender)

    outcome = compare_armies(attacker, defender, catalog)
    print(format_report(outcome, load_locale(args.language)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
