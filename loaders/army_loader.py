"""Build :class:`~core.entities.ArmyComposition` objects from plain data.

Callers describe an army with a mapping such as::

    {
        "name": "Angreifer",
        "units": {"Ritter": 10, "General": 1},
        "hero": {"level": 2, "bonuses": {"attack": 10}},
        "shrines": ["earth", "fire"],
        "blood_level": 2,
        "is_defender": false,
        "wall_level": 0
    }

``hero`` may also name a preset from the hero manifest.  This is where user
input is checked: the calculator itself assumes valid values.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Mapping, Optional

import constants
from core.entities import ArmyComposition, HeroBonuses, Shrine, ShrineKind, UnitDefinition
from .hero_loader import HeroDef, parse_bonuses

logger = logging.getLogger(__name__)


def _parse_units(items: Any, catalog: Optional[Mapping[str, UnitDefinition]]) -> Dict[str, int]:
    if isinstance(items, list):
        # Same shape as a hero's starting army: [{"unit": .., "count": ..}]
        pairs = [
            (e.get("unit") or e.get("id"), e.get("count", 1)) if isinstance(e, dict) else (e, 1)
            for e in items
        ]
    elif isinstance(items, dict):
        pairs = list(items.items())
    else:
        raise ValueError(f"'units' must be a mapping or a list, got {type(items).__name__}")

    units: Dict[str, int] = {}
    for name, count in pairs:
        if not name:
            raise ValueError("Unit entry without a name")
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            raise ValueError(f"Count of {name!r} must be a non-negative integer, got {count!r}")
        if catalog is not None and name not in catalog:
            logger.warning("Unknown unit %s will be ignored", name)
        units[name] = units.get(name, 0) + count
    return units


def _parse_shrines(items: Any) -> List[Shrine]:
    if items is None:
        items = []
    elif isinstance(items, str):
        items = [items]
    elif not isinstance(items, list):
        raise ValueError(f"'shrines' must be a list, got {type(items).__name__}")

    shrines: List[Shrine] = []
    for item in items:
        kind = item.get("kind", item.get("type")) if isinstance(item, dict) else item
        try:
            shrines.append(Shrine(ShrineKind(kind)))
        except ValueError:
            raise ValueError(f"Unknown shrine kind {kind!r}") from None
    return shrines


def _parse_hero(value: Any, heroes: Optional[Mapping[str, HeroDef]]) -> Optional[HeroBonuses]:
    if value is None:
        return None
    if isinstance(value, str):
        if heroes is None or value not in heroes:
            raise ValueError(f"Unknown hero preset {value!r}")
        return heroes[value].bonuses()
    if isinstance(value, dict):
        return parse_bonuses(value)
    raise ValueError(f"'hero' must be a preset id or a mapping, got {type(value).__name__}")


def parse_army(
    data: Mapping[str, Any],
    catalog: Optional[Mapping[str, UnitDefinition]] = None,
    heroes: Optional[Mapping[str, HeroDef]] = None,
    default_wall_level: int = 0,
    defender: bool = False,
) -> ArmyComposition:
    """Return the :class:`ArmyComposition` described by ``data``.

    ``catalog`` is only used to warn about unknown unit names; those units
    are kept and later ignored by the calculator.  ``default_wall_level``
    applies to defenders that do not specify ``wall_level``.  ``defender``
    marks the army as defending whatever ``data`` says.

    Raises :class:`ValueError` for negative or non-integer counts, unknown
    shrine kinds or hero presets, non-numeric hero values, a non-boolean
    ``is_defender``, a negative blood level or a wall level outside
    ``constants.WALL_LEVELS``.
    """

    flag = data.get("is_defender", False)
    if not isinstance(flag, bool):
        raise ValueError(f"'is_defender' must be true or false, got {flag!r}")
    is_defender = defender or flag
    wall_level = data.get("wall_level", default_wall_level if is_defender else 0)
    if wall_level not in constants.WALL_LEVELS or isinstance(wall_level, bool):
        raise ValueError(
            f"Wall level must be one of {constants.WALL_LEVELS}, got {wall_level!r}"
        )

    blood_level = data.get("blood_level")
    if blood_level is not None:
        if isinstance(blood_level, bool) or not isinstance(blood_level, (int, float)):
            raise ValueError(f"Blood level must be a number, got {blood_level!r}")
        if blood_level < 0:
            raise ValueError(f"Blood level must not be negative, got {blood_level!r}")

    return ArmyComposition(
        unit_counts=_parse_units(data.get("units", {}), catalog),
        hero=_parse_hero(data.get("hero"), heroes),
        shrines=tuple(_parse_shrines(data.get("shrines", data.get("shrine")))),
        blood_level=blood_level,
        is_defender=is_defender,
        wall_level=int(wall_level),
        name=str(data.get("name", "")),
    )


def load_army(path: str, **kwargs: Any) -> ArmyComposition:
    """Read an army description from the JSON file at ``path``."""

    with open(path, "r", encoding="utf-8") as fh:
        data = json.load(fh)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object")
    return parse_army(data, **kwargs)


__all__ = ["parse_army", "load_army"]
