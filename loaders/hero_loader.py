"""Loader for hero presets."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List

import constants
from core.entities import HeroBonuses
from .core import Context, read_json, require_keys

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class HeroDef:
    id: str
    name: str
    level: float = constants.DEFAULT_HERO_LEVEL
    attack: float | None = None
    defence: float | None = None
    hp: float | None = None

    def bonuses(self) -> HeroBonuses:
        return HeroBonuses(
            attack_pct=self.attack,
            defence_pct=self.defence,
            hp_pct=self.hp,
            level=self.level,
        )


def _number(value: Any, field_name: str) -> float | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"Hero {field_name} must be a number, got {value!r}")
    return value


def parse_bonuses(data: Dict[str, Any]) -> HeroBonuses:
    """Build :class:`HeroBonuses` from ``{"level": .., "bonuses": {..}}``.

    Raises :class:`ValueError` when ``bonuses`` is not a mapping or when the
    level or a percentage is not a number.
    """

    bonuses = data.get("bonuses", {})
    if not isinstance(bonuses, dict):
        raise ValueError(f"Hero bonuses must be a mapping, got {bonuses!r}")
    level = _number(data.get("level"), "level")
    return HeroBonuses(
        attack_pct=_number(bonuses.get("attack"), "attack"),
        defence_pct=_number(bonuses.get("defence"), "defence"),
        hp_pct=_number(bonuses.get("hp"), "hp"),
        level=constants.DEFAULT_HERO_LEVEL if level is None else level,
    )


def load_heroes(ctx: Context, manifest: str = "units/heroes.json") -> Dict[str, HeroDef]:
    """Load hero presets from ``manifest``.

    The manifest is a JSON array (or a mapping with a ``heroes`` array) of
    entries with ``id``, ``name``, ``level`` and a ``bonuses`` mapping of
    ``attack``/``defence``/``hp`` percentages.  Entries without an ``id`` are
    skipped.
    """

    try:
        data = read_json(ctx, manifest)
    except (OSError, ValueError) as exc:
        logger.warning("Failed to load hero manifest %s: %s", manifest, exc)
        return {}

    entries: List[Dict[str, Any]] = data.get("heroes", []) if isinstance(data, dict) else data

    heroes: Dict[str, HeroDef] = {}
    for entry in entries:
        try:
            require_keys(entry, ["id"])
        except KeyError:
            logger.warning("Skipping hero entry without id in %s", manifest)
            continue
        try:
            bonuses = parse_bonuses(entry)
        except ValueError as exc:
            logger.warning("Skipping hero %s in %s: %s", entry["id"], manifest, exc)
            continue
        hero = HeroDef(
            id=entry["id"],
            name=entry.get("name", entry["id"]),
            level=bonuses.level,
            attack=bonuses.attack_pct,
            defence=bonuses.defence_pct,
            hp=bonuses.hp_pct,
        )
        heroes[hero.id] = hero
    return heroes


__all__ = ["HeroDef", "load_heroes", "parse_bonuses"]
