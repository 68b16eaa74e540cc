"""Aggregate attack, defence and hit points of an army.

:func:`evaluate` is a pure function of the army description and the unit
catalog.  The steps below must run in this order because the hero and wall
multipliers act on the running totals:

1. base stats of every unit, vampires scaled by the blood level
2. special effects of the unit types present
3. shrines, in the order they were given
4. hero percentage bonuses
5. wall mitigation of the defender's hit points
"""

from __future__ import annotations

from typing import Dict, Mapping

import constants
from .entities import ArmyComposition, ArmyResult, UnitDefinition

Catalog = Mapping[str, UnitDefinition]

STATS = ("attack", "defence", "hp")


def _present(composition: ArmyComposition, catalog: Catalog):
    """Yield ``(definition, count)`` for catalog units with a positive count."""
    for name, count in composition.unit_counts.items():
        unit = catalog.get(name)
        if unit is None or count <= 0:
            continue
        yield unit, count


def apply_bonus(
    totals: Dict[str, float],
    stat: str,
    amount: float,
    composition: ArmyComposition,
    catalog: Catalog,
) -> None:
    """Add ``amount`` to ``stat`` once per unit in the army."""

    for _unit, count in _present(composition, catalog):
        totals[stat] += amount * count


def wall_factor(wall_level: int) -> float:
    """Return the share of hit points a defender keeps behind its wall."""
    return 1 - constants.WALL_HP_REDUCTION * wall_level


def evaluate(composition: ArmyComposition, catalog: Catalog) -> ArmyResult:
    """Return the aggregated statistics of ``composition``.

    Units absent from ``catalog`` contribute nothing.  Neither argument is
    modified.
    """

    totals: Dict[str, float] = dict.fromkeys(STATS, 0)
    blood = composition.blood_level

    for unit, count in _present(composition, catalog):
        atk = unit.base_attack
        dfn = unit.base_defence
        if unit.is_vampire and blood:
            atk *= blood
            dfn *= blood
        totals["attack"] += atk * count
        totals["defence"] += dfn * count
        totals["hp"] += unit.base_hp * count

    for unit, _count in _present(composition, catalog):
        effect = unit.special
        if effect is not None:
            apply_bonus(totals, effect.kind.stat, effect.amount, composition, catalog)

    for shrine in composition.shrines:
        stat, amount = shrine.kind.bonus
        apply_bonus(totals, stat, amount, composition, catalog)

    hero = composition.hero
    if hero is not None:
        for stat, pct in zip(STATS, (hero.attack_pct, hero.defence_pct, hero.hp_pct)):
            factor = hero.factor(pct)
            if factor is not None:
                totals[stat] *= factor

    if composition.is_defender and composition.wall_level > 0:
        totals["hp"] *= wall_factor(composition.wall_level)

    return ArmyResult(
        total_attack=totals["attack"],
        total_defence=totals["defence"],
        total_hp=totals["hp"],
    )


__all__ = ["Catalog", "apply_bonus", "evaluate", "wall_factor"]
