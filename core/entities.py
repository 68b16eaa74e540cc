"""
Entity definitions for the army calculator.

This module defines the static description of unit types, the input
describing one side of a battle and the aggregated statistics produced for
it.  Everything here is immutable so a single catalog can be shared between
any number of evaluations.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Tuple

import constants


class UnitCategory(Enum):
    """Families of units.  Vampires scale with the army's blood level."""

    NORMAL = "normal"
    VAMPIRE = "vampire"


class EffectKind(Enum):
    """Stats a special effect can boost."""

    BOOST_ATTACK = "boost_attack"
    BOOST_DEFENCE = "boost_defence"
    BOOST_HP = "boost_hp"

    @property
    def stat(self) -> str:
        return self.value.split("_", 1)[1]


@dataclass(frozen=True, slots=True)
class SpecialEffect:
    """Army wide bonus granted by a unit type.

    ``amount`` is added to the boosted stat once for every unit in the army,
    whatever its type.
    """

    kind: EffectKind
    amount: float

    @classmethod
    def parse(cls, text: str) -> "SpecialEffect":
        """Build an effect from its manifest form ``"<kind>:<amount>"``."""

        name, sep, arg = text.partition(":")
        if not sep:
            raise ValueError(f"Special effect {text!r} has no amount")
        try:
            kind = EffectKind(name.strip())
        except ValueError:
            raise ValueError(f"Unknown special effect {name!r}") from None
        try:
            amount = float(arg)
        except ValueError:
            raise ValueError(f"Invalid amount in special effect {text!r}") from None
        return cls(kind, amount)


@dataclass(frozen=True, slots=True)
class UnitDefinition:
    """Base statistics shared by all units of a given type."""

    name: str
    base_attack: float
    base_defence: float
    base_hp: float
    category: UnitCategory = UnitCategory.NORMAL
    special: Optional[SpecialEffect] = None

    @property
    def is_vampire(self) -> bool:
        return self.category is UnitCategory.VAMPIRE


class ShrineKind(Enum):
    EARTH = "earth"
    FIRE = "fire"
    SHADOW = "shadow"

    @property
    def bonus(self) -> Tuple[str, float]:
        """Return ``(stat, amount)`` granted per unit by this shrine."""
        return constants.SHRINE_BONUSES[self.value]


@dataclass(frozen=True, slots=True)
class Shrine:
    kind: ShrineKind


@dataclass(frozen=True, slots=True)
class HeroBonuses:
    """Percentage bonuses of the hero leading an army.

    Each percentage is multiplied by ``level`` before being applied, so with
    the default level of 1 an ``attack_pct`` of 50 raises attack by half.
    ``None`` and ``0`` both leave the stat untouched.
    """

    attack_pct: Optional[float] = None
    defence_pct: Optional[float] = None
    hp_pct: Optional[float] = None
    level: float = constants.DEFAULT_HERO_LEVEL

    def factor(self, pct: Optional[float]) -> Optional[float]:
        """Return the multiplier for ``pct`` or ``None`` when it is unset."""
        if not pct:
            return None
        return 1 + pct * self.level / 100


@dataclass(frozen=True)
class ArmyComposition:
    """Everything known about one side before its stats are computed.

    Counts are expected to be non-negative integers.  Names missing from the
    catalog are ignored during evaluation.
    """

    unit_counts: Mapping[str, int] = field(default_factory=dict)
    hero: Optional[HeroBonuses] = None
    shrines: Tuple[Shrine, ...] = ()
    blood_level: Optional[float] = None
    is_defender: bool = False
    wall_level: int = 0
    name: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "unit_counts", MappingProxyType(dict(self.unit_counts)))
        object.__setattr__(self, "shrines", tuple(self.shrines))


@dataclass(frozen=True, slots=True)
class ArmyResult:
    """Aggregated statistics of one army.  Values are never rounded."""

    total_attack: float = 0
    total_defence: float = 0
    total_hp: float = 0


__all__ = [
    "UnitCategory",
    "EffectKind",
    "SpecialEffect",
    "UnitDefinition",
    "ShrineKind",
    "Shrine",
    "HeroBonuses",
    "ArmyComposition",
    "ArmyResult",
]
