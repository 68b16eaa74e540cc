"""
Shared game numbers for the army calculator.

This module keeps the fixed rule values in one place: the flat bonuses
granted by shrines, the hit point reduction of the defender's wall and the
identifiers used for both sides of a battle.  Tweaking balance only requires
changing the values below.
"""

from typing import Dict, Tuple

# Flat bonus granted per unit in the army for every shrine of a given kind.
# Each entry maps the shrine kind to the affected stat and the amount.
SHRINE_BONUSES: Dict[str, Tuple[str, float]] = {
    "earth": ("attack", 2),
    "fire": ("defence", 3),
    "shadow": ("hp", 15),
}

# Wall mitigation.  A defender behind a wall of level ``n`` keeps
# ``1 - WALL_HP_REDUCTION * n`` of its hit points.  Level 3 leaves 10%.
WALL_HP_REDUCTION = 0.3
WALL_LEVELS = (0, 1, 2, 3)
MAX_WALL_LEVEL = WALL_LEVELS[-1]

# Hero levels scale the percentage bonuses.  Level 1 applies them as written.
DEFAULT_HERO_LEVEL = 1

# Unit categories understood by the calculator
UNIT_CATEGORIES = ("normal", "vampire")

# Identifiers for the two sides of a battle.  Translated labels live in the
# locale files under ``assets/i18n``.
SIDE_ATTACKER = "attacker"
SIDE_DEFENDER = "defender"
