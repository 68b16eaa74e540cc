from __future__ import annotations
from dataclasses import dataclass
from enum import Enum

import constants
from .army_stats import Catalog, evaluate
from .entities import ArmyComposition, ArmyResult


class Side(Enum):
    ATTACKER = constants.SIDE_ATTACKER
    DEFENDER = constants.SIDE_DEFENDER


@dataclass(frozen=True)
class BattleOutcome:
    # Vue complète d'une comparaison de deux armées
    attacker: ArmyResult
    defender: ArmyResult
    attack_score: float
    defence_score: float
    winner: Side

# ---- Scores ----
def attack_score(attacker: ArmyResult, defender: ArmyResult) -> float:
    """How far the attacker's attack exceeds the defender's defence."""
    return attacker.total_attack - defender.total_defence


def defence_score(attacker: ArmyResult, defender: ArmyResult) -> float:
    """How far the defender's attack exceeds the attacker's defence."""
    return defender.total_attack - attacker.total_defence

# ---- Vainqueur ----
def determine_winner(attacker: ArmyResult, defender: ArmyResult) -> Side:
    """Return the side with the strictly greater score.

    A tie goes to the defender.
    """

    if attack_score(attacker, defender) > defence_score(attacker, defender):
        return Side.ATTACKER
    return Side.DEFENDER


def compare_armies(
    attacker: ArmyComposition,
    defender: ArmyComposition,
    catalog: Catalog,
) -> BattleOutcome:
    """Evaluate both compositions against ``catalog`` and compare them."""

    atk = evaluate(attacker, catalog)
    dfn = evaluate(defender, catalog)
    return BattleOutcome(
        attacker=atk,
        defender=dfn,
        attack_score=attack_score(atk, dfn),
        defence_score=defence_score(atk, dfn),
        winner=determine_winner(atk, dfn),
    )
