import pytest

from core.combat_rules import (
    BattleOutcome,
    Side,
    attack_score,
    compare_armies,
    defence_score,
    determine_winner,
)
from core.entities import ArmyResult


pytestmark = pytest.mark.combat


def test_scores_cross_attack_and_defence():
    attacker = ArmyResult(total_attack=120, total_defence=40, total_hp=1)
    defender = ArmyResult(total_attack=70, total_defence=30, total_hp=1)
    assert attack_score(attacker, defender) == 90
    assert defence_score(attacker, defender) == 30


def test_attacker_wins_with_greater_score():
    attacker = ArmyResult(total_attack=120, total_defence=40)
    defender = ArmyResult(total_attack=70, total_defence=30)
    assert determine_winner(attacker, defender) is Side.ATTACKER


def test_defender_wins_with_greater_score():
    attacker = ArmyResult(total_attack=10, total_defence=5)
    defender = ArmyResult(total_attack=50, total_defence=20)
    assert determine_winner(attacker, defender) is Side.DEFENDER


def test_tie_goes_to_defender():
    attacker = ArmyResult(total_attack=100, total_defence=50)
    defender = ArmyResult(total_attack=100, total_defence=50)
    assert attack_score(attacker, defender) == defence_score(attacker, defender)
    assert determine_winner(attacker, defender) is Side.DEFENDER


def test_empty_armies_tie_for_defender():
    empty = ArmyResult()
    assert determine_winner(empty, empty) is Side.DEFENDER


def test_compare_armies_evaluates_both_sides(army, catalog):
    outcome = compare_armies(
        army({"Ritter": 10}),
        army({"Heiler": 1}, is_defender=True, wall_level=3),
        catalog,
    )
    assert isinstance(outcome, BattleOutcome)
    assert outcome.attacker == ArmyResult(100, 350, 1500)
    assert outcome.defender.total_hp == pytest.approx(100)
    assert outcome.attack_score == 100 - 15
    assert outcome.defence_score == 5 - 350
    assert outcome.winner is Side.ATTACKER


def test_side_values():
    assert Side.ATTACKER.value == "attacker"
    assert Side.DEFENDER.value == "defender"
