"""Plain-text rendering of a :class:`~core.combat_rules.BattleOutcome`.

Totals are shown as whole numbers rounded half away from zero, the way the
results panel of the calculator displays them.  The computed values
themselves are never rounded.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import List, Mapping

from .combat_rules import BattleOutcome, Side
from .entities import ArmyResult

SIDE_KEYS = {Side.ATTACKER: "Angreifer", Side.DEFENDER: "Verteidiger"}


def format_total(value: float) -> str:
    """Return ``value`` rounded to a whole number."""
    return str(Decimal(repr(value)).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def _side_lines(label: str, result: ArmyResult, strings: Mapping[str, str]) -> List[str]:
    rows = [
        ("Angriff", result.total_attack),
        ("Verteidigung", result.total_defence),
        ("Leben", result.total_hp),
    ]
    return [f"{label} {strings.get(key, key)}: {format_total(value)}" for key, value in rows]


def format_report(outcome: BattleOutcome, strings: Mapping[str, str] | None = None) -> str:
    """Render both sides' totals followed by the winner.

    ``strings`` maps label keys to translated text; missing keys are shown
    untranslated.
    """

    strings = strings or {}
    attacker = strings.get(SIDE_KEYS[Side.ATTACKER], SIDE_KEYS[Side.ATTACKER])
    defender = strings.get(SIDE_KEYS[Side.DEFENDER], SIDE_KEYS[Side.DEFENDER])
    winner_key = SIDE_KEYS[outcome.winner]

    lines = [strings.get("Ergebnisse", "Ergebnisse")]
    lines += _side_lines(attacker, outcome.attacker, strings)
    lines.append("")
    lines += _side_lines(defender, outcome.defender, strings)
    lines.append("")
    lines.append(f"{strings.get('Gewinner', 'Gewinner')}: {strings.get(winner_key, winner_key)}")
    return "\n".join(lines)


__all__ = ["format_report", "format_total"]
