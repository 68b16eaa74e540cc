import pytest

from core.combat_rules import compare_armies
from core.report import format_report, format_total
from loaders.i18n import load_locale


@pytest.mark.parametrize("value, expected", [
    (0, "0"),
    (12, "12"),
    (0.5, "1"),
    (2.5, "3"),
    (1.49, "1"),
    (100.00000000000009, "100"),
    (-0.5, "-1"),
])
def test_format_total_rounds_half_up(value, expected):
    assert format_total(value) == expected


def _outcome(army, catalog):
    return compare_armies(
        army({"Ritter": 10}),
        army({"Heiler": 1}, is_defender=True, wall_level=3),
        catalog,
    )


def test_report_in_german(army, catalog):
    text = format_report(_outcome(army, catalog), load_locale("de"))
    lines = text.splitlines()
    assert lines[0] == "Ergebnisse"
    assert "Angreifer Angriff: 100" in lines
    assert "Angreifer Verteidigung: 350" in lines
    assert "Angreifer Leben: 1500" in lines
    assert "Verteidiger Leben: 100" in lines
    assert lines[-1] == "Gewinner: Angreifer"


def test_report_in_english(army, catalog):
    text = format_report(_outcome(army, catalog), load_locale("en"))
    assert "Defender hit points: 100" in text
    assert text.splitlines()[-1] == "Winner: Attacker"


def test_report_without_strings_uses_keys(army, catalog):
    outcome = compare_armies(army({"Heiler": 1}), army({"Ritter": 1}), catalog)
    text = format_report(outcome)
    assert text.splitlines()[-1] == "Gewinner: Verteidiger"


def test_unknown_language_falls_back_to_german():
    strings = load_locale("xx")
    assert strings["Gewinner"] == "Gewinner"


def test_partial_locale_keeps_german_for_missing_keys(tmp_path, write_json):
    from loaders.core import Context

    write_json("i18n/de.json", {"Gewinner": "Gewinner", "Leben": "Leben"})
    write_json("i18n/it.json", {"Gewinner": "Vincitore"})
    ctx = Context(repo_root=str(tmp_path), search_paths=[str(tmp_path)])
    strings = load_locale("it", ctx=ctx)
    assert strings == {"Gewinner": "Vincitore", "Leben": "Leben"}
