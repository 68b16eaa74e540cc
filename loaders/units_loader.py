"""Loader for the unit catalog."""
from __future__ import annotations

import logging
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Dict, List, Mapping

import settings
from core.entities import SpecialEffect, UnitCategory, UnitDefinition
from .core import Context, default_context, read_json, require_keys

logger = logging.getLogger(__name__)


def _parse_category(value: str) -> UnitCategory:
    try:
        return UnitCategory(value)
    except ValueError:
        raise ValueError(f"Unknown unit category {value!r}") from None


def _merge_template(entry: Dict[str, Any], templates: Dict[str, dict]) -> Dict[str, Any]:
    """Return ``entry`` with the defaults of its ``template`` filled in."""

    tmpl_name = entry.get("template")
    if not tmpl_name or tmpl_name not in templates:
        return dict(entry)
    tmpl = templates[tmpl_name]
    merged = {**tmpl, **entry}
    merged["stats"] = {**tmpl.get("stats", {}), **entry.get("stats", {})}
    return merged


def _build_unit(entry: Dict[str, Any]) -> UnitDefinition:
    require_keys(entry, ["id", "stats"])
    stats = entry["stats"]
    require_keys(stats, ["attack", "defence", "hp"])
    special = entry.get("special")
    return UnitDefinition(
        name=entry["id"],
        base_attack=stats["attack"],
        base_defence=stats["defence"],
        base_hp=stats["hp"],
        category=_parse_category(entry.get("category", UnitCategory.NORMAL.value)),
        special=SpecialEffect.parse(special) if special else None,
    )


def load_units(ctx: Context, manifest: str = "units/units.json") -> Mapping[str, UnitDefinition]:
    """Load unit definitions from ``manifest``.

    The manifest is either a list of entries or a mapping with a ``units``
    list and optional ``templates`` providing default values for entries that
    reference them.  Each entry needs an ``id`` and a ``stats`` block with
    ``attack``, ``defence`` and ``hp``; ``category`` defaults to ``normal``
    and ``special`` uses the ``"<kind>:<amount>"`` form.

    A missing or unreadable manifest yields an empty catalog.  Malformed
    entries raise :class:`KeyError` or :class:`ValueError`.
    """

    try:
        data = read_json(ctx, manifest)
    except (OSError, ValueError) as exc:
        logger.warning("Failed to load unit manifest %s: %s", manifest, exc)
        return MappingProxyType({})

    templates: Dict[str, dict] = {}
    entries: List[dict]
    if isinstance(data, dict):
        templates = data.get("templates", {})
        entries = data.get("units", [])
    else:
        entries = list(data)

    units: Dict[str, UnitDefinition] = {}
    for entry in entries:
        unit = _build_unit(_merge_template(entry, templates))
        if unit.name in units:
            logger.warning("Duplicate unit %s in %s; keeping the last entry", unit.name, manifest)
        units[unit.name] = unit

    logger.debug("Loaded %d units from %s", len(units), manifest)
    return MappingProxyType(units)


@lru_cache(maxsize=None)
def default_catalog() -> Mapping[str, UnitDefinition]:
    """Return the bundled catalog, loaded once per process."""
    return load_units(default_context(), settings.UNITS_MANIFEST)


__all__ = ["load_units", "default_catalog"]
