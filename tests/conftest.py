import json
import os
import sys

import pytest

# Ensure the project root is on the path so modules can be imported in tests
ROOT = os.path.dirname(os.path.dirname(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from core.entities import (
    ArmyComposition,
    EffectKind,
    SpecialEffect,
    UnitCategory,
    UnitDefinition,
)
from loaders.core import Context
from loaders.units_loader import default_catalog


@pytest.fixture
def assets_ctx():
    """Return a :class:`Context` pointing at the bundled assets."""

    return Context(repo_root=ROOT, search_paths=[os.path.join(ROOT, "assets")])


@pytest.fixture
def catalog():
    """The catalog shipped in ``assets/units/units.json``."""

    return default_catalog()


@pytest.fixture
def tiny_catalog():
    """A hand-built catalog independent from the bundled manifest."""

    return {
        "Pikeman": UnitDefinition("Pikeman", 4, 5, 10),
        "Ghoul": UnitDefinition("Ghoul", 2, 3, 8, UnitCategory.VAMPIRE),
        "Banner": UnitDefinition(
            "Banner", 0, 0, 1, special=SpecialEffect(EffectKind.BOOST_ATTACK, 1)
        ),
    }


@pytest.fixture
def army():
    """Return a factory building an :class:`ArmyComposition` from keywords."""

    def _factory(units=None, **kwargs):
        return ArmyComposition(unit_counts=units or {}, **kwargs)

    return _factory


@pytest.fixture
def write_json(tmp_path):
    """Write ``data`` as JSON below ``tmp_path`` and return the file path."""

    def _write(rel_path, data):
        path = tmp_path / rel_path
        path.parent.mkdir(parents=True, exist_ok=True)
        text = data if isinstance(data, str) else json.dumps(data)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
