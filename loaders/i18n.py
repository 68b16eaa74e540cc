from __future__ import annotations

"""Lightweight helpers for loading translation strings.

Locale files live in ``assets/i18n`` as a flat ``key -> value`` mapping per
language.  Keys are the German labels, so the German file is the fallback
and any key missing from the requested locale keeps its German text.
"""

import os
from typing import Dict

from .core import Context, default_context, read_json


def load_locale(language: str, default: str = "de", ctx: Context | None = None) -> Dict[str, str]:
    """Return a dictionary of translation strings for ``language``.

    Missing files or parse errors result in an empty mapping for that
    language so callers always receive a dictionary.
    """

    ctx = ctx or default_context()
    search = Context(
        repo_root=ctx.repo_root,
        search_paths=[os.path.join(p, "i18n") for p in ctx.search_paths],
    )

    try:
        data = read_json(search, f"{default}.json")
    except (OSError, ValueError):  # pragma: no cover - treated as empty fallback
        data = {}

    strings: Dict[str, str] = dict(data)
    if language != default:
        try:
            extra = read_json(search, f"{language}.json")
        except (OSError, ValueError):
            extra = {}
        strings.update(extra)
    return strings
