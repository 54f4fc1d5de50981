from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List

from devicenames.core.exceptions import PopularNamesError
from devicenames.utils.logging import log_json


def flatten_popular(data: Any) -> List[str]:
    """
    POPULAR.json maps a category label to a list of marketing names:

      { "Samsung": ["Galaxy S8", "Galaxy S9"], "Google": ["Pixel 2"] }

    Labels are dropped; names keep file order (category order, then list order).
    """
    if not isinstance(data, dict):
        raise PopularNamesError("Expected a JSON object at the top level of the popular names file")

    names: List[str] = []
    for category, values in data.items():
        if not isinstance(values, list):
            raise PopularNamesError(f"Category {category!r} is not a list of names")
        for value in values:
            if not isinstance(value, str):
                raise PopularNamesError(f"Category {category!r} holds a non-string entry: {value!r}")
            names.append(value)
    return names


def load_popular_names(path: str | Path) -> List[str]:
    p = Path(path)
    try:
        with p.open("r", encoding="utf-8") as fin:
            data = json.load(fin)
    except FileNotFoundError as exc:
        raise PopularNamesError(f"Popular names file not found: {p}") from exc
    except json.JSONDecodeError as exc:
        raise PopularNamesError(f"Popular names file is not valid JSON: {p}: {exc}") from exc

    names = flatten_popular(data)
    log_json("popular_names_loaded", path=str(p), categories=len(data), names=len(names))
    return names
