# physiocheck/catalog/catalog.py
"""
Static questionnaire catalogs (body areas, categories, red flags, advice text).

Both YAML files are read once per process. A missing or malformed file is a
deployment problem and raises CatalogError; nothing here depends on user input.
"""

from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, FrozenSet, Tuple

import yaml

from physiocheck import config
from physiocheck.utils.logger import error, log


class CatalogError(RuntimeError):
    """Raised when a catalog file cannot be loaded or has the wrong shape."""


def _load_yaml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        error(f"[catalog] cannot load {path}: {exc}")
        raise CatalogError(f"Cannot load catalog {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise CatalogError(f"Catalog {path} must be a mapping, got {type(data).__name__}")
    return data


def _require(data: Dict[str, Any], key: str, kind: type, path: Path):
    value = data.get(key)
    if not isinstance(value, kind):
        raise CatalogError(f"Catalog {path}: '{key}' must be a {kind.__name__}")
    return value


@lru_cache(maxsize=None)
def load_catalog(path: Path | None = None) -> Dict[str, Any]:
    path = Path(path or config.CATALOG_PATH)
    data = _load_yaml(path)
    log(f"[catalog] loaded {path.name}")

    areas = _require(data, "body_areas", dict, path)
    cats = _require(data, "categories", dict, path)
    flags = _require(data, "red_flags", list, path)

    return {
        "body_areas": {str(k): str(v) for k, v in areas.items()},
        "categories": {
            str(name): frozenset(str(a) for a in (members or []))
            for name, members in cats.items()
        },
        "red_flags": tuple(str(k) for k in flags),
    }


@lru_cache(maxsize=None)
def load_advice(path: Path | None = None) -> Dict[str, Any]:
    path = Path(path or config.ADVICE_PATH)
    data = _load_yaml(path)

    _require(data, "summary", str, path)
    for section in ("recommendations", "self_care", "medical_attention"):
        _require(data, section, dict, path)

    for section in ("recommendations", "self_care"):
        entries = data[section].get("by_area") or []
        if not isinstance(entries, list):
            raise CatalogError(f"Catalog {path}: '{section}.by_area' must be a list")
        for entry in entries:
            if (
                not isinstance(entry, dict)
                or not isinstance(entry.get("when"), str)
                or not isinstance(entry.get("text"), list)
            ):
                raise CatalogError(
                    f"Catalog {path}: every '{section}.by_area' entry needs 'when' and a 'text' list"
                )

    return data


def body_area_name(area_id: str) -> str:
    return load_catalog()["body_areas"].get(area_id, area_id)


def categories() -> Dict[str, FrozenSet[str]]:
    return load_catalog()["categories"]


def category(name: str) -> FrozenSet[str]:
    """Members of a category; an unknown category is empty."""
    return categories().get(name, frozenset())


def red_flag_keys() -> Tuple[str, ...]:
    return load_catalog()["red_flags"]
