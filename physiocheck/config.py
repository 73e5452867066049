import os
from pathlib import Path

_PKG_DIR = Path(__file__).parent

# Rule table used when the caller does not name one ("granular" or "legacy")
SCORING_PROFILE = os.environ.get("PHYSIOCHECK_SCORING_PROFILE", "granular")

LOG_LEVEL = os.environ.get("PHYSIOCHECK_LOG_LEVEL", "INFO").upper()

# Catalog files ship with the package, but deployments may point elsewhere
CATALOG_PATH = Path(os.environ.get(
    "PHYSIOCHECK_CATALOG_PATH",
    _PKG_DIR / "catalog" / "body_areas.yaml",
))
ADVICE_PATH = Path(os.environ.get(
    "PHYSIOCHECK_ADVICE_PATH",
    _PKG_DIR / "catalog" / "advice.yaml",
))
