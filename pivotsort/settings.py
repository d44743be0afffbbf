import json
import logging
import os

from pivotsort.errors import SettingsError

logger = logging.getLogger(__name__)

# ============================================================
# ===================== USER SETTINGS ========================
# ============================================================

WINDOW_WIDTH   = 1100
WINDOW_HEIGHT  = 680
MAX_ARRAY_SIZE = 128
FPS            = 120

BACKGROUND_COLOR = (5, 5, 10)
ACTIVE_COLOR     = (255, 60, 60)
LABEL_COLOR      = (140, 140, 160)
BAR_SPACING      = 1

BENCH_ELEMENTS = 1000
BENCH_RUNS     = 100
BENCH_SEED     = None

SETTINGS_JSON = os.getenv("PIVOTSORT_SETTINGS") or os.path.expanduser(
    "~/.pivotsort/settings.json"
)

_KEYS = (
    "WINDOW_WIDTH", "WINDOW_HEIGHT", "MAX_ARRAY_SIZE", "FPS",
    "BACKGROUND_COLOR", "ACTIVE_COLOR", "LABEL_COLOR", "BAR_SPACING",
    "BENCH_ELEMENTS", "BENCH_RUNS", "BENCH_SEED",
)

# ============================================================
# ====================== SETTINGS JSON =======================
# ============================================================


def defaults() -> dict:
    return {k.lower(): globals()[k] for k in _KEYS}


def load_settings(path=None) -> dict:
    """
    Built-in defaults overlaid with the JSON object stored at `path`.

    A missing file is not an error. Keys the defaults don't know about are
    dropped with a warning; colours come back as tuples. Values of the
    wrong type raise SettingsError.
    """
    path = path or SETTINGS_JSON
    values = defaults()
    if not os.path.exists(path):
        logger.debug("no settings file at %s, using defaults", path)
        return values
    try:
        with open(path) as f:
            raw = json.load(f)
    except (OSError, ValueError) as e:
        raise SettingsError(f"cannot read settings from {path}: {e}") from e
    if not isinstance(raw, dict):
        raise SettingsError(f"settings in {path} must be a JSON object")

    for key, val in raw.items():
        if key not in values:
            logger.warning("ignoring unknown setting %r in %s", key, path)
            continue
        values[key] = _coerce(key, val, path)
    return values


def _is_count(val):
    return isinstance(val, int) and not isinstance(val, bool) and val >= 0


def _coerce(key, val, path):
    if key.endswith("_color"):
        if (isinstance(val, list) and len(val) == 3
                and all(_is_count(c) and c <= 255 for c in val)):
            return tuple(val)
        raise SettingsError(f"{key} in {path} must be three integers 0-255, got {val!r}")
    if key == "bench_seed" and val is None:
        return val
    if not _is_count(val):
        raise SettingsError(f"{key} in {path} must be a non-negative integer, got {val!r}")
    return val


def save_settings(values: dict, path=None):
    path = path or SETTINGS_JSON
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(path, "w") as f:
        json.dump(values, f, indent=2)
    logger.info("saved %d setting(s) to %s", len(values), path)
