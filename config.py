"""Load/save app settings (configs/settings.json) and ships (JSON, res/ship.json by default)."""

import json
import logging
import math
from pathlib import Path

from starship.deck import Deck, Ship
from starship.unit import Resource, Unit

ROOT_DIR = Path(__file__).resolve().parent
CONFIG_DIR = ROOT_DIR / "configs"
SETTINGS_FILE = CONFIG_DIR / "settings.json"

logger = logging.getLogger(__name__)


class ShipFormatError(ValueError):
    """Ship file missing, unreadable, or not a ship."""


def _default_config() -> dict:
    return {
        "ship_path": "res/ship.json",
        "window": {"width": 1024, "height": 768},
        "cell_size": 32,
        "title_height": 32,
        "tick_interval_ms": 10,
        "max_ticks_per_frame": 20,
        "frame_rate": 60,
        "show_info": True,
        "log_level": "INFO",
    }


def _merge_defaults(data: dict) -> dict:
    d = _default_config()
    if isinstance(data.get("window"), dict):
        d["window"] = {**d["window"], **data["window"]}
    for k in (
        "ship_path", "cell_size", "title_height", "tick_interval_ms",
        "max_ticks_per_frame", "frame_rate", "show_info", "log_level",
    ):
        if k in data:
            d[k] = data[k]
    return d


def load_settings(path: Path | str | None = None) -> dict:
    p = Path(path) if path is not None else SETTINGS_FILE
    if not p.exists():
        return _default_config()
    try:
        with open(p, "r") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Ignoring settings %s: %s", p, e)
        return _default_config()
    if not isinstance(data, dict):
        logger.warning("Ignoring settings %s: not an object", p)
        return _default_config()
    return _merge_defaults(data)


def save_settings(settings: dict, path: Path | str | None = None) -> None:
    p = Path(path) if path is not None else SETTINGS_FILE
    p.parent.mkdir(parents=True, exist_ok=True)
    with open(p, "w") as f:
        json.dump(_merge_defaults(settings), f, indent=2)


def resolve_path(path: Path | str) -> Path:
    """Relative paths are taken from the project root."""
    p = Path(path)
    return p if p.is_absolute() else ROOT_DIR / p


def ship_to_dict(ship: Ship) -> dict:
    return {
        "name": ship.name,
        "width": ship.width,
        "height": ship.height,
        "current_deck": ship.current_deck,
        "decks": [
            {
                "name": deck.name,
                "blocks": [
                    {
                        "x": unit.x,
                        "y": unit.y,
                        "kind": unit.kind,
                        "resources": {
                            name: {"amount": res.amount, "capacity": res.capacity}
                            for name, res in unit.resources.items()
                        },
                    }
                    for unit in deck.units
                ],
            }
            for deck in ship.decks
        ],
    }


def _pool_value(res: dict, key: str) -> float:
    """Amounts and capacities must be finite and non-negative."""
    v = float(res[key])
    if not math.isfinite(v) or v < 0:
        raise ShipFormatError(f"{key} must be a finite non-negative number, got {res[key]!r}")
    return v


def _unit_from_dict(data: dict) -> Unit:
    resources = {
        str(name): Resource(_pool_value(res, "amount"), _pool_value(res, "capacity"))
        for name, res in (data.get("resources") or {}).items()
    }
    return Unit(int(data["x"]), int(data["y"]), str(data["kind"]), resources)


def ship_from_dict(data: dict) -> Ship:
    """Build a ship; raises ShipFormatError on missing fields or no decks."""
    try:
        decks = [
            Deck(str(d["name"]), [_unit_from_dict(b) for b in d.get("blocks", [])])
            for d in data["decks"]
        ]
        ship = Ship(
            str(data["name"]),
            int(data["width"]),
            int(data["height"]),
            decks,
            int(data.get("current_deck", 0)),
        )
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise ShipFormatError(f"not a ship: {e!r}") from e
    if not ship.decks:
        raise ShipFormatError("ship has no decks")
    if not 0 <= ship.current_deck < len(ship.decks):
        ship.current_deck = 0
    return ship


def load_ship(path: Path | str) -> Ship:
    p = resolve_path(path)
    try:
        with open(p, "r") as f:
            data = json.load(f)
    except OSError as e:
        raise ShipFormatError(f"cannot read {p}: {e}") from e
    except ValueError as e:
        raise ShipFormatError(f"invalid JSON in {p}: {e}") from e
    if not isinstance(data, dict):
        raise ShipFormatError(f"{p}: not an object")
    ship = ship_from_dict(data)
    logger.info("Loaded %s from %s (%d decks)", ship.name, p, len(ship.decks))
    return ship


def save_ship(ship: Ship, path: Path | str) -> None:
    p = resolve_path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with open(p, "w") as f:
        json.dump(ship_to_dict(ship), f, indent=2)
    logger.info("Saved %s to %s", ship.name, p)
