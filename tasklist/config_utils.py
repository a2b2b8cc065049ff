"""
Configuration helpers: loading tasklist.toml, resolving the task file path,
and writing a starter configuration.
"""
import copy
import logging
import typing as _t
from pathlib import Path

import tomli
import tomli_w

# ───────────────────────────────────────── Constants & Config ────
CFG_PATH = Path("tasklist.toml")

DEFAULT_CFG = {
    "tasks": {"file": "tasks.csv"},
    "logging": {
        "level": "INFO",
        "format": "%(asctime)s - %(levelname)s - %(message)s",
    },
    "menu": {
        # Load the task file when the menu starts
        "autoload": True,
        # Save when the user picks Exit
        "save_on_exit": True,
    },
}

def _merge_with_defaults(loaded: dict) -> dict:
    """Overlay the loaded sections on top of DEFAULT_CFG, one section at a time."""
    cfg = copy.deepcopy(DEFAULT_CFG)
    for section, values in loaded.items():
        if isinstance(values, dict) and isinstance(cfg.get(section), dict):
            cfg[section].update(values)
        else:
            cfg[section] = values
    return cfg

def load_cfg(cfg_path: _t.Optional[_t.Union[str, Path]] = None) -> dict:
    """Load configuration from a TOML file, falling back to defaults on any problem.

    Args:
        cfg_path: Path to the TOML file. Defaults to CFG_PATH.

    Returns:
        The merged configuration dictionary.
    """
    path = Path(cfg_path) if cfg_path is not None else CFG_PATH
    if not path.exists():
        logging.warning(f"Config file {path} not found, using default configuration.")
        return copy.deepcopy(DEFAULT_CFG)
    try:
        with path.open("rb") as f:
            return _merge_with_defaults(tomli.load(f))
    except tomli.TOMLDecodeError as e:
        logging.error(f"Error parsing {path}: {e}. Using default configuration.")
        return copy.deepcopy(DEFAULT_CFG)
    except OSError as e:
        logging.error(f"Error reading {path}: {e}. Using default configuration.")
        return copy.deepcopy(DEFAULT_CFG)

def get_tasks_file_path(cfg: _t.Optional[dict] = None) -> Path:
    """Get the path to the tasks file."""
    if cfg is None:
        cfg = load_cfg()
    return Path(cfg.get("tasks", {}).get("file", DEFAULT_CFG["tasks"]["file"]))

def write_default_cfg(cfg_path: _t.Optional[_t.Union[str, Path]] = None, force: bool = False) -> bool:
    """Write DEFAULT_CFG as TOML. Returns False if the file exists and force is not set."""
    path = Path(cfg_path) if cfg_path is not None else CFG_PATH
    if path.exists() and not force:
        logging.info(f"{path} already exists, not overwritten.")
        return False
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(tomli_w.dumps(DEFAULT_CFG), encoding="utf-8")
    logging.info(f"Wrote default configuration to {path}")
    return True

# ───────────────────────────────────────── Logging Setup ────
def configure_logging(cfg: _t.Optional[dict] = None) -> None:
    """
    Apply the [logging] section to the root logger.

    The format only takes effect if the root logger has no handlers yet;
    the level is always applied.
    """
    if cfg is None:
        cfg = load_cfg()
    log_cfg = cfg.get("logging", {})
    level_name = str(log_cfg.get("level", "INFO")).upper()
    level = logging.getLevelName(level_name)
    unknown_level = not isinstance(level, int)
    level = logging.INFO if unknown_level else level
    logging.basicConfig(level=level, format=log_cfg.get("format", DEFAULT_CFG["logging"]["format"]))
    logging.getLogger().setLevel(level)
    if unknown_level:
        logging.warning(f"Unknown log level {level_name!r}, using INFO.")
