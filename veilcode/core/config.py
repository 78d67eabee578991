"""Settings: optional ``~/.veilcode/config.yaml`` overlaid by environment.

Precedence: environment > config file > defaults.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

from veilcode.core.progress import DEFAULT_DATA_DIR, STORAGE_KEY
from veilcode.core.puzzles import DEFAULT_PUZZLES_PATH
from veilcode.core.render import DEFAULT_JITTER_DEGREES

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "config.yaml"

ENV_HOME = "VEILCODE_HOME"
ENV_PUZZLES = "VEILCODE_PUZZLES"
ENV_LOG_LEVEL = "VEILCODE_LOG_LEVEL"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    data_dir: Path = DEFAULT_DATA_DIR
    puzzles_path: Path = DEFAULT_PUZZLES_PATH
    storage_key: str = STORAGE_KEY
    log_level: str = "INFO"
    f1_jitter_degrees: float = DEFAULT_JITTER_DEGREES


def _read_config_file(path: Path) -> Dict[str, Any]:
    """Read the YAML config into a dict. Missing or unreadable files give {}."""
    if not path.exists():
        logger.debug("Config file not found: %s (optional; using defaults)", path)
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        logger.warning("Could not read config file %s: %s", path, e)
        return {}
    except yaml.YAMLError as e:
        logger.warning("Invalid YAML in %s: %s", path, e)
        return {}
    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.warning("Config file must contain a mapping; got %s", type(data).__name__)
        return {}
    return data


def _apply(settings: Settings, values: Mapping[str, Any], source: str) -> Settings:
    changes: Dict[str, Any] = {}
    if values.get("data_dir"):
        changes["data_dir"] = Path(str(values["data_dir"])).expanduser()
    if values.get("puzzles_path"):
        changes["puzzles_path"] = Path(str(values["puzzles_path"])).expanduser()
    if values.get("storage_key"):
        changes["storage_key"] = str(values["storage_key"])
    if values.get("log_level"):
        level = str(values["log_level"]).upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"{source}: invalid log_level {values['log_level']!r}")
        changes["log_level"] = level
    if values.get("f1_jitter_degrees") is not None:
        try:
            changes["f1_jitter_degrees"] = float(values["f1_jitter_degrees"])
        except (TypeError, ValueError):
            raise ValueError(f"{source}: f1_jitter_degrees must be a number") from None
    return replace(settings, **changes)


def load_settings(
    environ: Optional[Mapping[str, str]] = None,
    config_path: Optional[Path] = None,
) -> Settings:
    env = os.environ if environ is None else environ
    settings = Settings()

    home = env.get(ENV_HOME)
    if home:
        settings = replace(settings, data_dir=Path(home).expanduser())

    path = config_path if config_path is not None else settings.data_dir / CONFIG_FILENAME
    settings = _apply(settings, _read_config_file(path), source=str(path))

    env_values = {
        "data_dir": env.get(ENV_HOME),
        "puzzles_path": env.get(ENV_PUZZLES),
        "log_level": env.get(ENV_LOG_LEVEL),
    }
    return _apply(settings, env_values, source="environment")
