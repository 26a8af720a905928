# -*- coding: utf-8 -*-
"""
Configuration Module - Configurable defaults for GMTK.

Provides a GmtkConfig dataclass with the regional defaults used by the
map tools: the UTM zone and hemisphere assumed for zoneless input, the
base SIDC template, display precision, and the initial measurement
units. Loads from ~/.gmtk/gmtk_config.json (or the file named by the
``GMTK_CONFIG_PATH`` environment variable) if it exists, otherwise uses
the defaults.

Author
------
GMTK Contributors

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

# Standard library
import json
import logging
import os
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

_ENV_VAR = "GMTK_CONFIG_PATH"
_CONFIG_DIR = Path.home() / ".gmtk"
_CONFIG_FILE = _CONFIG_DIR / "gmtk_config.json"


@dataclass
class GmtkConfig:
    """Global GMTK configuration with defaults.

    Attributes
    ----------
    default_utm_zone : int
        UTM zone assumed for easting/northing input without a zone.
    default_hemisphere : str
        Hemisphere ('N' or 'S') assumed for zoneless UTM input.
    default_base_sidc : str
        Base SIDC template used when no catalog icon is chosen.
    display_decimals : int
        Maximum fraction digits in measurement display strings.
    mgrs_precision : int
        Digits per axis when formatting MGRS (5 = 1 m).
    default_length_unit : str
        Initial length unit code for the measurement tool.
    default_area_unit : str
        Initial area unit code for the measurement tool.
    default_symbol_size : int
        Symbol size in pixels for new annotations.
    cursor_throttle_ms : int
        Minimum interval between cursor coordinate readout updates.
    """

    default_utm_zone: int = 47
    default_hemisphere: str = "N"
    default_base_sidc: str = "0" * 20
    display_decimals: int = 2
    mgrs_precision: int = 5
    default_length_unit: str = "km"
    default_area_unit: str = "sqkm"
    default_symbol_size: int = 40
    cursor_throttle_ms: int = 33

    def save(self, path: Optional[Path] = None) -> None:
        """Save config to JSON file."""
        path = path or resolve_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(asdict(self), f, indent=2)


def resolve_config_path() -> Path:
    """Resolve the config file path.

    Priority:
    1. ``GMTK_CONFIG_PATH`` environment variable
    2. ``~/.gmtk/gmtk_config.json`` (default)

    Returns
    -------
    Path
    """
    env_path = os.environ.get(_ENV_VAR)
    if env_path:
        return Path(env_path)
    return _CONFIG_FILE


def load_config(path: Optional[Path] = None) -> GmtkConfig:
    """Load configuration from file, or return defaults.

    Parameters
    ----------
    path : Optional[Path]
        Config file path. Defaults to :func:`resolve_config_path`.

    Returns
    -------
    GmtkConfig
        Loaded or default configuration.
    """
    path = path or resolve_config_path()
    if path.exists():
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            return GmtkConfig(**{
                k: v for k, v in data.items()
                if k in GmtkConfig.__dataclass_fields__
            })
        except Exception as e:
            logger.warning("Failed to load config from %s: %s", path, e)

    return GmtkConfig()
