#
# For licensing see accompanying LICENSE file.
# Copyright © 2025 Apple Inc. All Rights Reserved.
#
"""Configuration for reading entry files and default query windows.

The package defaults live in `almanac/configs/default.yaml`. A user file and
dotlist overrides (eg ``["query.window=2", "query.unit=weeks"]``) are merged
on top and validated against the `AlmanacConfig` schema. The data directory
defaults to `data` under the working directory, or to `$ALMANAC_DATA_DIR`
when that is set.
"""

import logging
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path

from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from almanac.constants import (
    CONFIGS_DIR,
    DEFAULT_CONFIG_NAME,
    DEFAULT_DATA_DIR,
    DEFAULT_ENCODING,
    DEFAULT_FILE_PATTERN,
    DEFAULT_WINDOW,
    PACKAGE_NAME,
)
from almanac.exceptions import ConfigError
from almanac.queries import WindowUnit

logger = logging.getLogger(__name__)


@dataclass
class ReaderConfig:
    data_dir: str = str(DEFAULT_DATA_DIR)
    pattern: str = DEFAULT_FILE_PATTERN
    encoding: str = DEFAULT_ENCODING


@dataclass
class QueryConfig:
    """
    window
        How far ahead to look for upcoming entries, in `unit`s.
    unit
        One of days, weeks, months or years.
    """

    window: int = DEFAULT_WINDOW
    unit: WindowUnit = WindowUnit.days


@dataclass
class AlmanacConfig:
    reader: ReaderConfig = field(default_factory=ReaderConfig)
    query: QueryConfig = field(default_factory=QueryConfig)


def _package_defaults():
    defaults = resources.files(PACKAGE_NAME) / CONFIGS_DIR / DEFAULT_CONFIG_NAME
    return OmegaConf.create(defaults.read_text())


def load_config(
    path: Path | str | None = None, overrides: list[str] | None = None
) -> AlmanacConfig:
    """Load the configuration.

    Parameters
    ----------
    path
        Optional YAML file whose values take precedence over the package
        defaults.
    overrides
        Dotlist overrides, applied last.

    Raises
    ------
    ConfigError
        If a key is unknown, a value has the wrong type or the window is
        negative.
    """
    layers = [OmegaConf.structured(AlmanacConfig), _package_defaults()]
    if path is not None:
        logger.debug(f"Loading configuration from {path}")
        layers.append(OmegaConf.load(path))
    if overrides:
        layers.append(OmegaConf.from_dotlist(overrides))
    try:
        cfg = OmegaConf.merge(*layers)
        config: AlmanacConfig = OmegaConf.to_object(cfg)
    except OmegaConfBaseException as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
    if config.query.window < 0:
        raise ConfigError(
            f"query.window must be non-negative; got {config.query.window}"
        )
    return config
