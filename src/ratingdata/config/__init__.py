# This file is part of ratingdata.
# Copyright (C) 2026 ratingdata contributors.
# Licensed under the MIT license, see LICENSE.md for details.
# SPDX-License-Identifier: MIT

"""
General configuration for rating data handling.
"""

from __future__ import annotations

import warnings
from pathlib import Path

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict, TomlConfigSettingsSource

from ratingdata.diagnostics import ConfigWarning
from ratingdata.logging import get_logger
from ratingdata.random import init_global_rng

__all__ = [
    "ratingdata_config",
    "configure",
    "RatingDataSettings",
    "RandomSettings",
]

_log = get_logger(__name__)
_settings: RatingDataSettings | None = None


def ratingdata_config() -> RatingDataSettings:
    """
    Get the active configuration.

    If no configuration has been specified, returns a default settings object
    (which still honors ``RD_`` environment variables).
    """
    if _settings is None:
        return RatingDataSettings()
    else:
        return _settings


class RandomSettings(BaseModel):
    """
    Random number generator configuration.
    """

    seed: int | None = None
    """
    The root RNG seed, used (among other things) for shuffling ratings.
    """


class RatingDataSettings(BaseSettings, extra="allow"):
    """
    Definition of ratingdata settings, loaded from configuration files and
    the environment (``RD_RANDOM__SEED``, etc.).
    """

    model_config = SettingsConfigDict(
        nested_model_default_partial_update=True, env_prefix="RD_", env_nested_delimiter="__"
    )

    random: RandomSettings = RandomSettings()
    """
    Random number generator configuration.
    """


def configure(cfg_dir: Path | None = None, *, _set_global: bool = True) -> RatingDataSettings:
    """
    Initialize the configuration.

    Configuration files are **not** read automatically; if this function is
    never called, configuration comes entirely from defaults and environment
    variables.  It reads ``ratingdata.toml`` and ``ratingdata.local.toml``
    (the local file taking precedence), and seeds the global RNG if a seed is
    specified.

    Args:
        cfg_dir:
            The directory in which to look for configuration files.  If not
            provided, uses the current directory.

    Returns:
        The configured settings.
    """
    global _settings

    if _settings is not None and _set_global:
        warnings.warn("ratingdata already configured, overwriting configuration", ConfigWarning)

    local_file = "ratingdata.local.toml"
    main_file = "ratingdata.toml"
    if cfg_dir is not None:
        local_file = cfg_dir / local_file
        main_file = cfg_dir / main_file

    class FileSettings(RatingDataSettings):
        @classmethod
        def settings_customise_sources(
            cls, settings_cls, init_settings, env_settings, dotenv_settings, file_secret_settings
        ):
            return (
                init_settings,
                env_settings,
                dotenv_settings,
                file_secret_settings,
                TomlConfigSettingsSource(settings_cls, local_file),
                TomlConfigSettingsSource(settings_cls, main_file),
            )

    settings = FileSettings()
    _log.debug("loaded configuration", seed=settings.random.seed)
    if _set_global:
        _settings = settings
        if settings.random.seed is not None:
            init_global_rng(settings.random.seed)

    return settings
