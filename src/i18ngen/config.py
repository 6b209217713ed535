import copy
import logging
import os
from typing import Any

import yaml

from i18ngen.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, dict[str, Any]] = {
    "logging": {
        "level": "INFO",
        "format": "%(message)s",
        "datefmt": "%Y-%m-%d %H:%M:%S",
    },
    "generator": {
        "translation_folder": "i18n",
        "output": "translation/translations.py",
    },
}


def load_config(config_folder: str) -> dict[str, dict[str, Any]]:
    """A missing config.yml yields the defaults; unknown sections are kept as-is."""
    config_file_path = os.path.abspath(os.path.join(config_folder, "config.yml"))
    config = copy.deepcopy(DEFAULT_CONFIG)

    try:
        with open(config_file_path, "r", encoding="utf-8") as file:
            loaded = yaml.safe_load(file)
    except FileNotFoundError:
        logger.debug(f"{config_file_path} not found, using defaults")
        return config
    except yaml.YAMLError as exc:
        raise ConfigurationError(
            f"Error parsing {config_file_path}: {exc}", filename=config_file_path
        ) from exc

    if loaded is None:
        return config
    if not isinstance(loaded, dict):
        raise ConfigurationError(
            f"{config_file_path} must contain a mapping", filename=config_file_path
        )

    for section, values in loaded.items():
        if section in config:
            if not isinstance(values, dict):
                raise ConfigurationError(
                    f'Section "{section}" in {config_file_path} must be a mapping',
                    filename=config_file_path,
                )
            config[section].update(values)
        else:
            config[section] = values

    level = str(config["logging"]["level"]).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigurationError(
            f'Unknown logging level "{config["logging"]["level"]}" '
            f"in {config_file_path}",
            filename=config_file_path,
        )
    config["logging"]["level"] = level
    return config
