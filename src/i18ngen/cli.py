import logging
import os
import sys
from typing import Any, NoReturn

import click
from i18ngen import config as i18ngen_config
from i18ngen import generator
from i18ngen.exceptions import ConfigurationError, I18nGenError

logger = logging.getLogger(__name__)


def _fail(ex: Exception) -> NoReturn:
    click.echo(f"translation generation failed: {ex}", err=True)
    sys.exit(1)


def _setup(config_folder: str) -> dict[str, Any]:
    try:
        config = i18ngen_config.load_config(config_folder)
    except I18nGenError as ex:
        _fail(ex)

    try:
        logging.basicConfig(
            level=config["logging"]["level"],
            format=config["logging"]["format"],
            datefmt=config["logging"]["datefmt"],
            stream=sys.stdout,
            force=True,
        )
    except (TypeError, ValueError) as ex:
        _fail(ConfigurationError(f"Invalid logging configuration: {ex}"))
    return config


@click.group()
@click.version_option()
def cli() -> None:
    pass


@cli.command("generate")
@click.option("--config-folder", default="config", help="Configuration folder path.")
@click.option(
    "--translation-folder", default=None, help="Folder with the <language>.json files."
)
@click.option(
    "--output", "output_file", default=None, help="Path of the generated module."
)
def generate(
    config_folder: str, translation_folder: str | None, output_file: str | None
) -> None:
    """Compile the translation files into a Python module."""
    config = _setup(config_folder)

    translation_folder_path = os.path.abspath(
        translation_folder or config["generator"]["translation_folder"]
    )
    output_path = os.path.abspath(output_file or config["generator"]["output"])

    try:
        generator.run(
            translation_folder_path=translation_folder_path,
            output_path=output_path,
        )
    except (I18nGenError, OSError) as ex:
        _fail(ex)


@cli.command("check")
@click.option("--config-folder", default="config", help="Configuration folder path.")
@click.option(
    "--translation-folder", default=None, help="Folder with the <language>.json files."
)
def check(config_folder: str, translation_folder: str | None) -> None:
    """Validate the translation files without writing anything."""
    config = _setup(config_folder)

    translation_folder_path = os.path.abspath(
        translation_folder or config["generator"]["translation_folder"]
    )

    try:
        files = generator.load_files(translation_folder_path)
    except (I18nGenError, OSError) as ex:
        _fail(ex)

    logger.info(f"{len(files)} translation files are valid")
