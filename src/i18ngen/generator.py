import logging
import os
import pathlib

from i18ngen import emitter, parser
from i18ngen.classes import TranslationFile
from i18ngen.exceptions import DuplicateLanguageError

logger = logging.getLogger(__name__)


def load_files(translation_folder_path: str | pathlib.Path) -> list[TranslationFile]:
    files: list[TranslationFile] = []
    seen: dict[str, str] = {}
    for path in parser.scan_translations(translation_folder_path):
        logger.info(f"start read language file {path.name} ...")
        translation = parser.parse_translation(path.read_bytes(), path.name)

        if translation.language in seen:
            raise DuplicateLanguageError(
                f"Files {seen[translation.language]} and {path.name} both resolve "
                f"to language {translation.language}",
                filename=path.name,
            )
        seen[translation.language] = path.name

        files.append(translation)
        logger.debug(f"{path.name}: {len(translation.messages)} messages")
        logger.info(f"language file {path.name} build done")
    return files


def build_source(files: list[TranslationFile]) -> str:
    return emitter.format_source(emitter.emit_source(files))


def write_output(output_path: str | pathlib.Path, source: str) -> None:
    """Replace the output file atomically; a failed write keeps the old file."""
    path = pathlib.Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    temp_path = path.with_name(f".{path.name}.tmp")
    try:
        with open(temp_path, "w", encoding="utf-8", newline="\n") as file:
            file.write(source)
        os.replace(temp_path, path)
    except OSError:
        temp_path.unlink(missing_ok=True)
        raise


def run(
    *, translation_folder_path: str | pathlib.Path, output_path: str | pathlib.Path
) -> str:
    logger.info("start running translation generator...")
    files = load_files(translation_folder_path)
    source = build_source(files)
    write_output(output_path, source)
    logger.info(f"Generated {output_path} with {len(files)} languages")
    return source
