import json
import logging
import pathlib

import langcodes
from langcodes.tag_parser import LanguageTagError

from i18ngen.classes import DEFAULT_FORM, Message, TranslationFile
from i18ngen.exceptions import (
    EmptyIdentifierError,
    MalformedInputError,
    MissingDefaultFormError,
    UnsupportedLanguageError,
)

logger = logging.getLogger(__name__)

_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


class _DuplicateKeyError(ValueError):
    pass


def _reject_duplicates(pairs: list[tuple[str, object]]) -> dict[str, object]:
    result: dict[str, object] = {}
    for key, value in pairs:
        if key in result:
            raise _DuplicateKeyError(f'duplicate key "{key}"')
        result[key] = value
    return result


def scan_translations(path: str | pathlib.Path) -> list[pathlib.Path]:
    """Return the regular files of a translation folder, sorted by name.

    Subdirectories are skipped. A missing or unreadable folder raises OSError.
    """
    folder = pathlib.Path(path)
    return sorted(
        (entry for entry in folder.iterdir() if entry.is_file()),
        key=lambda entry: entry.name,
    )


def resolve_language_tag(candidate: str) -> str:
    try:
        if candidate and langcodes.tag_is_valid(candidate):
            return langcodes.standardize_tag(candidate)
    except LanguageTagError:
        pass
    raise UnsupportedLanguageError(f'"{candidate}" is not a supported language tag')


def escape_text(text: str) -> str:
    """Escape text for a one-line double-quoted literal (newline to backslash-n)."""
    escaped = []
    for char in text:
        if char in _ESCAPES:
            escaped.append(_ESCAPES[char])
        elif ord(char) < 0x20 or ord(char) == 0x7F:
            escaped.append(f"\\x{ord(char):02x}")
        elif char in "\x85\u2028\u2029":
            escaped.append(f"\\u{ord(char):04x}")
        else:
            escaped.append(char)
    return "".join(escaped)


def parse_translation(content: bytes, filename: str) -> TranslationFile:
    try:
        raw = json.loads(content.decode("utf-8"), object_pairs_hook=_reject_duplicates)
    except ValueError as ex:
        raise MalformedInputError(
            f"Error parsing {filename}: {ex}", filename=filename
        ) from ex

    if not isinstance(raw, dict):
        raise MalformedInputError(
            f"File {filename} does not contain a JSON object", filename=filename
        )

    stem = pathlib.PurePath(filename).stem
    try:
        language = resolve_language_tag(stem)
    except UnsupportedLanguageError as ex:
        raise UnsupportedLanguageError(
            f"File {filename}: {ex}", filename=filename
        ) from ex
    logger.debug(f"Resolved {filename} to language {language}")

    messages = []
    for message_id, forms in raw.items():
        if message_id == "":
            raise EmptyIdentifierError(
                f"File {filename} contains a message with a blank id",
                filename=filename,
            )
        if not isinstance(forms, dict):
            raise MalformedInputError(
                f'File {filename} id "{message_id}" is not a mapping of forms',
                filename=filename,
            )
        for form, text in forms.items():
            if not isinstance(text, str):
                raise MalformedInputError(
                    f'File {filename} id "{message_id}" form "{form}" is not a string',
                    filename=filename,
                )
        if DEFAULT_FORM not in forms:
            raise MissingDefaultFormError(
                f'File {filename} id "{message_id}" has no "{DEFAULT_FORM}" key',
                filename=filename,
                message_id=message_id,
            )
        messages.append(Message(message_id, escape_text(forms[DEFAULT_FORM])))

    return TranslationFile(filename, language, messages)
