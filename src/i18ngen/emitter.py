import logging

import black
from jinja2 import Environment, StrictUndefined

from i18ngen.classes import TranslationFile
from i18ngen.parser import escape_text

logger = logging.getLogger(__name__)

GENERATED_HEADER = '# Code generated by "i18ngen"; DO NOT EDIT.'

MODULE_TEMPLATE = '''\
{{ header }}
"""Translation strings compiled from the per-language JSON files."""

from types import MappingProxyType

from i18ngen.classes import Message, TranslationTable


def load_translations() -> TranslationTable:
    return MappingProxyType(
        {
{% for file in files %}
            {{ file.language | quote }}: (
{% for message in file.messages %}
                Message(ID={{ message.ID | quote }}, Other="{{ message.Other }}"),
{% endfor %}
            ),
{% endfor %}
        }
    )


Translations = load_translations()
'''


def quote(text: str) -> str:
    return f'"{escape_text(text)}"'


def _environment() -> Environment:
    env = Environment(
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=StrictUndefined,
    )
    env.filters["quote"] = quote
    return env


def emit_source(files: list[TranslationFile]) -> str:
    template = _environment().from_string(MODULE_TEMPLATE)
    return template.render(header=GENERATED_HEADER, files=files)


def format_source(source: str) -> str:
    """Format source with black, falling back to the raw text on failure."""
    try:
        return black.format_str(source, mode=black.Mode(string_normalization=False))
    except Exception as ex:
        logger.warning(f"Could not format generated source, keeping it raw: {ex}")
        return source
