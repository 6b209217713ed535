from dataclasses import dataclass, field
from typing import Mapping

DEFAULT_FORM = "other"


@dataclass(frozen=True)
class Message:
    ID: str
    Other: str


@dataclass
class TranslationFile:
    filename: str
    language: str
    messages: list[Message] = field(default_factory=list)


TranslationTable = Mapping[str, tuple[Message, ...]]
