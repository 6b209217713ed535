class I18nGenError(Exception):
    """Base exception for all i18ngen errors."""

    def __init__(self, message: str, filename: str | None = None):
        super().__init__(message)
        self.filename = filename


class ConfigurationError(I18nGenError):
    """The configuration file could not be loaded."""


class MalformedInputError(I18nGenError):
    """A translation file is not a two-level string mapping."""


class UnsupportedLanguageError(I18nGenError):
    """A file name does not resolve to a registered language tag."""


class EmptyIdentifierError(I18nGenError):
    """A message id is the empty string."""


class MissingDefaultFormError(I18nGenError):
    """A message has no default ("other") form."""

    def __init__(self, message: str, filename: str | None = None, message_id: str = ""):
        super().__init__(message, filename)
        self.message_id = message_id


class DuplicateLanguageError(I18nGenError):
    """Two files resolve to the same canonical language tag."""
