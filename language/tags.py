from typing import Optional

from django.db import models

from language import chars

SEP = '-'
PRIVATE_USE = 'x'
UNDETERMINED = 'und'


class SubtagType(models.TextChoices):
    LANGUAGE = 'L', 'primary language'
    EXTLANG = 'E', 'extended language'
    SCRIPT = 'S', 'script'
    REGION = 'R', 'region'
    VARIANT = 'V', 'variant'
    EXTENSION = 'X', 'extension'
    PRIVATE_USE = 'P', 'private use'


class MalformedTagError(ValueError):
    """
    Raised when a language tag, or a field of one, has invalid syntax.

    Attributes
    ----------
    text: str
        The input being parsed or the tag being constructed.
    subtag: str
        The offending subtag, or the field name for direct construction.
    position: int | None
        Zero-based index of the offending subtag, if it came from parsing.
    role: SubtagType | None
        What the offending subtag was expected to be.
    reason: str
    """

    def __init__(self, text: str, subtag: str, reason: str,
                 position: Optional[int] = None,
                 role: Optional[SubtagType] = None):
        self.text = text
        self.subtag = subtag
        self.reason = reason
        self.position = position
        self.role = role
        super().__init__(self._message())

    def __reduce__(self):
        return type(self), (self.text, self.subtag, self.reason,
                            self.position, self.role)

    def _message(self) -> str:
        what = f"{self.role.label} subtag" if self.role else "subtag"
        where = f" at position {self.position}" if self.position is not None else ""
        return f"malformed language tag '{self.text}': {what} '{self.subtag}'{where}: {self.reason}"


class MissingFieldError(MalformedTagError):
    pass


def _length(s: str, low: int, high: int) -> bool:
    return low <= len(s) <= high


def is_primary_language(s: str) -> bool:
    return _length(s, 2, 8) and chars.is_alpha(s)


def is_extended_language(s: str) -> bool:
    return len(s) == 3 and chars.is_alpha(s)


def is_script(s: str) -> bool:
    return len(s) == 4 and chars.is_alpha(s)


def is_region(s: str) -> bool:
    if len(s) == 2:
        return chars.is_alpha(s)
    return len(s) == 3 and chars.is_digit(s)


def is_variant(s: str) -> bool:
    if len(s) == 4:
        return chars.is_digit_char(s[0]) and chars.is_alnum(s[1:])
    return _length(s, 5, 8) and chars.is_alnum(s)


def is_extension_singleton(s: str) -> bool:
    return (len(s) == 1 and chars.is_alpha_char(s)
            and not chars.equals_ignore_case(s, PRIVATE_USE))


def is_extension_subtag(s: str) -> bool:
    return _length(s, 2, 8) and chars.is_alnum(s)


def is_private_use_singleton(s: str) -> bool:
    return len(s) == 1 and chars.equals_ignore_case(s, PRIVATE_USE)


def is_private_use_subtag(s: str) -> bool:
    return _length(s, 1, 8) and chars.is_alnum(s)


# grammar order; the first match wins for ambiguous shapes
SUBTAG_CHECKS = (
    (SubtagType.EXTLANG, is_extended_language),
    (SubtagType.SCRIPT, is_script),
    (SubtagType.REGION, is_region),
    (SubtagType.VARIANT, is_variant),
    (SubtagType.EXTENSION, is_extension_singleton),
    (SubtagType.PRIVATE_USE, is_private_use_singleton),
)


def infer_subtag_type(subtag: str) -> Optional[SubtagType]:
    """
    The kind of subtag `subtag` looks like when found after a primary language.
    """
    for subtag_type, check in SUBTAG_CHECKS:
        if check(subtag):
            return subtag_type
    return None
