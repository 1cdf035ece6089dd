"""
Immutable RFC 5646 language tags.

To parse a language tag::

    tag = parse("zh-cmn-Hans-CN")
    tag.primary_language            # "zh"
    tag.extended_language_subtags   # ("cmn",)
    tag.language                    # "zh-cmn"
    tag.script                      # "Hans"
    tag.region                      # "CN"

To construct one from its fields::

    str(build(primary_language="en", region="us"))  # "en-US"

Only syntax is checked, not whether subtags are registered with IANA.
Grandfathered tags such as "i-klingon" are not supported.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from typing import Any, Optional

from language import chars, grammar, tags
from language.tags import (
    SEP,
    UNDETERMINED,
    MalformedTagError,
    MissingFieldError,
    SubtagType,
)

logger = logging.getLogger(__name__)

SEQUENCE_FIELDS = ('extended_language_subtags', 'variants', 'extensions')


def _normalize_all(values: tuple[str, ...]) -> tuple[str, ...]:
    lowered = tuple(chars.lower(v) for v in values)
    if all(new is old for new, old in zip(lowered, values)):
        return values
    return lowered


@dataclass(frozen=True, repr=False)
class LanguageTag:
    """
    A language tag, normalized and validated on construction.

    Attributes
    ----------
    primary_language: str
        Shortest ISO 639 code, lowercase. Empty only for
        private use tags and the undetermined tag.
    extended_language_subtags: tuple[str, ...]
        Three letter ISO 639-3 codes, lowercase.
    script: str
        ISO 15924 code, title case.
    region: str
        ISO 3166-1 alpha-2 code or UN M.49 code, uppercase.
    variants: tuple[str, ...]
    extensions: tuple[str, ...]
        Each a singleton followed by its subtags, e.g. "u-ca-japanese".
    private_use: str
        "x" followed by its subtags, e.g. "x-private".
    """
    primary_language: str = ''
    extended_language_subtags: tuple[str, ...] = ()
    script: str = ''
    region: str = ''
    variants: tuple[str, ...] = ()
    extensions: tuple[str, ...] = ()
    private_use: str = ''

    def __post_init__(self):
        for name in SEQUENCE_FIELDS:
            values = getattr(self, name)
            if isinstance(values, str):
                raise TypeError(f"{name} must be a sequence of subtags, not '{values}'")
            if not isinstance(values, tuple):
                object.__setattr__(self, name, tuple(values))
        self._normalize()
        self._check()

    def _normalize(self):
        normalized = {
            'primary_language': chars.lower(self.primary_language),
            'extended_language_subtags': _normalize_all(self.extended_language_subtags),
            'script': chars.title(self.script),
            'region': chars.upper(self.region),
            'variants': _normalize_all(self.variants),
            'extensions': _normalize_all(self.extensions),
            'private_use': chars.lower(self.private_use),
        }
        for name, value in normalized.items():
            if value is not getattr(self, name):
                object.__setattr__(self, name, value)

    def _fail(self, subtag: str, reason: str, role: SubtagType,
              error=MalformedTagError):
        raise error(str(self), subtag, reason, role=role)

    def _check_field(self, value: str, tokens_check, role: SubtagType):
        result = tokens_check(grammar.tokenize(value))
        if isinstance(result, grammar.Failure):
            self._fail(value, f"'{result.subtag}': {result.reason}", role)

    def _check(self):
        if not self.primary_language:
            for name in ('extended_language_subtags', 'script', 'region',
                         'variants', 'extensions'):
                if getattr(self, name):
                    self._fail('primary_language',
                               f"required when {name} is set",
                               SubtagType.LANGUAGE, MissingFieldError)
        elif not tags.is_primary_language(self.primary_language):
            self._fail(self.primary_language, "expected 2 to 8 letters",
                       SubtagType.LANGUAGE)

        for subtag in self.extended_language_subtags:
            if not tags.is_extended_language(subtag):
                self._fail(subtag, "expected 3 letters", SubtagType.EXTLANG)
        if self.script and not tags.is_script(self.script):
            self._fail(self.script, "expected 4 letters", SubtagType.SCRIPT)
        if self.region and not tags.is_region(self.region):
            self._fail(self.region, "expected 2 letters or 3 digits",
                       SubtagType.REGION)
        for variant in self.variants:
            if not tags.is_variant(variant):
                self._fail(variant,
                           "expected 5 to 8 letters or digits, or a digit and 3 letters or digits",
                           SubtagType.VARIANT)
        for extension in self.extensions:
            self._check_field(extension, grammar.parse_extension,
                              SubtagType.EXTENSION)
        if self.private_use:
            self._check_field(self.private_use, grammar.parse_private_use,
                              SubtagType.PRIVATE_USE)

    @property
    def language(self) -> str:
        """Primary language and extended language subtags, or "und"."""
        if not self.primary_language:
            return UNDETERMINED
        return SEP.join((self.primary_language, *self.extended_language_subtags))

    @property
    def is_undetermined(self) -> bool:
        return not (self.primary_language or self.private_use)

    def subtags(self) -> list[str]:
        """Non-empty fields in canonical order."""
        return [s for s in (
            self.primary_language,
            *self.extended_language_subtags,
            self.script,
            self.region,
            *self.variants,
            *self.extensions,
            self.private_use,
        ) if s]

    def replace(self, **changes) -> LanguageTag:
        return dataclasses.replace(self, **changes)

    def as_dict(self) -> dict[str, Any]:
        """Fields as plain strings and lists, e.g. for `build(**tag.as_dict())`."""
        fields = dataclasses.asdict(self)
        for name in SEQUENCE_FIELDS:
            fields[name] = list(fields[name])
        return fields

    def __str__(self):
        if self.is_undetermined:
            return UNDETERMINED
        return SEP.join(self.subtags())

    def __repr__(self):
        return f"<LanguageTag '{self}'>"


@dataclass(frozen=True)
class ParseResult:
    """
    The outcome of `scan`: a tag, an error, or neither for absent input.
    """
    tag: Optional[LanguageTag] = None
    error: Optional[MalformedTagError] = None

    @property
    def ok(self) -> bool:
        return self.tag is not None

    @property
    def absent(self) -> bool:
        return self.tag is None and self.error is None


def scan(text: Optional[str]) -> ParseResult:
    """
    Parses `text` without raising for malformed tags.
    """
    if text is None or not text.strip():
        return ParseResult()
    fields = grammar.parse_subtags(grammar.tokenize(text))
    if isinstance(fields, grammar.Failure):
        logger.debug("rejected language tag %r: %s", text, fields.reason)
        return ParseResult(error=MalformedTagError(
            text, fields.subtag, fields.reason, fields.position, fields.role))
    return ParseResult(tag=LanguageTag(**fields))


def parse(text: Optional[str]) -> Optional[LanguageTag]:
    """
    Parses a language tag.

    Returns
    -------
    LanguageTag | None
        None if `text` is None, empty or whitespace.

    Raises
    ------
    MalformedTagError
        If `text` is not a well-formed language tag.
    """
    result = scan(text)
    if result.error is not None:
        raise result.error
    return result.tag


def build(**fields) -> LanguageTag:
    return LanguageTag(**fields)


def from_lang(primary_language: str, *extended_language_subtags: str) -> LanguageTag:
    """
    Creates a language tag such as "en" or "zh-yue".
    """
    return LanguageTag(primary_language=primary_language,
                       extended_language_subtags=extended_language_subtags)
