"""
Helpers for resource keys carrying a language tag,
such as "month#de" for the German value of "month".
"""

from typing import Iterable, Mapping, Optional, TypeVar, Union

from django.conf import settings

from language.langtag import LanguageTag, parse

KEY_SEP = '#'

V = TypeVar('V')


def _partition(key: str) -> tuple[str, str]:
    pos = key.find(KEY_SEP)
    if pos < 0:
        return key, ''
    return key[:pos], key[pos + 1:]


def strip(key: Optional[str]) -> Optional[str]:
    """
    Removes the language tag suffix from a key.

    >>> strip("name#en-US")
    'name'
    """
    if key is None:
        return None
    return _partition(key)[0]


def strip_all(keys: Optional[Iterable[str]]) -> Union[set[str], list[str], None]:
    """
    Strips every key, returning a set for a set and a list otherwise.
    """
    if keys is None:
        return None
    if isinstance(keys, (set, frozenset)):
        return {strip(key) for key in keys}
    return [strip(key) for key in keys]


def extract(key: Optional[str]) -> Optional[LanguageTag]:
    """
    Parses the language tag suffix of a key.

    Raises
    ------
    MalformedTagError
        If the suffix is not a well-formed language tag.
    """
    if key is None:
        return None
    return parse(_partition(key)[1])


def split(key: Optional[str]) -> Optional[tuple[str, Optional[LanguageTag]]]:
    """
    Splits a key into its name and language tag.

    >>> split("name#bg-BG")
    ('name', <LanguageTag 'bg-BG'>)
    """
    if key is None:
        return None
    name, suffix = _partition(key)
    return name, parse(suffix)


def find(name: str, values: Mapping[str, V]) -> dict[Optional[LanguageTag], V]:
    """
    Collects the values stored under `name` in every language.
    The untagged value, if any, is under None.
    """
    found = {}
    for key, value in values.items():
        key_name, suffix = _partition(key)
        if key_name == name:
            found[parse(suffix)] = value
    return found


def to_strings(langtags: Optional[Iterable[LanguageTag]]) -> Optional[list[str]]:
    if langtags is None:
        return None
    return [str(tag) for tag in langtags]


def parse_all(texts: Optional[Iterable[str]]) -> Optional[list[LanguageTag]]:
    """Parses each string, skipping empty ones."""
    if texts is None:
        return None
    return [tag for tag in map(parse, texts) if tag is not None]


def native_tag() -> LanguageTag:
    """The language tag of the site's native language."""
    return parse(settings.NATIVE_LANG_TAG)
