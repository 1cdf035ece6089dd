"""
Left-to-right parser for RFC 5646 language tag syntax.

Subtags are assigned to their slots in the fixed order of RFC 5646
section 2.1 (language, extlang, script, region, variant, extension,
private use) with one subtag of lookahead and no backtracking.
A three letter subtag directly after the primary language is always
an extlang, and a four letter one is a script before it can be a variant.

Grammar steps return a `Failure` rather than raising,
so callers decide how to report a malformed tag.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

from language import tags
from language.tags import SEP, PRIVATE_USE, SubtagType


@dataclass(frozen=True)
class Failure:
    subtag: str
    position: int
    reason: str
    role: Optional[SubtagType] = None


def tokenize(text: str) -> list[str]:
    """
    Splits a tag into subtags.
    Empty subtags are kept so that the grammar rejects them.
    """
    return text.split(SEP)


class SubtagStream:
    def __init__(self, tokens: list[str]):
        self.tokens = tokens
        self.position = 0

    def at_end(self) -> bool:
        return self.position >= len(self.tokens)

    def peek(self) -> Optional[str]:
        if self.at_end():
            return None
        return self.tokens[self.position]

    def take(self) -> str:
        token = self.tokens[self.position]
        self.position += 1
        return token

    def take_if(self, check: Callable[[str], bool]) -> str:
        if not self.at_end() and check(self.peek()):
            return self.take()
        return ''

    def take_while(self, check: Callable[[str], bool]) -> list[str]:
        taken = []
        while not self.at_end() and check(self.peek()):
            taken.append(self.take())
        return taken


def _take_extension(stream: SubtagStream) -> Union[str, Failure]:
    singleton = stream.take()
    if stream.at_end():
        return Failure(singleton, stream.position - 1,
                       "no subtag after extension singleton", SubtagType.EXTENSION)
    parts = [singleton, stream.take()]
    while True:
        if not tags.is_extension_subtag(parts[-1]):
            return Failure(parts[-1], stream.position - 1,
                           "expected 2 to 8 letters or digits", SubtagType.EXTENSION)
        nxt = stream.peek()
        if nxt is None or nxt == PRIVATE_USE or tags.is_extension_singleton(nxt):
            return SEP.join(parts)
        parts.append(stream.take())


def _take_extensions(stream: SubtagStream) -> Union[list[str], Failure]:
    extensions = []
    while not stream.at_end() and tags.is_extension_singleton(stream.peek()):
        extension = _take_extension(stream)
        if isinstance(extension, Failure):
            return extension
        extensions.append(extension)
    return extensions


def _take_private_use(stream: SubtagStream) -> Union[str, Failure]:
    if not stream.take_if(tags.is_private_use_singleton):
        return ''
    if stream.at_end():
        return Failure(stream.tokens[-1], stream.position - 1,
                       "no subtag after private use singleton", SubtagType.PRIVATE_USE)
    parts = [PRIVATE_USE]
    while not stream.at_end():
        part = stream.take()
        if not tags.is_private_use_subtag(part):
            return Failure(part, stream.position - 1,
                           "expected 1 to 8 letters or digits", SubtagType.PRIVATE_USE)
        parts.append(part)
    return SEP.join(parts)


def _leftover(stream: SubtagStream) -> Failure:
    subtag = stream.peek()
    subtag_type = tags.infer_subtag_type(subtag)
    if subtag_type is None:
        reason = "not a valid subtag here"
    else:
        reason = f"{subtag_type.label} subtag out of place"
    return Failure(subtag, stream.position, reason)


def parse_subtags(tokens: list[str]) -> Union[dict[str, Any], Failure]:
    """
    Assigns every subtag to a field of a language tag.

    Returns a dict of `LanguageTag` keyword arguments,
    or the `Failure` for the first subtag that fits nowhere.
    """
    stream = SubtagStream(tokens)
    primary_language = stream.take_if(tags.is_primary_language)
    if not primary_language:
        return Failure(stream.peek() or '', 0,
                       "expected 2 to 8 letters", SubtagType.LANGUAGE)
    fields = {
        'primary_language': primary_language,
        'extended_language_subtags': stream.take_while(tags.is_extended_language),
        'script': stream.take_if(tags.is_script),
        'region': stream.take_if(tags.is_region),
        'variants': stream.take_while(tags.is_variant),
    }
    extensions = _take_extensions(stream)
    if isinstance(extensions, Failure):
        return extensions
    fields['extensions'] = extensions
    private_use = _take_private_use(stream)
    if isinstance(private_use, Failure):
        return private_use
    fields['private_use'] = private_use
    if not stream.at_end():
        return _leftover(stream)
    return fields


def _whole(tokens: list[str], value: Union[str, Failure],
           stream: SubtagStream, role: SubtagType) -> Union[str, Failure]:
    if isinstance(value, Failure):
        return value
    if not value:
        return Failure(tokens[0], 0, "expected a singleton", role)
    if not stream.at_end():
        return Failure(stream.peek(), stream.position,
                       "more than one sequence in a single field", role)
    return value


def parse_extension(tokens: list[str]) -> Union[str, Failure]:
    """
    Parses exactly one extension sequence, e.g. ``['u', 'ca', 'japanese']``.
    """
    stream = SubtagStream(tokens)
    extension = ''
    if tags.is_extension_singleton(stream.peek()):
        extension = _take_extension(stream)
    return _whole(tokens, extension, stream, SubtagType.EXTENSION)


def parse_private_use(tokens: list[str]) -> Union[str, Failure]:
    """
    Parses exactly one private use sequence, e.g. ``['x', 'private']``.
    """
    stream = SubtagStream(tokens)
    return _whole(tokens, _take_private_use(stream), stream, SubtagType.PRIVATE_USE)
