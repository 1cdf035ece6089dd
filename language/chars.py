"""
ASCII character classes and case mapping for language subtags.

RFC 5646 subtags are restricted to ASCII letters and digits,
so `str.isalpha` and friends (which accept any Unicode letter)
are not used here.
"""

from typing import Callable

CharCheck = Callable[[str, int], bool]
CharMapper = Callable[[str, int], str]

_CASE_OFFSET = ord('a') - ord('A')


def is_upper_char(c: str) -> bool:
    return 'A' <= c <= 'Z'


def is_lower_char(c: str) -> bool:
    return 'a' <= c <= 'z'


def is_alpha_char(c: str) -> bool:
    return is_upper_char(c) or is_lower_char(c)


def is_digit_char(c: str) -> bool:
    return '0' <= c <= '9'


def is_alnum_char(c: str) -> bool:
    return is_alpha_char(c) or is_digit_char(c)


def upper_char(c: str) -> str:
    return chr(ord(c) - _CASE_OFFSET) if is_lower_char(c) else c


def lower_char(c: str) -> str:
    return chr(ord(c) + _CASE_OFFSET) if is_upper_char(c) else c


def title_char(c: str, pos: int) -> str:
    """Upper at position 0, lower everywhere else."""
    return upper_char(c) if pos == 0 else lower_char(c)


def is_title_char(c: str, pos: int) -> bool:
    return not is_lower_char(c) if pos == 0 else not is_upper_char(c)


def equals_ignore_case(a: str, b: str) -> bool:
    return a == b or lower_char(a) == lower_char(b)


def _check(s: str, check: CharCheck) -> bool:
    return all(check(c, i) for i, c in enumerate(s))


def _map(s: str, check: CharCheck, mapper: CharMapper) -> str:
    """
    Applies `mapper` from the first character failing `check` onwards.

    Returns `s` itself when every character already passes,
    so callers can detect a no-op with `is`.
    """
    for start, c in enumerate(s):
        if not check(c, start):
            break
    else:
        return s
    return s[:start] + ''.join(
        mapper(c, i) for i, c in enumerate(s[start:], start))


def is_alpha(s: str) -> bool:
    return _check(s, lambda c, _: is_alpha_char(c))


def is_digit(s: str) -> bool:
    return _check(s, lambda c, _: is_digit_char(c))


def is_alnum(s: str) -> bool:
    return _check(s, lambda c, _: is_alnum_char(c))


def is_lower(s: str) -> bool:
    """True if `s` has no uppercase letters."""
    return _check(s, lambda c, _: not is_upper_char(c))


def is_upper(s: str) -> bool:
    """True if `s` has no lowercase letters."""
    return _check(s, lambda c, _: not is_lower_char(c))


def is_title(s: str) -> bool:
    return _check(s, is_title_char)


def lower(s: str) -> str:
    return _map(s, lambda c, _: not is_upper_char(c), lambda c, _: lower_char(c))


def upper(s: str) -> str:
    return _map(s, lambda c, _: not is_lower_char(c), lambda c, _: upper_char(c))


def title(s: str) -> str:
    return _map(s, is_title_char, title_char)
