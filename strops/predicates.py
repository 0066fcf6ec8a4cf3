from typing import Dict, Iterable

from .strings import CharPredicate

__all__ = [
    "is_ascii_digit",
    "is_ascii_letter",
    "is_ascii_upper_case",
    "always",
    "never",
    "one_of",
    "PREDICATES",
    "get_predicate",
]


def is_ascii_digit(char: str) -> bool:
    return '0' <= char <= '9'


def is_ascii_letter(char: str) -> bool:
    return 'A' <= char <= 'Z' or 'a' <= char <= 'z'


def is_ascii_upper_case(char: str) -> bool:
    return 'A' <= char <= 'Z'


def always(char: str) -> bool:
    return True


def never(char: str) -> bool:
    return False


def one_of(chars: Iterable[str]) -> CharPredicate:
    r"""Create a predicate that holds for characters contained in ``chars``, similar to the argument of
    :meth:`str.lstrip`.
    """
    char_set = frozenset(chars)

    def predicate(char: str) -> bool:
        return char in char_set

    return predicate


PREDICATES: Dict[str, CharPredicate] = {
    "ascii-digit": is_ascii_digit,
    "ascii-letter": is_ascii_letter,
    "ascii-upper-case": is_ascii_upper_case,
    "always": always,
    "never": never,
}


def get_predicate(name: str) -> CharPredicate:
    r"""Look up a named predicate.

    :param name: Name of the predicate, one of the keys in :attr:`PREDICATES`.
    :return: The predicate function.
    """
    if name not in PREDICATES:
        raise ValueError(f"Unknown predicate '{name}'")
    return PREDICATES[name]
