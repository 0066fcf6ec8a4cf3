from typing import Callable

__all__ = [
    "CharPredicate",
    "drop_while",
    "take_while",
    "drop_last_while",
    "take_last_while",
]

CharPredicate = Callable[[str], bool]


def _leading_run_length(text: str, predicate: CharPredicate) -> int:
    for idx, char in enumerate(text):
        if not predicate(char):
            return idx
    return len(text)


def _trailing_run_start(text: str, predicate: CharPredicate) -> int:
    for idx in range(len(text) - 1, -1, -1):
        if not predicate(text[idx]):
            return idx + 1
    return 0


def drop_while(text: str, predicate: CharPredicate) -> str:
    r"""Remove the leading run of characters satisfying ``predicate``.

    The scan stops at the first character for which ``predicate`` is ``False``; that character and everything after
    it are returned. If every character satisfies the predicate (or ``text`` is empty), the result is empty.

    :param text: The string to trim.
    :param predicate: A function taking a single character and returning whether it should be dropped.
    :return: The suffix of ``text`` starting at the first character failing ``predicate``.
    """
    return text[_leading_run_length(text, predicate):]


def take_while(text: str, predicate: CharPredicate) -> str:
    r"""Return the leading run of characters satisfying ``predicate``. The complement of :meth:`drop_while`."""
    return text[:_leading_run_length(text, predicate)]


def drop_last_while(text: str, predicate: CharPredicate) -> str:
    r"""Remove the trailing run of characters satisfying ``predicate``, scanning from the end."""
    return text[:_trailing_run_start(text, predicate)]


def take_last_while(text: str, predicate: CharPredicate) -> str:
    return text[_trailing_run_start(text, predicate):]
