from typing import Callable, Iterable, Iterator, TypeVar

__all__ = [
    "drop_while",
    "drop_until",
    "take_while",
]

T = TypeVar('T')


def drop_while(pred_fn: Callable[[T], bool], iterable: Iterable[T]) -> Iterator[T]:
    r"""Skip the leading run of items for which ``pred_fn`` holds, and yield the rest. Items after the first failure
    are passed through without evaluating ``pred_fn``.
    """
    iterator = iter(iterable)
    for item in iterator:
        if pred_fn(item):
            continue
        yield item
        yield from iterator
        return


def drop_until(pred_fn: Callable[[T], bool], iterable: Iterable[T]) -> Iterator[T]:
    r"""Skip items until ``pred_fn`` holds, then yield that item and everything after it."""
    return drop_while(lambda item: not pred_fn(item), iterable)


def take_while(pred_fn: Callable[[T], bool], iterable: Iterable[T]) -> Iterator[T]:
    for item in iterable:
        if not pred_fn(item):
            return
        yield item
