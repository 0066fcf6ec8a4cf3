r"""Trim strings by a character predicate. What happens is:

1. Input is read from ``--text``, or line by line from ``--input-file`` (decoded as UTF-8).
2. Each string is passed through the chosen operation (``drop-while`` by default) with the chosen predicate.
3. Results are printed to standard output, one per line.
"""

import functools
from typing import Iterator, List, Literal, Optional, Tuple

import argtyped
import flutes
from argtyped import Switch

from . import functional
from .predicates import PREDICATES, get_predicate, one_of
from .strings import CharPredicate, drop_last_while, drop_while, take_last_while, take_while

__all__ = [
    "Arguments",
    "run",
    "main",
]

OPERATIONS = {
    "drop-while": drop_while,
    "take-while": take_while,
    "drop-last-while": drop_last_while,
    "take-last-while": take_last_while,
}


class Arguments(argtyped.Arguments):
    text: Optional[str] = None
    input_file: Optional[str] = None  # process each line of the file separately
    skip_leading_blank: Switch = False  # ignore blank lines at the start of `input_file`
    operation: Literal[tuple(OPERATIONS.keys())] = "drop-while"  # type: ignore
    predicate: Literal[tuple(PREDICATES.keys())] = "ascii-letter"  # type: ignore
    chars: Optional[str] = None  # if specified, overrides `predicate` with membership in these characters
    logging_level: Literal[tuple(flutes.get_logging_levels())] = "info"  # type: ignore
    log_file: Optional[str] = None


def exception_handler(e: Exception, line_no: int) -> None:
    flutes.log_exception(e, f"Exception occurred when processing line {line_no}")


@flutes.exception_wrapper(exception_handler)
def process_line(line_no: int, text: str, operation: str, predicate: CharPredicate) -> Optional[str]:
    result = OPERATIONS[operation](text, predicate)
    flutes.log(f"Line {line_no}: {len(text)} -> {len(result)} characters")
    return result


def read_inputs(args: Arguments) -> Iterator[Tuple[int, str]]:
    if args.text is not None:
        yield 1, args.text
        return
    with open(args.input_file, "r", encoding="utf-8") as f:
        lines = ((line_no, line.rstrip("\n")) for line_no, line in enumerate(f, start=1))
        if args.skip_leading_blank:
            lines = functional.drop_while(lambda entry: entry[1].strip() == "", lines)
        yield from lines


def run(argv: Optional[List[str]] = None) -> List[str]:
    r"""Run the command line with the given arguments.

    :param argv: Command line arguments. If ``None``, ``sys.argv`` is used.
    :return: The produced strings, in input order. Lines that raised an exception are left out.
    """
    args = Arguments(argv)
    if args.log_file is not None:
        flutes.set_log_file(args.log_file)
    flutes.set_logging_level(args.logging_level, console=True, file=False)
    flutes.log("Running with arguments:\n" + args.to_string())

    if (args.text is None) == (args.input_file is None):
        flutes.log("Exactly one of --text and --input-file must be specified", "error")
        raise ValueError("Exactly one of --text and --input-file must be specified")

    if args.chars is not None:
        predicate = one_of(args.chars)
    else:
        predicate = get_predicate(args.predicate)
    process_fn = functools.partial(process_line, operation=args.operation, predicate=predicate)

    results: List[str] = []
    num_failed = 0
    for line_no, text in read_inputs(args):
        result = process_fn(line_no, text)
        if result is None:
            num_failed += 1
            continue
        print(result, flush=True)
        results.append(result)

    if num_failed > 0:
        flutes.log(f"{num_failed} line(s) failed, {len(results)} processed", "warning")
    else:
        flutes.log(f"{len(results)} line(s) processed", "success")
    return results


def main() -> None:
    run()


if __name__ == '__main__':
    main()
