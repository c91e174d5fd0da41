"""Small demonstrations of the package, runnable from the command line."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence, TextIO

from genfunctions.chararray import CharArray
from genfunctions.prompt import InputError, InputType, read_input
from genfunctions.text import split, trim


def chararray_demo(out: TextIO | None = None) -> None:
    """Fill a CharArray with two strings and list them."""
    out = sys.stdout if out is None else out
    ca = CharArray()
    ca.append("Hello, World")
    ca.append("from function!")
    for i, element in enumerate(ca):
        out.write(f"index:{i}\t element:{element}\n")
    ca.grow()
    ca.clear()


def input_demo(stdin: TextIO | None = None, out: TextIO | None = None) -> None:
    """Ask for a name, an age, pi and a payment, then echo them."""
    stdin = sys.stdin if stdin is None else stdin
    out = sys.stdout if out is None else out
    name = read_input("Input NAME: ", InputType.STR, stdin, out)
    age = read_input("Input AGE: ", InputType.INT, stdin, out)
    pi = read_input("Input PI: ", InputType.FLOAT, stdin, out)
    payment = read_input("Input PAYMENT: ", InputType.DOUBLE, stdin, out)
    out.write(f"{name}\n{age}\n{pi:.2f}\n{payment:.5f}\n")


def split_demo(out: TextIO | None = None) -> None:
    """Split a comma separated list of fruit and print the tokens."""
    out = sys.stdout if out is None else out
    tokens = split("apple, banana, cherry, pineapple", ",")
    out.write(f"Number of tokens found: {len(tokens)}\n")
    for i, token in enumerate(tokens):
        out.write(f"[{i}]: {token}\n")


def trim_demo(out: TextIO | None = None) -> None:
    """Trim a padded string and show it before and after."""
    out = sys.stdout if out is None else out
    original = "    Hello, World!   "
    out.write(f'Original string: "{original}"\n')
    out.write(f'Trimmed string: "{trim(original)}"\n')


def main(argv: Sequence[str] | None = None) -> int:
    """Run one of the demonstrations; return the exit status."""
    parser = argparse.ArgumentParser(description="Run a demonstration.")
    parser.add_argument("demo", choices=["chararray", "input", "split", "trim"])
    args = parser.parse_args(argv)

    try:
        if args.demo == "chararray":
            chararray_demo()
        elif args.demo == "input":
            input_demo()
        elif args.demo == "split":
            split_demo()
        else:
            trim_demo()
    except (InputError, EOFError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())