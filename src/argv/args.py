"""Argument list wrapper with a chainable parse step."""

from __future__ import annotations

import sys
from collections.abc import Iterable

from .classifier import classify
from .errors import InvalidArgumentsError
from .models import ClassifiedArgs, OptionPair


class Argv:
    """Wraps a list of command-line arguments and classifies them.

    Typical use::

        parsed = Argv(sys.argv[1:]).parse()
        parsed.positional_arguments
        parsed.option_value_pairs
    """

    def __init__(self, args: Iterable[str] | None = None) -> None:
        self._args = _coerce_args(args)
        self.result = ClassifiedArgs()

    @classmethod
    def from_sys_argv(cls) -> Argv:
        """Build from the process arguments, without the program name."""
        return cls(sys.argv[1:])

    @property
    def args(self) -> tuple[str, ...]:
        return self._args

    @property
    def positional_arguments(self) -> list[str]:
        return self.result.positionals

    @property
    def option_value_pairs(self) -> list[OptionPair]:
        return self.result.options

    @property
    def passthrough(self) -> list[str]:
        return self.result.passthrough

    def parse(self) -> Argv:
        """Classify the stored arguments and return self for chaining."""
        self.result = classify(self._args)
        return self

    def __repr__(self) -> str:
        return f"Argv(args={list(self._args)!r})"


def _coerce_args(args: Iterable[str] | None) -> tuple[str, ...]:
    if args is None:
        return ()
    if isinstance(args, (str, bytes)):
        raise InvalidArgumentsError(
            f"Expected a sequence of strings, got a single {type(args).__name__}."
        )
    try:
        coerced = tuple(args)
    except TypeError as exc:
        raise InvalidArgumentsError(
            f"Expected a sequence of strings, got {type(args).__name__}."
        ) from exc
    for index, arg in enumerate(coerced):
        if not isinstance(arg, str):
            raise InvalidArgumentsError(
                f"Argument {index} is {type(arg).__name__}, expected str."
            )
    return coerced
