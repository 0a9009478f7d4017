"""Schema-free classification of command-line tokens.

Each token is picked off the front of the list and determined to be one of:

1. an option (``-o``, ``--option``),
2. a combination of short flags (``-opqr``),
3. an option=value pair (``-o=value``, ``--option=value``),
4. the value of the option immediately preceding it, or
5. a positional argument.

Nothing is declared up front, so a boolean flag followed by a positional
argument cannot be told apart from an option taking a value. The following
token is always taken as the value.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .constants import (
    BARE_VALUE,
    DASH_COMBO_OPTION,
    END_OF_OPTIONS,
    LONG_OPTION_PREFIX,
    OPTION_PREFIX,
    VALUE_SEPARATOR,
)
from .logging_utils import log_event
from .models import ClassifiedArgs, OptionPair


def classify(tokens: Iterable[str]) -> ClassifiedArgs:
    """Split ``tokens`` into positional arguments and option/value pairs."""
    positionals: list[str] = []
    options: list[OptionPair] = []
    passthrough: list[str] = []
    pending: str | None = None
    token_count = 0

    stream: Iterator[str] = iter(tokens)
    for token in stream:
        token_count += 1

        if token == END_OF_OPTIONS:
            passthrough.extend(stream)
            token_count += len(passthrough)
            log_event("argv_end_of_options", passthrough_count=len(passthrough))
            break

        if not token:
            continue

        if token.startswith(OPTION_PREFIX):
            # The pending option never got its value.
            if pending is not None:
                options.append((pending, BARE_VALUE))
                pending = None
                if token == OPTION_PREFIX:
                    continue

            if token.startswith(LONG_OPTION_PREFIX):
                name, separator, value = token.partition(VALUE_SEPARATOR)
                if separator:
                    options.append((name, value))
                else:
                    pending = token
                continue

            pending = _expand_short(token, options)
            continue

        if pending is None:
            positionals.append(token)
        elif pending == DASH_COMBO_OPTION:
            # Combo ended in a dash (-pqr-): the token is not its value.
            positionals.append(token)
            pending = None
        else:
            options.append((pending, token))
            pending = None

    if pending is not None:
        options.append((pending, BARE_VALUE))

    log_event(
        "argv_classified",
        token_count=token_count,
        positional_count=len(positionals),
        option_count=len(options),
        passthrough_count=len(passthrough),
    )
    return ClassifiedArgs(
        positionals=positionals, options=options, passthrough=passthrough
    )


def _expand_short(token: str, options: list[OptionPair]) -> str | None:
    """Expand ``-o``, ``-o=val`` or ``-opqr=val`` into ``options``.

    All but the last flag are recorded bare. The last one takes the value
    after ``=`` when there is one; otherwise its name is returned so the
    caller can wait for the next token.
    """
    split = token.find(VALUE_SEPARATOR)
    if split < 0:
        split = len(token)

    for flag in token[1 : split - 1]:
        options.append((OPTION_PREFIX + flag, BARE_VALUE))

    name = OPTION_PREFIX + token[split - 1]
    if split < len(token) - 1:
        options.append((name, token[split + 1 :]))
        return None
    return name
