"""Result models for argv."""

from __future__ import annotations

from pydantic import BaseModel

OptionPair = tuple[str, str]


class ClassifiedArgs(BaseModel):
    positionals: list[str] = []
    options: list[OptionPair] = []
    # Tokens after the end-of-options marker, unclassified.
    passthrough: list[str] = []

    def option_names(self) -> list[str]:
        return [name for name, _value in self.options]

    def values(self, name: str) -> list[str]:
        """Return every value recorded for ``name``, in input order."""
        return [value for option, value in self.options if option == name]

    def has_option(self, name: str) -> bool:
        return any(option == name for option, _value in self.options)
