"""
Argument Parsing
================

Argument definitions consume values from the front of the text that follows
a command token. Parsing threads an immutable ``ParseState`` through the
ordered definitions of a command.
"""

import re
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Sequence, Tuple


MENTION_PATTERN = re.compile(r"^<(?:@[!&]?|#)(\d+)>")
ID_PATTERN = re.compile(r"^(\d{15,21})(?:\s|$)")


@dataclass(frozen=True)
class ParseState:
    """Remaining text plus the values consumed so far."""

    remaining: str
    consumed: Tuple[Any, ...] = ()

    def advance(self, value: Any, remaining: str) -> "ParseState":
        return ParseState(remaining=remaining, consumed=self.consumed + (value,))


class Argument:
    """
    Base class for a single command argument.

    Subclasses implement ``parse`` (read a value from the front of the text,
    or return None) and ``slice`` (the text with that value removed).
    """

    def __init__(self, name: str, identifier: Optional[str] = None, required: bool = True):
        self.name = name
        self.identifier = identifier or name
        self.required = required

    def parse(self, text: str) -> Optional[Any]:
        raise NotImplementedError

    def slice(self, text: str) -> str:
        raise NotImplementedError

    def consume(self, state: ParseState) -> Tuple[Optional[Any], ParseState]:
        text = state.remaining.lstrip()
        value = self.parse(text)
        if value is None:
            return None, state
        return value, state.advance(value, self.slice(text))

    @property
    def usage(self) -> str:
        return f"<{self.name}>" if self.required else f"[{self.name}]"

    def __repr__(self):
        return f"{type(self).__name__}(name={self.name!r}, required={self.required})"


class WordArgument(Argument):
    """A single space-delimited token."""

    def parse(self, text: str) -> Optional[str]:
        token = text.split(" ", 1)[0]
        return token or None

    def slice(self, text: str) -> str:
        parts = text.split(" ", 1)
        return parts[1] if len(parts) > 1 else ""


class TextArgument(Argument):
    """Everything that is left."""

    def parse(self, text: str) -> Optional[str]:
        text = text.strip()
        return text or None

    def slice(self, text: str) -> str:
        return ""


class IntegerArgument(WordArgument):
    def __init__(self, name: str, identifier: Optional[str] = None, required: bool = True,
                 minimum: Optional[int] = None, maximum: Optional[int] = None):
        super().__init__(name, identifier, required)
        self.minimum = minimum
        self.maximum = maximum

    def parse(self, text: str) -> Optional[int]:
        token = super().parse(text)
        if token is None:
            return None
        try:
            value = int(token)
        except ValueError:
            return None
        if self.minimum is not None and value < self.minimum:
            return None
        if self.maximum is not None and value > self.maximum:
            return None
        return value


class ChoiceArgument(WordArgument):
    """A token from a fixed set of choices (case-insensitive)."""

    def __init__(self, name: str, choices: Iterable[str], identifier: Optional[str] = None,
                 required: bool = True):
        super().__init__(name, identifier, required)
        self.choices = [choice.lower() for choice in choices]

    def parse(self, text: str) -> Optional[str]:
        token = super().parse(text)
        if token is None or token.lower() not in self.choices:
            return None
        return token.lower()

    @property
    def usage(self) -> str:
        choices = "|".join(self.choices)
        return f"<{choices}>" if self.required else f"[{choices}]"


class MentionArgument(Argument):
    """A user, role or channel mention, or a raw snowflake id."""

    def _match(self, text: str):
        return MENTION_PATTERN.match(text) or ID_PATTERN.match(text)

    def parse(self, text: str) -> Optional[int]:
        match = self._match(text)
        return int(match.group(1)) if match else None

    def slice(self, text: str) -> str:
        match = self._match(text)
        return text[match.end():] if match else text


def parse_arguments(definitions: Sequence[Argument], text: str) -> Tuple[Dict[str, Any], Optional[Argument]]:
    """
    Run every definition in order against ``text``.

    Returns the mapping of identifier to parsed value (None when a definition
    produced nothing) and the first required definition that failed, if any.
    Parsing stops at that definition.
    """
    mapped: Dict[str, Any] = {}
    state = ParseState(remaining=text)

    for definition in definitions:
        value, state = definition.consume(state)
        mapped[definition.identifier] = value
        if value is None and definition.required:
            return mapped, definition

    return mapped, None


def format_usage(label: str, definitions: Sequence[Argument]) -> str:
    return " ".join([label] + [definition.usage for definition in definitions])
