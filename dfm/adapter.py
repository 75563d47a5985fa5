"""
Input Adapter
Turns raw text into alphabet symbols and evaluation outcomes into text.

Symbols are matched by their string rendering, so a machine over the
integers {0, 1} reads the text "1101" as [1, 1, 0, 1].
"""

import re
from typing import Dict, Hashable, List, Sequence

from .exceptions import DFMError, EvaluationError, InvalidInputError, UndefinedTransitionError
from .models import AutomatonDefinition, _ordered
from .schemas import EvaluationResult

_SEPARATOR_RE = re.compile(r"[\s,]+")


class InputAdapter:
    def __init__(self, definition: AutomatonDefinition):
        self.definition = definition
        self.lookup: Dict[str, Hashable] = {}
        for symbol in _ordered(definition.alphabet):
            text = str(symbol)
            if text in self.lookup:
                raise ValueError(
                    f"Alphabet symbols {self.lookup[text]!r} and {symbol!r} both render as '{text}'"
                )
            self.lookup[text] = symbol
        # Single-character alphabets are read per character, others per token
        self.per_character = all(len(text) == 1 for text in self.lookup)

    def tokenize(self, text: str) -> List[str]:
        text = text.strip()
        if not text:
            return []
        if self.per_character:
            return list(text)
        return [token for token in _SEPARATOR_RE.split(text) if token]

    def parse(self, text: str) -> List[Hashable]:
        """
        Parse `text` into a symbol sequence.
        Raises InvalidInputError on the first token outside the alphabet.
        """
        symbols = []
        for position, token in enumerate(self.tokenize(text)):
            if token not in self.lookup:
                raise InvalidInputError(token, position)
            symbols.append(self.lookup[token])
        return symbols

    def format_symbols(self, symbols: Sequence[Hashable]) -> str:
        separator = "" if self.per_character else " "
        return separator.join(str(symbol) for symbol in symbols)

    def render(self, symbols: Sequence[Hashable], result: EvaluationResult) -> str:
        outcome = "is valid!" if result.accepted else "is rejected!"
        return f"The input string: {self.format_symbols(symbols)} {outcome}"

    def render_error(self, text: str, error: DFMError) -> str:
        if isinstance(error, InvalidInputError):
            return f"Invalid character in input string\n{error}"
        if isinstance(error, UndefinedTransitionError):
            return (
                f"The input string: {text} got stuck in state {error.state} "
                f"on symbol {error.symbol} at position {error.position}!"
            )
        if isinstance(error, EvaluationError):
            return f"The input string: {text} could not be evaluated: {error}"
        return f"Error: {error}"
