"""
Exception hierarchy for DFM.

Two disjoint families:
  - DefinitionError: raised while building an AutomatonDefinition.
  - EvaluationError: raised by a single evaluate() call.

None of these subclass ValueError, so pydantic lets them propagate out of
model validators untouched instead of folding them into its own
ValidationError.
"""

from typing import Any, Hashable, Optional


class DFMError(Exception):
    """Base class for every error raised by the DFM package."""
    pass


# --- Construction-time errors ---

class DefinitionError(DFMError):
    """The supplied 5-tuple does not describe a usable automaton."""
    pass


class EmptyStateSetError(DefinitionError):
    def __init__(self):
        super().__init__("State set must not be empty.")


class EmptyAlphabetError(DefinitionError):
    def __init__(self):
        super().__init__("Alphabet must not be empty.")


class UnknownStartStateError(DefinitionError):
    def __init__(self, state: Hashable):
        self.state = state
        super().__init__(f"Start state {state!r} is not in the state set.")


class UnknownAcceptStateError(DefinitionError):
    def __init__(self, state: Hashable):
        self.state = state
        super().__init__(f"Accept state {state!r} is not in the state set.")


class MalformedTransitionError(DefinitionError):
    """
    A transition entry references an unknown state or symbol, is not a
    (state, symbol) pair, conflicts with another entry, or is missing from
    a definition declared total.
    """

    def __init__(self, transition: Any, reason: str):
        self.transition = transition
        self.reason = reason
        super().__init__(f"Malformed transition {transition!r}: {reason}")


# --- Evaluation-time errors ---

class EvaluationError(DFMError):
    """An input sequence drove the automaton into an undefined condition."""

    def __init__(self, message: str, symbol: Any, position: int, state: Optional[Hashable] = None):
        self.symbol = symbol
        self.position = position
        self.state = state
        super().__init__(message)


class SymbolNotInAlphabetError(EvaluationError):
    def __init__(self, symbol: Any, position: int):
        super().__init__(
            f"Symbol {symbol!r} at position {position} is not in the alphabet.",
            symbol=symbol,
            position=position,
        )


class UndefinedTransitionError(EvaluationError):
    def __init__(self, state: Hashable, symbol: Hashable, position: int):
        super().__init__(
            f"No transition from state {state!r} on symbol {symbol!r} (position {position}).",
            symbol=symbol,
            position=position,
            state=state,
        )


# --- Adapter errors ---

class InvalidInputError(DFMError):
    """Raw text contains a token that is not part of the machine alphabet."""

    def __init__(self, token: str, position: int):
        self.token = token
        self.position = position
        super().__init__(f"{token} is not a part of the machine alphabet")
