"""
DFM: Deterministic Finite Machine evaluation engine.
Centralized exports for all core functionality.
"""

from .exceptions import (
    DFMError,
    DefinitionError,
    EmptyStateSetError,
    EmptyAlphabetError,
    UnknownStartStateError,
    UnknownAcceptStateError,
    MalformedTransitionError,
    EvaluationError,
    SymbolNotInAlphabetError,
    UndefinedTransitionError,
    InvalidInputError,
)

from .models import (
    AutomatonDefinition,
    Transition,
    build_definition,
)

from .schemas import (
    EvaluationResult,
    Verdict,
)

from .evaluator import (
    DFMEvaluator,
    evaluate,
    accepts,
)

from .reference import make_reference_dfm

from .adapter import InputAdapter

__all__ = [
    # Errors
    "DFMError",
    "DefinitionError",
    "EmptyStateSetError",
    "EmptyAlphabetError",
    "UnknownStartStateError",
    "UnknownAcceptStateError",
    "MalformedTransitionError",
    "EvaluationError",
    "SymbolNotInAlphabetError",
    "UndefinedTransitionError",
    "InvalidInputError",
    # Definition
    "AutomatonDefinition",
    "Transition",
    "build_definition",
    # Results
    "EvaluationResult",
    "Verdict",
    # Evaluator
    "DFMEvaluator",
    "evaluate",
    "accepts",
    # Reference machine
    "make_reference_dfm",
    # Adapter
    "InputAdapter",
]
