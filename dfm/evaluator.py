"""
DFM Evaluator
Folds an automaton's transition relation over an input sequence.

The evaluator holds no state between calls: every call works only on its
own locals, so one AutomatonDefinition can be evaluated from many threads
at once.
"""

from typing import Hashable, Iterable

from .exceptions import SymbolNotInAlphabetError, UndefinedTransitionError
from .models import AutomatonDefinition
from .schemas import EvaluationResult, Verdict


class DFMEvaluator:
    def evaluate(self, definition: AutomatonDefinition, symbols: Iterable[Hashable]) -> EvaluationResult:
        table = definition.table
        alphabet = definition.alphabet

        curr = definition.start
        trace_path = [curr]
        consumed = 0

        for position, symbol in enumerate(symbols):
            try:
                known = symbol in alphabet
            except TypeError:
                # Unhashable values cannot be alphabet members
                known = False
            if not known:
                raise SymbolNotInAlphabetError(symbol, position)

            key = (curr, symbol)
            if key not in table:
                raise UndefinedTransitionError(curr, symbol, position)

            curr = table[key]
            trace_path.append(curr)
            consumed += 1

        verdict = Verdict.ACCEPTED if definition.is_accepting(curr) else Verdict.REJECTED
        return EvaluationResult(
            verdict=verdict,
            final_state=curr,
            consumed=consumed,
            path=tuple(trace_path),
        )

    def accepts(self, definition: AutomatonDefinition, symbols: Iterable[Hashable]) -> bool:
        return self.evaluate(definition, symbols).accepted


_default_evaluator = DFMEvaluator()


def evaluate(definition: AutomatonDefinition, symbols: Iterable[Hashable]) -> EvaluationResult:
    """
    Run `symbols` through `definition` and report acceptance.

    Raises SymbolNotInAlphabetError for a symbol outside the alphabet and
    UndefinedTransitionError when a partial automaton gets stuck. Both
    carry the zero-based position of the offending symbol.
    """
    return _default_evaluator.evaluate(definition, symbols)


def accepts(definition: AutomatonDefinition, symbols: Iterable[Hashable]) -> bool:
    return _default_evaluator.accepts(definition, symbols)
