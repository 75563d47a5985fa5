"""
Automaton definition model.

An AutomatonDefinition is the 5-tuple (states, alphabet, transitions,
start, accepts). It is validated once, when it is built, and is frozen
afterwards: the state, alphabet and accept sets are frozensets, the
transition relation is a tuple of frozen Transition records, and the
lookup table used by the evaluator is a read-only mapping.
"""

from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Hashable, Iterable, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator, model_validator

from .exceptions import (
    EmptyAlphabetError,
    EmptyStateSetError,
    MalformedTransitionError,
    UnknownAcceptStateError,
    UnknownStartStateError,
)

StatePair = Tuple[Hashable, Hashable]


def _ordered(items: Iterable[Any]) -> List[Any]:
    """Sort for stable messages; fall back to repr for mixed types."""
    items = list(items)
    try:
        return sorted(items)
    except TypeError:
        return sorted(items, key=repr)


class Transition(BaseModel):
    """One edge of the transition relation: source x symbol -> target."""
    model_config = ConfigDict(frozen=True)

    source: Hashable
    symbol: Hashable
    target: Hashable

    @property
    def key(self) -> StatePair:
        return (self.source, self.symbol)


def _coerce_transition(entry: Any) -> Transition:
    if isinstance(entry, Transition):
        return entry
    if isinstance(entry, Mapping):
        return Transition(**entry)
    if isinstance(entry, (tuple, list)) and len(entry) == 3:
        source, symbol, target = entry
        return Transition(source=source, symbol=symbol, target=target)
    raise MalformedTransitionError(entry, "expected a (state, symbol, target) triple")


class AutomatonDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    states: FrozenSet[Hashable] = Field(..., description="Finite set of states")
    alphabet: FrozenSet[Hashable] = Field(..., description="Finite set of input symbols")
    transitions: Tuple[Transition, ...] = Field(default=(), description="Transition relation, possibly partial")
    start: Hashable = Field(..., description="Start state, member of states")
    accepts: FrozenSet[Hashable] = Field(default_factory=frozenset, description="Accept states, subset of states")
    total: bool = Field(default=False, description="Require a transition for every (state, symbol) pair")

    _table: Dict[StatePair, Hashable] = PrivateAttr(default_factory=dict)

    @field_validator("transitions", mode="before")
    @classmethod
    def normalize_transitions(cls, v: Any) -> List[Transition]:
        """
        Accepts {(state, symbol): target}, {state: {symbol: target}} or an
        iterable of Transition records / (state, symbol, target) triples.
        """
        if v is None:
            return []

        if isinstance(v, Mapping):
            edges = []
            for key, value in v.items():
                if isinstance(value, Mapping):
                    for symbol, target in value.items():
                        edges.append(Transition(source=key, symbol=symbol, target=target))
                elif isinstance(key, tuple) and len(key) == 2:
                    edges.append(Transition(source=key[0], symbol=key[1], target=value))
                else:
                    raise MalformedTransitionError(key, "key is not a (state, symbol) pair")
            return edges

        if isinstance(v, (str, bytes)) or not isinstance(v, Iterable):
            raise MalformedTransitionError(v, "transitions must be a mapping or an iterable of triples")

        return [_coerce_transition(entry) for entry in v]

    @model_validator(mode="after")
    def validate_integrity(self):
        # 1. Non-empty sets
        if not self.states:
            raise EmptyStateSetError()
        if not self.alphabet:
            raise EmptyAlphabetError()

        # 2. Start and accept states
        if self.start not in self.states:
            raise UnknownStartStateError(self.start)
        for state in _ordered(self.accepts):
            if state not in self.states:
                raise UnknownAcceptStateError(state)

        # 3. Transition table
        table: Dict[StatePair, Hashable] = {}
        for edge in self.transitions:
            if edge.source not in self.states:
                raise MalformedTransitionError(edge.key, f"state {edge.source!r} is not in the state set")
            if edge.symbol not in self.alphabet:
                raise MalformedTransitionError(edge.key, f"symbol {edge.symbol!r} is not in the alphabet")
            if edge.target not in self.states:
                raise MalformedTransitionError(edge.key, f"destination {edge.target!r} is not in the state set")
            if edge.key in table and table[edge.key] != edge.target:
                raise MalformedTransitionError(
                    edge.key, f"defined twice, to {table[edge.key]!r} and {edge.target!r}"
                )
            table[edge.key] = edge.target

        # 4. Totality, when declared
        if self.total:
            missing = self._missing_from(table)
            if missing:
                raise MalformedTransitionError(missing[0], "no transition defined but the automaton is declared total")

        self._table = table
        return self

    def model_copy(self, *, update: Optional[Mapping[str, Any]] = None, deep: bool = False) -> "AutomatonDefinition":
        """
        Copy through full validation, so an update cannot produce a definition
        that violates the construction rules. `deep` is accepted for
        compatibility; every field is already immutable.
        """
        data = {name: getattr(self, name) for name in type(self).model_fields}
        if update:
            data.update(update)
        return type(self)(**data)

    def _missing_from(self, table: Mapping[StatePair, Hashable]) -> List[StatePair]:
        return [
            (state, symbol)
            for state in _ordered(self.states)
            for symbol in _ordered(self.alphabet)
            if (state, symbol) not in table
        ]

    @property
    def table(self) -> Mapping[StatePair, Hashable]:
        """Read-only (state, symbol) -> state lookup."""
        return MappingProxyType(self._table)

    @property
    def is_total(self) -> bool:
        return len(self._table) == len(self.states) * len(self.alphabet)

    def missing_transitions(self) -> List[StatePair]:
        """(state, symbol) pairs with no defined transition."""
        return self._missing_from(self._table)

    def next_state(self, state: Hashable, symbol: Hashable) -> Optional[Hashable]:
        return self._table.get((state, symbol))

    def is_accepting(self, state: Hashable) -> bool:
        return state in self.accepts


def build_definition(
    states: Iterable[Hashable],
    alphabet: Iterable[Hashable],
    transitions: Any,
    start: Hashable,
    accepts: Iterable[Hashable] = (),
    total: bool = False,
) -> AutomatonDefinition:
    """
    Build and validate an AutomatonDefinition.

    Raises a DefinitionError subclass naming the offending element when the
    tuple is malformed. Caller-owned containers are copied, never retained.
    """
    return AutomatonDefinition(
        states=frozenset(states),
        alphabet=frozenset(alphabet),
        transitions=transitions,
        start=start,
        accepts=frozenset(accepts),
        total=total,
    )
