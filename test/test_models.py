import pytest
from pydantic import ValidationError

from dfm.exceptions import (
    DefinitionError,
    EmptyAlphabetError,
    EmptyStateSetError,
    MalformedTransitionError,
    UnknownAcceptStateError,
    UnknownStartStateError,
)
from dfm.models import AutomatonDefinition, Transition, build_definition


def make(**overrides):
    kwargs = dict(
        states=["q0", "q1"],
        alphabet=["a", "b"],
        transitions={("q0", "a"): "q1", ("q1", "b"): "q0"},
        start="q0",
        accepts=["q1"],
    )
    kwargs.update(overrides)
    return build_definition(**kwargs)


# --- 1. Valid construction ---
def test_valid_definition_copies_inputs_into_frozensets():
    dfm = make()
    assert dfm.states == frozenset({"q0", "q1"})
    assert dfm.alphabet == frozenset({"a", "b"})
    assert dfm.accepts == frozenset({"q1"})
    assert dfm.start == "q0"
    assert dfm.table == {("q0", "a"): "q1", ("q1", "b"): "q0"}


def test_empty_accept_set_is_allowed():
    dfm = make(accepts=[])
    assert dfm.accepts == frozenset()
    assert dfm.is_accepting("q0") is False


def test_nested_mapping_transitions():
    dfm = make(transitions={"q0": {"a": "q1", "b": "q0"}, "q1": {"a": "q1", "b": "q0"}})
    assert dfm.next_state("q0", "b") == "q0"
    assert dfm.next_state("q1", "b") == "q0"
    assert dfm.is_total is True


def test_triple_and_record_transitions():
    dfm = make(transitions=[("q0", "a", "q1"), Transition(source="q1", symbol="b", target="q0")])
    assert dfm.table == {("q0", "a"): "q1", ("q1", "b"): "q0"}


def test_direct_model_construction_validates_too():
    with pytest.raises(UnknownStartStateError):
        AutomatonDefinition(states={"q0"}, alphabet={"a"}, transitions={}, start="nope")


def test_exact_duplicate_transitions_are_tolerated():
    dfm = make(transitions=[("q0", "a", "q1"), ("q0", "a", "q1")])
    assert dfm.next_state("q0", "a") == "q1"


# --- 2. Validation errors name the offending element ---
def test_empty_state_set():
    with pytest.raises(EmptyStateSetError):
        make(states=[], transitions={}, accepts=[])


def test_empty_alphabet():
    with pytest.raises(EmptyAlphabetError):
        make(alphabet=[], transitions={})


def test_unknown_start_state():
    with pytest.raises(UnknownStartStateError) as exc:
        make(start="q9")
    assert exc.value.state == "q9"


def test_unknown_accept_state():
    with pytest.raises(UnknownAcceptStateError) as exc:
        make(accepts=["q1", "q7"])
    assert exc.value.state == "q7"


@pytest.mark.parametrize(
    "transitions, offending",
    [
        ({("q5", "a"): "q1"}, ("q5", "a")),
        ({("q0", "z"): "q1"}, ("q0", "z")),
        ({("q0", "a"): "q8"}, ("q0", "a")),
        ({"q0": "q1"}, "q0"),
    ],
)
def test_malformed_transition(transitions, offending):
    with pytest.raises(MalformedTransitionError) as exc:
        make(transitions=transitions)
    assert exc.value.transition == offending


def test_conflicting_transitions_are_malformed():
    with pytest.raises(MalformedTransitionError) as exc:
        make(transitions=[("q0", "a", "q1"), ("q0", "a", "q0")])
    assert exc.value.transition == ("q0", "a")


def test_bad_transition_shapes():
    with pytest.raises(MalformedTransitionError):
        make(transitions=[("q0", "a")])
    with pytest.raises(MalformedTransitionError):
        make(transitions="q0aq1")


def test_declared_total_requires_every_pair():
    with pytest.raises(MalformedTransitionError) as exc:
        make(total=True)
    assert exc.value.transition == ("q0", "b")


def test_all_definition_errors_share_a_base():
    for kwargs in ({"states": [], "accepts": [], "transitions": {}}, {"start": "x"}, {"accepts": ["x"]}):
        with pytest.raises(DefinitionError):
            make(**kwargs)


# --- 3. Partial vs total ---
def test_missing_transitions_for_partial_definition():
    dfm = make()
    assert dfm.is_total is False
    assert dfm.missing_transitions() == [("q0", "b"), ("q1", "a")]
    assert dfm.next_state("q0", "b") is None


def test_reference_machine_is_total(reference_dfm):
    assert reference_dfm.is_total is True
    assert reference_dfm.missing_transitions() == []


# --- 4. Immutability ---
def test_definition_is_frozen():
    dfm = make()
    with pytest.raises(ValidationError):
        dfm.start = "q1"


def test_table_is_read_only():
    dfm = make()
    with pytest.raises(TypeError):
        dfm.table[("q0", "b")] = "q1"


def test_caller_containers_are_not_retained():
    accepts = ["q1"]
    transitions = {("q0", "a"): "q1"}
    dfm = make(accepts=accepts, transitions=transitions)

    accepts.append("q0")
    transitions[("q0", "b")] = "q0"

    assert dfm.accepts == frozenset({"q1"})
    assert dfm.next_state("q0", "b") is None


def test_definitions_are_hashable_values():
    assert make() == make()
    assert hash(make()) == hash(make())


def test_copy_with_update_is_revalidated(reference_dfm):
    with pytest.raises(UnknownStartStateError):
        reference_dfm.model_copy(update={"start": 99})


def test_copy_with_valid_update_rebuilds_table(reference_dfm):
    copy = reference_dfm.model_copy(update={"accepts": frozenset({2})})
    assert copy.accepts == frozenset({2})
    assert copy.next_state(2, 1) == 4
    assert reference_dfm.accepts == frozenset({1, 3})
