"""
The four-state binary reference machine.

States 1..4, alphabet {0, 1}, start state 2, accept states {1, 3}.
"""

from .models import AutomatonDefinition, build_definition

REFERENCE_TRANSITIONS = {
    (1, 0): 1,
    (1, 1): 3,
    (2, 0): 1,
    (2, 1): 4,
    (3, 0): 4,
    (3, 1): 3,
    (4, 0): 2,
    (4, 1): 3,
}


def make_reference_dfm() -> AutomatonDefinition:
    return build_definition(
        states=(1, 2, 3, 4),
        alphabet=(0, 1),
        transitions=REFERENCE_TRANSITIONS,
        start=2,
        accepts=(1, 3),
        total=True,
    )
