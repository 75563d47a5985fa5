"""
Result schemas for DFM evaluation.
"""

from enum import Enum
from typing import Any, Dict, Hashable, Tuple

from pydantic import BaseModel, ConfigDict, Field


class Verdict(str, Enum):
    """Outcome of running an input sequence to completion."""
    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"


class EvaluationResult(BaseModel):
    """
    Outcome of one evaluate() call.
    Ephemeral: built per call and never shared with the definition.
    """
    model_config = ConfigDict(frozen=True)

    verdict: Verdict
    final_state: Hashable = Field(..., description="State reached after the last symbol")
    consumed: int = Field(..., ge=0, description="Number of symbols consumed")
    path: Tuple[Hashable, ...] = Field(default=(), description="Visited states, start state first")

    @property
    def accepted(self) -> bool:
        return self.verdict is Verdict.ACCEPTED

    def to_dict(self) -> Dict[str, Any]:
        return {
            "verdict": self.verdict.value,
            "final_state": self.final_state,
            "consumed": self.consumed,
            "path": list(self.path),
        }
