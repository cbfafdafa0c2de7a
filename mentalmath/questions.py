"""Question and difficulty parameter types."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Operation(enum.Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"


@dataclass
class Question:
    operand_a: int
    operand_b: int
    operation: Operation
    correct_answer: float
    difficulty_score: float
    rating: float


@dataclass(frozen=True)
class DifficultyParams:
    """Settings that shape generated questions for a given rating."""

    digit_count1: int
    digit_count2: int
    add_weight: float
    sub_weight: float
    mul_weight: float
    div_weight: float
    carry_prob: float
    carry_propagation: int
    complexity_level: float

    def operation_weights(self) -> dict[Operation, float]:
        """Probability of each operation."""
        return {
            Operation.ADD: self.add_weight,
            Operation.SUBTRACT: self.sub_weight,
            Operation.MULTIPLY: self.mul_weight,
            Operation.DIVIDE: self.div_weight,
        }