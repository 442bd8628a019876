"""
Operand tree types for reckon.

An operand is anything that yields an integer through ``value()``:

- Literal: a single integer
- BinaryOperation: left op right, for addition and subtraction

Trees are immutable and own their children exclusively.
"""

from __future__ import annotations

import logging
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class Operation(StrEnum):
    """Binary operations. NONE marks a slot not yet bound to an operator."""

    NONE = ""
    ADDITION = "+"
    SUBTRACTION = "-"


# ---------------------------------------------------------------------------
# Operand node types
# ---------------------------------------------------------------------------


class Literal(BaseModel):
    """A literal integer."""

    value_: int = Field(alias="value", description="The literal value")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def __init__(self, value: int, **data: object) -> None:
        super().__init__(value=value, **data)

    def value(self) -> int:
        return self.value_

    def __str__(self) -> str:
        return str(self.value_)


class BinaryOperation(BaseModel):
    """Binary operation: left op right."""

    op: Operation
    left: Operand
    right: Operand

    model_config = ConfigDict(frozen=True)

    def value(self) -> int:
        if self.op == Operation.ADDITION:
            return self.left.value() + self.right.value()
        if self.op == Operation.SUBTRACTION:
            return self.left.value() - self.right.value()
        logger.warning("Evaluating %s with no operator bound; defaulting to 0", self)
        return 0

    def __str__(self) -> str:
        symbol = self.op.value or "?"
        return f"({self.left} {symbol} {self.right})"


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Operand = Literal | BinaryOperation

# Rebuild models for recursive forward references
BinaryOperation.model_rebuild()
