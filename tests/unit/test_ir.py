"""Tests for the operand tree types."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from reckon.core.ir import BinaryOperation, Literal, Operation


class TestLiteral:
    def test_value(self) -> None:
        assert Literal(5).value() == 5
        assert Literal(value=-3).value() == -3

    def test_str(self) -> None:
        assert str(Literal(12)) == "12"

    def test_equality(self) -> None:
        assert Literal(1) == Literal(1)
        assert Literal(1) != Literal(2)

    def test_frozen(self) -> None:
        literal = Literal(1)
        with pytest.raises(ValidationError):
            literal.value_ = 2  # type: ignore[misc]


class TestBinaryOperation:
    def test_addition(self) -> None:
        node = BinaryOperation(op=Operation.ADDITION, left=Literal(2), right=Literal(3))
        assert node.value() == 5

    def test_subtraction(self) -> None:
        node = BinaryOperation(op=Operation.SUBTRACTION, left=Literal(2), right=Literal(3))
        assert node.value() == -1

    def test_nested(self) -> None:
        inner = BinaryOperation(op=Operation.SUBTRACTION, left=Literal(10), right=Literal(11))
        outer = BinaryOperation(op=Operation.ADDITION, left=inner, right=Literal(2))
        assert outer.value() == 1
        assert str(outer) == "((10 - 11) + 2)"

    def test_unbound_operator_defaults_to_zero(self, caplog: pytest.LogCaptureFixture) -> None:
        node = BinaryOperation(op=Operation.NONE, left=Literal(4), right=Literal(5))
        with caplog.at_level(logging.WARNING, logger="reckon.core.ir.operands"):
            assert node.value() == 0
        assert "no operator bound" in caplog.text
        assert str(node) == "(4 ? 5)"

    def test_value_does_not_mutate(self) -> None:
        node = BinaryOperation(op=Operation.ADDITION, left=Literal(1), right=Literal(1))
        before = node.model_dump()
        node.value()
        assert node.model_dump() == before
