"""
reckon intermediate representation: the operand tree.
"""

from .operands import BinaryOperation, Literal, Operand, Operation

__all__ = [
    "BinaryOperation",
    "Literal",
    "Operand",
    "Operation",
]
