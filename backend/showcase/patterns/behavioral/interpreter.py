"""
Interpreter: evaluate postfix (RPN) integer arithmetic such as ``"5 3 + 2 *"``.

Integer division truncates toward zero; division by zero evaluates to 0.
"""

from abc import ABC, abstractmethod
from typing import Callable, Dict, List


class Expression(ABC):
    @abstractmethod
    def interpret(self) -> int: ...


class NumberExpression(Expression):
    def __init__(self, value: int):
        self.value = value

    def interpret(self) -> int:
        return self.value


class BinaryExpression(Expression):
    def __init__(self, left: Expression, right: Expression):
        self.left = left
        self.right = right


class AddExpression(BinaryExpression):
    def interpret(self) -> int:
        return self.left.interpret() + self.right.interpret()


class SubtractExpression(BinaryExpression):
    def interpret(self) -> int:
        return self.left.interpret() - self.right.interpret()


class MultiplyExpression(BinaryExpression):
    def interpret(self) -> int:
        return self.left.interpret() * self.right.interpret()


class DivideExpression(BinaryExpression):
    def interpret(self) -> int:
        right = self.right.interpret()
        if right == 0:
            return 0
        left = self.left.interpret()
        quotient = abs(left) // abs(right)
        return quotient if (left >= 0) == (right > 0) else -quotient


OPERATORS: Dict[str, Callable[[Expression, Expression], Expression]] = {
    "+": AddExpression,
    "-": SubtractExpression,
    "*": MultiplyExpression,
    "/": DivideExpression,
}


def parse(expression: str) -> Expression:
    """Build an expression tree from whitespace-separated postfix tokens.

    Raises:
        ValueError: unknown token, missing operand or leftover operands
    """
    stack: List[Expression] = []
    for token in expression.split():
        if token in OPERATORS:
            if len(stack) < 2:
                raise ValueError(f"operator '{token}' is missing an operand")
            right = stack.pop()
            left = stack.pop()
            stack.append(OPERATORS[token](left, right))
            continue
        try:
            stack.append(NumberExpression(int(token)))
        except ValueError:
            raise ValueError(f"invalid token: {token!r}")

    if len(stack) != 1:
        raise ValueError(f"malformed expression: {expression!r}")
    return stack[0]


def evaluate(expression: str) -> int:
    return parse(expression).interpret()


def demo() -> List[str]:
    samples = ["5 3 +", "10 2 -", "4 5 *", "20 4 /", "5 3 + 2 *", "7 0 /"]
    return ["Interpreter:"] + [f"  {s} = {evaluate(s)}" for s in samples]
