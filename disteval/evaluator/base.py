"""
Base classes connecting evaluators to a host expression pipeline.

The host pipeline owns parsing and operand evaluation. An evaluator only
sees it through ExpressionContext, which exposes the named parameters of
the expression, the evaluated operand values, and the expression text
for error messages.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, List, Mapping, Sequence, Union


@dataclass(frozen=True)
class NamedParameter:
    """A name=value parameter of an expression, e.g. type="canberra"."""

    name: str
    value: Any


ParameterSource = Union[Sequence[NamedParameter], Mapping[str, Any], None]


def as_named_parameters(parameters: ParameterSource) -> List[NamedParameter]:
    """Normalize a mapping or sequence of parameters to a list."""
    if parameters is None:
        return []
    if isinstance(parameters, Mapping):
        return [NamedParameter(name, value) for name, value in parameters.items()]
    return list(parameters)


class ExpressionContext(ABC):
    """
    Host-pipeline view of one expression.

    Implementations wrap whatever expression tree the host uses.
    """

    @abstractmethod
    def get_named_parameters(self) -> List[NamedParameter]:
        """Return the expression's named parameters in declaration order."""
        pass

    @abstractmethod
    def evaluate_operands(self) -> List[Any]:
        """Evaluate the positional sub-expressions and return their values."""
        pass

    @abstractmethod
    def to_expression(self) -> str:
        """Render the expression as text."""
        pass


class ManyValueEvaluator(ABC):
    """
    Evaluator receiving all operand values at once.

    Subclasses implement do_work(*values).
    """

    def __init__(self, expression: str):
        self._expression = expression

    @property
    def expression(self) -> str:
        """Expression text used in error messages."""
        return self._expression

    @abstractmethod
    def do_work(self, *values: Any) -> Any:
        """Compute the result from evaluated operand values."""
        pass

    def evaluate(self, operands: Sequence[Any]) -> Any:
        """
        Evaluate with already-resolved operand values.

        Args:
            operands: Runtime values, one per positional sub-expression

        Returns:
            The evaluator's result
        """
        return self.do_work(*operands)

    def evaluate_context(self, context: ExpressionContext) -> Any:
        """Evaluate the operands through the host context, then compute."""
        return self.evaluate(context.evaluate_operands())

    def __call__(self, context: ExpressionContext) -> Any:
        return self.evaluate_context(context)
