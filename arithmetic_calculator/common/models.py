"""Pydantic models for arithmetic operation requests and results."""
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator


class OperationRequest(BaseModel):
    """Represents a single arithmetic expression to evaluate."""

    expression: str = Field(..., description="Arithmetic expression as a string")

    @field_validator("expression")
    def expression_must_not_be_empty(cls, v: str) -> str:
        """Ensure that the expression is not empty."""
        if not v.strip():
            raise ValueError("Expression cannot be empty")
        return v


class OperationResult(BaseModel):
    """Represents the outcome of an evaluated arithmetic expression."""

    expression: str = Field(..., description="Original arithmetic expression")
    result: Optional[float] = Field(default=None, description="Evaluated numeric result of the expression")
    error: Optional[str] = Field(default=None, description="Error message if evaluation failed")

    @model_validator(mode="after")
    def exactly_one_outcome(self) -> "OperationResult":
        """Ensure that either a result or an error is set, never both."""
        if (self.result is None) == (self.error is None):
            raise ValueError("Exactly one of 'result' or 'error' must be set")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None

    def render(self) -> str:
        """
        Render the result as a single output line.

        :return: "<expr> = <result>" or "<expr> -> ERROR: <message>"
        :rtype: str
        """
        if self.ok:
            return f"{self.expression} = {self.result}"
        return f"{self.expression} -> ERROR: {self.error}"
