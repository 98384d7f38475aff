"""Pydantic models describing what the interfaces print."""

from pydantic import BaseModel, ConfigDict, Field


def _format_bool(value: bool) -> str:
    """Render a boolean in lowercase, as ``true`` or ``false``."""
    return "true" if value else "false"


class ComparisonLine(BaseModel):
    """A single evaluated comparison such as ``x == y``."""

    model_config = ConfigDict(frozen=True)

    expression: str = Field(description="Comparison as written, e.g. 'x == y'")
    result: bool = Field(description="Outcome of the comparison")

    def render(self) -> str:
        """Return the printable form of the comparison."""
        return f"{self.expression}: {_format_bool(self.result)}"


class ComparisonReport(BaseModel):
    """The value of ``z`` followed by the evaluated comparisons."""

    model_config = ConfigDict(frozen=True)

    z: int
    lines: list[ComparisonLine] = Field(default_factory=list)

    def render(self) -> list[str]:
        """Return the report as printable lines."""
        return [f"Value of z: {self.z}", *(line.render() for line in self.lines)]


class DivisionResult(BaseModel):
    """Successful outcome of a safe division."""

    model_config = ConfigDict(frozen=True)

    numerator: float
    denominator: float
    quotient: float

    def render(self) -> str:
        """Return the quotient with six decimal places."""
        return f"Result: {self.quotient:f}"
