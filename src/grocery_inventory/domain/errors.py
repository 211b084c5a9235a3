"""Domain errors."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FieldViolation:
    """A single field-level validation failure."""

    field: str
    message: str


class GroceryValidationError(ValueError):
    """Raised when grocery fields violate item invariants."""

    def __init__(self, violations: list[FieldViolation]) -> None:
        self.violations = violations
        detail = "; ".join(f"{v.field}: {v.message}" for v in violations)
        super().__init__(f"Invalid grocery item: {detail}")


class ReportGenerationError(RuntimeError):
    """Raised when a report cannot be aggregated or encoded."""
