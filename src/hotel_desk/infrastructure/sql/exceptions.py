"""Exceptions raised while assembling SQL statements."""

from typing import Any, Dict


class ClauseParameterMismatch(ValueError):
    """Raised when a clause fragment's ``?`` markers and parameters disagree."""

    def __init__(self, clause: str, placeholders: int, parameters: int) -> None:
        super().__init__(
            f"Clause '{clause}' has {placeholders} placeholder(s) "
            f"but {parameters} parameter(s)"
        )
        self.clause = clause
        self.placeholders = placeholders
        self.parameters = parameters

    def to_dict(self) -> Dict[str, Any]:
        """Convert to structured dict for logging."""
        return {
            "error_type": "ClauseParameterMismatch",
            "clause": self.clause,
            "placeholders": self.placeholders,
            "parameters": self.parameters,
        }
