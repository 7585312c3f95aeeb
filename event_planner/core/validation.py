from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from fastapi import HTTPException


@dataclass
class ValidationResult:
    """
    Outcome of a form validation step.

    errors maps a field name to a single message. The first message set on
    a field wins, so earlier checks are reported over later ones.
    """
    errors: dict[str, str] = field(default_factory=dict)
    data: dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors

    def add_error(self, name: str, message: str) -> None:
        self.errors.setdefault(name, message)

    def raise_for_errors(self) -> None:
        if self.errors:
            raise form_errors(self.errors)


def form_errors(errors: dict[str, str]) -> HTTPException:
    return HTTPException(
        status_code=422,
        detail={"errors": errors},
    )
