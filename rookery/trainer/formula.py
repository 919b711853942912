"""
Model Formula.

A minimal `label ~ features` notation: `species ~ .` uses every non-label
column as a feature; `species ~ bill_length_mm + island` names them
explicitly.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from rookery.core import InvalidArgumentError


@dataclass(frozen=True)
class Formula:
    """
    Attributes:
        label: Target column.
        features: Explicit predictors, or None for "all other columns".
    """
    label: str
    features: Optional[Tuple[str, ...]] = None

    @classmethod
    def parse(cls, text: str) -> "Formula":
        """
        Parses `label ~ .` or `label ~ a + b + c`.

        Raises:
            InvalidArgumentError: On a malformed formula.
        """
        lhs, sep, rhs = text.partition("~")
        label, rhs = lhs.strip(), rhs.strip()
        if not sep or not label or not rhs:
            raise InvalidArgumentError(f"Malformed formula '{text}'", stage="trainer")
        if rhs == ".":
            return cls(label=label)

        terms = tuple(t.strip() for t in rhs.split("+"))
        if any(not t for t in terms):
            raise InvalidArgumentError(f"Empty term in formula '{text}'", stage="trainer")
        if label in terms:
            raise InvalidArgumentError(
                f"Label '{label}' cannot appear on both sides of '{text}'", stage="trainer"
            )
        return cls(label=label, features=terms)

    def resolve_features(self, columns: Sequence[str]) -> Tuple[str, ...]:
        """Feature columns for a table with the given columns, in table order for `.`."""
        if self.features is None:
            return tuple(c for c in columns if c != self.label)
        return self.features

    def __str__(self) -> str:
        rhs = "." if self.features is None else " + ".join(self.features)
        return f"{self.label} ~ {rhs}"
