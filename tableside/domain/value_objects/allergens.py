"""Allergens value object."""
from dataclasses import dataclass
from typing import FrozenSet, Iterable, Optional


def _normalize(allergen: str) -> str:
    trimmed = allergen.strip()
    return trimmed[0].upper() + trimmed[1:].lower()


@dataclass(frozen=True)
class Allergens:
    """
    Case-insensitively deduplicated set of allergen names.

    "  GLUTEN", "gluten" and "Gluten" all collapse to "Gluten".
    An empty set means "no allergens".
    """

    values: FrozenSet[str] = frozenset()

    def __post_init__(self):
        raw: Optional[Iterable[str]] = self.values
        normalized = frozenset(
            _normalize(a) for a in (raw or ()) if a and a.strip()
        )
        object.__setattr__(self, "values", normalized)

    @classmethod
    def of(cls, *allergens: str) -> "Allergens":
        return cls(values=frozenset(allergens))

    @classmethod
    def none(cls) -> "Allergens":
        return cls()

    @property
    def has_allergens(self) -> bool:
        return bool(self.values)

    def contains(self, allergen: Optional[str]) -> bool:
        if not allergen or not allergen.strip():
            return False
        return _normalize(allergen) in self.values

    def sorted_values(self) -> list:
        return sorted(self.values)

    def __iter__(self):
        return iter(self.sorted_values())

    def __len__(self) -> int:
        return len(self.values)

    def __str__(self) -> str:
        if not self.has_allergens:
            return "No allergens"
        return ", ".join(self.sorted_values())
