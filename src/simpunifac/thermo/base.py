"""Base interface for activity-coefficient models."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from simpunifac.models import FunctionalGroup, Substance


class ActivityModel(ABC):
    """Abstract base class for group-contribution activity models."""

    name = "abstract"

    @abstractmethod
    def make_group(self, group_id: int, count: float) -> FunctionalGroup:
        """Resolve a subgroup record, raising ``GroupSemanticError`` if it is not supported."""
        pass

    @abstractmethod
    def compute(self, substances: Sequence[Substance], temperature: float) -> list[Substance]:
        """Return the substances with ``gamma`` set, raising ``ModelError`` on failure."""
        pass

    @abstractmethod
    def describe_groups(self) -> list[FunctionalGroup]:
        """List every subgroup the model accepts."""
        pass

    def make_substance(
        self, name: str, fraction: float, groups: Sequence[FunctionalGroup]
    ) -> Substance:
        return Substance(name=name, fraction=float(fraction), groups=tuple(groups))
