"""Ideal-solution activity model."""

from __future__ import annotations

from typing import Mapping, Sequence

from thermo.unifac import UFSG

from simpunifac.errors import ModelError
from simpunifac.models import FunctionalGroup, Substance
from simpunifac.thermo.base import ActivityModel
from simpunifac.thermo.unifac import resolve_subgroup


class IdealSolutionModel(ActivityModel):
    """Ideal mixing: every activity coefficient is exactly one.

    Accepts the same subgroup ids as :class:`UNIFACModel` so documents are
    interchangeable between the two.
    """

    name = "ideal"

    def __init__(self, subgroups: Mapping[int, object] | None = None):
        self.subgroups = UFSG if subgroups is None else subgroups

    def make_group(self, group_id: int, count: float) -> FunctionalGroup:
        return resolve_subgroup(self.subgroups, group_id, count)

    def describe_groups(self) -> list[FunctionalGroup]:
        return [self.make_group(group_id, 1.0) for group_id in sorted(self.subgroups)]

    def compute(self, substances: Sequence[Substance], temperature: float) -> list[Substance]:
        if not substances:
            raise ModelError("Cannot compute activity coefficients of an empty mixture")
        if temperature <= 0:
            raise ModelError(f"Temperature must be positive, got {temperature} K")
        return [substance.with_gamma(1.0) for substance in substances]
