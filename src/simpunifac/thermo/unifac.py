"""Original UNIFAC activity coefficients backed by :mod:`thermo.unifac`.

Subgroup ids follow the DDBST numbering used by ``thermo`` (``1`` = CH3,
``2`` = CH2, ``9`` = ACH, ``14`` = OH, ...). The group-interaction table is
``UFIP`` and the subgroup table ``UFSG``.
"""

from __future__ import annotations

import logging
from itertools import combinations
from typing import Mapping, Sequence

import numpy as np
from thermo.unifac import UFIP, UFSG, UNIFAC

from simpunifac.errors import GroupSemanticError, ModelError
from simpunifac.models import FunctionalGroup, Substance
from simpunifac.thermo.base import ActivityModel

logger = logging.getLogger(__name__)


def resolve_subgroup(subgroups: Mapping[int, object], group_id: int, count: float) -> FunctionalGroup:
    """Look a subgroup id up in a UNIFAC subgroup table such as ``UFSG``."""
    subgroup = subgroups.get(group_id)
    if subgroup is None:
        raise GroupSemanticError(f"Unknown UNIFAC subgroup id {group_id}")
    if count < 0:
        raise GroupSemanticError(f"Negative count {count} for UNIFAC subgroup {group_id}")
    return FunctionalGroup(
        id=group_id,
        count=float(count),
        name=subgroup.group,
        main_group=subgroup.main_group_id,
    )


class UNIFACModel(ActivityModel):
    """Original UNIFAC (version 0 in ``thermo``) with the published parameter tables."""

    name = "unifac"

    def __init__(
        self,
        subgroups: Mapping[int, object] | None = None,
        interaction_data: Mapping[int, Mapping[int, float]] | None = None,
    ):
        self.subgroups = UFSG if subgroups is None else subgroups
        self.interaction_data = UFIP if interaction_data is None else interaction_data

    def make_group(self, group_id: int, count: float) -> FunctionalGroup:
        return resolve_subgroup(self.subgroups, group_id, count)

    def describe_groups(self) -> list[FunctionalGroup]:
        return [self.make_group(group_id, 1.0) for group_id in sorted(self.subgroups)]

    def _check_interactions(self, chemgroups: Sequence[Mapping[int, float]]) -> None:
        main_groups = sorted(
            {self.subgroups[group_id].main_group_id for groups in chemgroups for group_id in groups}
        )
        for first, second in combinations(main_groups, 2):
            for m, n in ((first, second), (second, first)):
                if n not in self.interaction_data.get(m, {}):
                    raise ModelError(
                        f"No UNIFAC interaction parameters between main groups {m} and {n}"
                    )

    def compute(self, substances: Sequence[Substance], temperature: float) -> list[Substance]:
        if not substances:
            raise ModelError("Cannot compute activity coefficients of an empty mixture")
        if temperature <= 0:
            raise ModelError(f"Temperature must be positive, got {temperature} K")

        chemgroups = []
        for substance in substances:
            if not substance.groups:
                raise ModelError(f"Substance {substance.name} has no functional groups")
            # Repeated ids in one substance add up
            counts: dict[int, float] = {}
            for group in substance.groups:
                counts[group.id] = counts.get(group.id, 0.0) + group.count
            chemgroups.append(counts)
        self._check_interactions(chemgroups)

        xs = [substance.fraction for substance in substances]
        try:
            model = UNIFAC.from_subgroups(
                T=float(temperature),
                xs=xs,
                chemgroups=chemgroups,
                subgroups=self.subgroups,
                interaction_data=self.interaction_data,
                version=0,
            )
            gammas = np.asarray(model.gammas(), dtype=float)
        except (ArithmeticError, ValueError, KeyError, IndexError) as exc:
            raise ModelError(f"UNIFAC calculation failed: {exc}") from exc

        if gammas.shape != (len(substances),) or not np.all(np.isfinite(gammas)):
            raise ModelError("UNIFAC calculation did not produce finite activity coefficients")

        logger.debug("UNIFAC gammas at %s K: %s", temperature, gammas.tolist())
        return [
            substance.with_gamma(float(gamma))
            for substance, gamma in zip(substances, gammas, strict=True)
        ]
