"""Data structures for mixtures, substances and functional groups."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Mapping


@dataclass(frozen=True)
class GroupToken:
    id: int
    count: float
    source: str | None = field(default=None, compare=False, repr=False)  # token as written


@dataclass(frozen=True)
class FunctionalGroup:
    """A subgroup record resolved by an activity model."""

    id: int
    count: float
    name: str = ""
    main_group: int | None = None
    source: str | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class SubstanceSpec:
    fraction: float
    groups: tuple[FunctionalGroup, ...]


@dataclass(frozen=True)
class MixtureRequest:
    temperature: float  # K
    substances: Mapping[str, SubstanceSpec]


@dataclass(frozen=True)
class Substance:
    name: str
    fraction: float
    groups: tuple[FunctionalGroup, ...]
    gamma: float | None = None

    def with_gamma(self, gamma: float) -> Substance:
        return replace(self, gamma=gamma)


@dataclass(frozen=True)
class ComputationResult:
    temperature: float
    substances: tuple[Substance, ...]
