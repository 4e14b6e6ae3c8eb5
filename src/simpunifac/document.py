"""Mixture documents: parsing, validation and re-serialization.

A document looks like::

    temperature: 298
    substances:
      ethanole:
        fraction: 0.5
        groups: ["1:2", "2:1", "14:1"]

The output document has the same shape with ``gamma`` added to every
substance entry. Substance order is preserved in both directions.
"""

from __future__ import annotations

import json
import logging
import math
from dataclasses import replace
from numbers import Real
from typing import Any, Mapping

import yaml

from simpunifac.errors import (
    DocumentSyntaxError,
    GroupSemanticError,
    GroupTokenError,
    MissingCoefficientError,
    SerializationError,
)
from simpunifac.groups import decode_group, encode_group
from simpunifac.models import ComputationResult, MixtureRequest, SubstanceSpec
from simpunifac.thermo import ActivityModel

logger = logging.getLogger(__name__)

FORMATS = ("yaml", "json")


def _check_format(fmt: str) -> None:
    if fmt not in FORMATS:
        raise ValueError(f"Unknown document format: {fmt}")


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def load_document(text: str, fmt: str = "yaml") -> dict[str, Any]:
    """Parse document text into a plain mapping."""
    _check_format(fmt)
    try:
        if fmt == "json":
            content = json.loads(text)
        else:
            content = yaml.safe_load(text)
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise DocumentSyntaxError(f"Invalid {fmt.upper()} syntax in input document: {exc}") from exc

    if not isinstance(content, dict):
        raise DocumentSyntaxError("Input document must be a mapping with 'temperature' and 'substances'")
    return content


def _decode_substance(name: str, entry: Any, model: ActivityModel) -> SubstanceSpec:
    if not isinstance(entry, Mapping):
        raise DocumentSyntaxError(f"Substance {name} must be a mapping with 'fraction' and 'groups'")

    fraction = entry.get("fraction")
    if not _is_number(fraction):
        raise DocumentSyntaxError(f"Substance {name} needs a numeric 'fraction'")

    tokens = entry.get("groups")
    if not isinstance(tokens, list) or not all(isinstance(token, str) for token in tokens):
        raise DocumentSyntaxError(f"Substance {name} needs 'groups' as a list of quoted 'id:count' strings")

    groups = []
    for token in tokens:
        try:
            group = decode_group(token)
        except GroupTokenError as exc:
            raise GroupTokenError(
                f"Error parsing groups of substance {name}: {exc}", token=token, substance=name
            ) from exc
        try:
            resolved = model.make_group(group.id, group.count)
        except GroupSemanticError as exc:
            raise GroupSemanticError(
                f"Invalid group {token!r} in substance {name}: {exc}", token=token, substance=name
            ) from exc
        groups.append(replace(resolved, source=group.source))

    return SubstanceSpec(fraction=float(fraction), groups=tuple(groups))


def decode_document(raw: Mapping[str, Any], model: ActivityModel) -> MixtureRequest:
    """Validate a parsed document and build the mixture request.

    Decoding stops at the first substance, and within it at the first group
    token, that fails.
    """
    temperature = raw.get("temperature")
    if not _is_number(temperature):
        raise DocumentSyntaxError("Input document needs a numeric 'temperature'")

    entries = raw.get("substances")
    if not isinstance(entries, Mapping):
        raise DocumentSyntaxError("Input document needs 'substances' as a mapping of names")

    substances = {}
    for name, entry in entries.items():
        if not isinstance(name, str):
            raise DocumentSyntaxError(f"Substance name {name!r} must be a string; quote it in the document")
        substances[name] = _decode_substance(name, entry, model)

    total = sum(spec.fraction for spec in substances.values())
    if substances and not math.isclose(total, 1.0, rel_tol=1e-9, abs_tol=1e-9):
        logger.debug("Mole fractions sum to %s, not 1", total)
    logger.debug("Decoded %d substances at %s K", len(substances), temperature)

    return MixtureRequest(temperature=float(temperature), substances=substances)


def encode_result(result: ComputationResult) -> dict[str, Any]:
    """Map computed substances back to the document shape with ``gamma`` added."""
    substances = {}
    for substance in result.substances:
        if substance.gamma is None:
            raise MissingCoefficientError(
                f"Substance {substance.name} has no computed activity coefficient"
            )
        substances[substance.name] = {
            "fraction": float(substance.fraction),
            "groups": [encode_group(group) for group in substance.groups],
            "gamma": float(substance.gamma),
        }
    return {"temperature": float(result.temperature), "substances": substances}


def dump_document(document: Mapping[str, Any], fmt: str = "yaml") -> str:
    """Serialize an output document to text."""
    _check_format(fmt)
    try:
        if fmt == "json":
            return json.dumps(document, indent=2) + "\n"
        return yaml.safe_dump(document, sort_keys=False, default_flow_style=False)
    except (yaml.YAMLError, TypeError, ValueError) as exc:
        raise SerializationError(f"Could not serialize result: {exc}") from exc
