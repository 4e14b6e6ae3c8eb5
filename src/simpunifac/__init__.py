"""SimpUNIFAC core package."""

__version__ = "0.1.0"

from simpunifac.document import decode_document, dump_document, encode_result, load_document
from simpunifac.groups import decode_group, encode_group
from simpunifac.models import ComputationResult, GroupToken, MixtureRequest, Substance
from simpunifac.pipeline import Pipeline, invoke_model
from simpunifac.thermo import IdealSolutionModel, UNIFACModel

__all__ = [
    "decode_document",
    "dump_document",
    "encode_result",
    "load_document",
    "decode_group",
    "encode_group",
    "ComputationResult",
    "GroupToken",
    "MixtureRequest",
    "Substance",
    "Pipeline",
    "invoke_model",
    "IdealSolutionModel",
    "UNIFACModel",
]
