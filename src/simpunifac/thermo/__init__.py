from .base import ActivityModel
from .ideal import IdealSolutionModel
from .unifac import UNIFACModel

MODELS = {
    UNIFACModel.name: UNIFACModel,
    IdealSolutionModel.name: IdealSolutionModel,
}

__all__ = ["ActivityModel", "IdealSolutionModel", "UNIFACModel", "MODELS"]
