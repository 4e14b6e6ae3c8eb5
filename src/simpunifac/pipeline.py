"""Decode, compute and encode a mixture document in one pass."""

from __future__ import annotations

import logging
from enum import Enum

from simpunifac.document import decode_document, dump_document, encode_result, load_document
from simpunifac.errors import ModelError, SimpUnifacError
from simpunifac.models import ComputationResult, MixtureRequest
from simpunifac.thermo import ActivityModel

logger = logging.getLogger(__name__)


class PipelineState(Enum):
    PENDING = "pending"
    DECODED = "decoded"
    COMPUTED = "computed"
    ENCODED = "encoded"
    FAILED = "failed"


def invoke_model(request: MixtureRequest, model: ActivityModel) -> ComputationResult:
    """Hand the decoded mixture to the activity model.

    ``ModelError`` passes through untouched; any other exception raised by the
    model is reported as a ``ModelError``. Nothing is retried.
    """
    substances = [
        model.make_substance(name, spec.fraction, spec.groups)
        for name, spec in request.substances.items()
    ]
    try:
        computed = model.compute(substances, request.temperature)
    except ModelError:
        raise
    except Exception as exc:
        raise ModelError(f"{model.name} model failed: {exc}") from exc
    return ComputationResult(temperature=request.temperature, substances=tuple(computed))


class Pipeline:
    """One run of the document pipeline.

    The state only moves forward: ``PENDING -> DECODED -> COMPUTED -> ENCODED``.
    A failure in any stage leaves the run in ``FAILED`` with the error kept on
    :attr:`error` and re-raised to the caller.
    """

    def __init__(self, model: ActivityModel):
        self.model = model
        self.state = PipelineState.PENDING
        self.error: SimpUnifacError | None = None

    def run(self, text: str, fmt: str = "yaml") -> str:
        if self.state is not PipelineState.PENDING:
            raise RuntimeError(f"Pipeline already ran (state: {self.state.value})")
        try:
            request = decode_document(load_document(text, fmt), self.model)
            self.state = PipelineState.DECODED

            result = invoke_model(request, self.model)
            self.state = PipelineState.COMPUTED

            output = dump_document(encode_result(result), fmt)
            self.state = PipelineState.ENCODED
        except SimpUnifacError as exc:
            logger.debug("Pipeline failed after state %s: %s", self.state.value, exc)
            self.state = PipelineState.FAILED
            self.error = exc
            raise
        return output
