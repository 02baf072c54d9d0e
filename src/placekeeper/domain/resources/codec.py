"""Conversion between untyped documents and per-type resource models."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import ValidationError

from .errors import InvalidInputsError, InvalidOutputsError

if TYPE_CHECKING:
    from .schema import ResourceDocument
    from .types import Document, ResourceType


def _describe(exc: ValidationError) -> str:
    parts: list[str] = []
    for error in exc.errors(include_url=False):
        location = ".".join(str(part) for part in error["loc"]) or "<root>"
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)


def parse_inputs[M: ResourceDocument](
    resource_type: ResourceType, model: type[M], document: Document
) -> M:
    try:
        return model.model_validate(document)
    except ValidationError as exc:
        raise InvalidInputsError(resource_type, _describe(exc)) from exc


def parse_outputs[M: ResourceDocument](
    resource_type: ResourceType, model: type[M], document: Document
) -> M:
    try:
        return model.model_validate(document)
    except ValidationError as exc:
        raise InvalidOutputsError(resource_type, _describe(exc)) from exc


def dump_outputs(outputs: ResourceDocument) -> Document:
    return outputs.model_dump(mode="json", by_alias=True)
