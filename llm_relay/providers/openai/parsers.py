from __future__ import annotations

from typing import Any, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

OUTPUT_TEXT = "output_text"


def _objects_only(value: Any) -> list:
    """Keep the mappings (or already-decoded models) of a list, in order; a non-list yields []."""
    if not isinstance(value, list):
        return []
    return [entry for entry in value if isinstance(entry, (dict, BaseModel))]


class OutputSegment(BaseModel):
    """One content segment of an output item, e.g. ``{"type": "output_text", "text": "..."}``."""
    model_config = ConfigDict(extra="ignore")

    type: Optional[str] = None
    text: Optional[str] = None

    @field_validator("type", "text", mode="before")
    @classmethod
    def text_or_none(cls, v: Any) -> Any:
        return v if isinstance(v, str) else None

    @property
    def is_output_text(self) -> bool:
        return self.type == OUTPUT_TEXT and self.text is not None


class OutputItem(BaseModel):
    """One entry of the response's ``output`` array (message, reasoning, tool call...)."""
    model_config = ConfigDict(extra="ignore")

    content: List[OutputSegment] = []

    @field_validator("content", mode="before")
    @classmethod
    def segments(cls, v: Any) -> Any:
        return _objects_only(v)


class ResponsesBody(BaseModel):
    """Decoded Responses API body; every field is optional."""
    model_config = ConfigDict(extra="ignore")

    model: Optional[str] = None
    output: List[OutputItem] = []

    @field_validator("model", mode="before")
    @classmethod
    def text_or_none(cls, v: Any) -> Any:
        return v if isinstance(v, str) and v else None

    @field_validator("output", mode="before")
    @classmethod
    def output_items(cls, v: Any) -> Any:
        return _objects_only(v)


def decode_responses_body(body: Any) -> ResponsesBody:
    """Decode a Responses API body. Anything unrecognisable decodes as empty."""
    if not isinstance(body, dict):
        return ResponsesBody()
    try:
        return ResponsesBody.model_validate(body)
    except ValidationError:
        return ResponsesBody()


def flatten_output_text(output: Sequence[OutputItem]) -> str:
    """Join every ``output_text`` segment of every item with newlines, in emission order.

    >>> flatten_output_text(decode_responses_body({"output": [
    ...     {"content": [{"type": "output_text", "text": "A"}]},
    ...     {"content": [{"type": "other"}]},
    ...     {"content": [{"type": "output_text", "text": "B"}]},
    ... ]}).output)
    'A\\nB'
    """
    texts = [
        segment.text
        for item in output
        for segment in item.content
        if segment.is_output_text
    ]
    return "\n".join(texts).strip()
