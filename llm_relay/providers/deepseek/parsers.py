from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator


class ChatCompletionMessage(BaseModel):
    model_config = ConfigDict(extra="ignore")

    # Left untyped: non-string content is reported as empty, not as a decode error
    content: Any = None


class ChatCompletionChoice(BaseModel):
    model_config = ConfigDict(extra="ignore")

    message: Optional[ChatCompletionMessage] = None

    @field_validator("message", mode="before")
    @classmethod
    def object_or_none(cls, v: Any) -> Any:
        return v if isinstance(v, (dict, BaseModel)) else None


class ChatCompletionBody(BaseModel):
    """Decoded chat-completions response; every field is optional."""
    model_config = ConfigDict(extra="ignore")

    model: Optional[str] = None
    choices: List[ChatCompletionChoice] = []

    @field_validator("model", mode="before")
    @classmethod
    def text_or_none(cls, v: Any) -> Any:
        return v if isinstance(v, str) and v else None

    @field_validator("choices", mode="before")
    @classmethod
    def list_of_objects(cls, v: Any) -> Any:
        if not isinstance(v, list):
            return []
        return [choice if isinstance(choice, (dict, BaseModel)) else {} for choice in v]


def decode_chat_completion(body: Any) -> ChatCompletionBody:
    """Decode a chat-completions body. Anything unrecognisable decodes as empty."""
    if not isinstance(body, dict):
        return ChatCompletionBody()
    try:
        return ChatCompletionBody.model_validate(body)
    except ValidationError:
        return ChatCompletionBody()


def extract_chat_content(body: ChatCompletionBody) -> Optional[str]:
    """Return the first choice's message content, or None when it is missing or blank."""
    if not body.choices or body.choices[0].message is None:
        return None
    content = body.choices[0].message.content
    if not isinstance(content, str) or not content.strip():
        return None
    return content
