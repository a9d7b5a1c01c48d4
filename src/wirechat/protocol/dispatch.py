"""Classify server payloads and drive their presentation."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import TYPE_CHECKING

from loguru import logger

from .tags import as_text, extract, iter_tag_values, section

if TYPE_CHECKING:
    from wirechat.cli.render import Renderer

COMMAND_HEADING = "Command Execution Result"
AI_HEADING = "AI Response"
SERVER_HEADING = "Server Response"


class ResponseKind(Enum):
    """How a payload is presented."""

    COMMAND_CLEAR = "command-clear"
    COMMAND_MODELS = "command-models"
    COMMAND_MODEL_CHANGE = "command-model-change"
    COMMAND_OTHER = "command-other"
    AI_REPLY = "ai-reply"
    GENERIC_XML = "generic-xml"
    PLAIN_TEXT = "plain-text"

    @property
    def is_command(self) -> bool:
        return self.name.startswith("COMMAND_")


_COMMAND_KINDS: tuple[tuple[str, ResponseKind], ...] = (
    ("<command>clear</command>", ResponseKind.COMMAND_CLEAR),
    ("<command>models</command>", ResponseKind.COMMAND_MODELS),
    ("<command>model_change</command>", ResponseKind.COMMAND_MODEL_CHANGE),
)


def classify(payload: str | bytes) -> ResponseKind:
    """Classify by literal substring presence; the first matching rule wins."""

    text = as_text(payload)
    if not text.startswith("<"):
        return ResponseKind.PLAIN_TEXT
    if "<response>" in text and "<type>command</type>" in text:
        for marker, kind in _COMMAND_KINDS:
            if marker in text:
                return kind
        return ResponseKind.COMMAND_OTHER
    if "<model>" in text and "<content>" in text:
        return ResponseKind.AI_REPLY
    return ResponseKind.GENERIC_XML


def render_response(payload: str | bytes, renderer: Renderer) -> ResponseKind:
    """Render one payload and finish with the next-input hint."""

    text = as_text(payload)
    kind = classify(text)
    logger.debug("dispatch.classified kind={} bytes={}", kind.value, len(payload))
    if kind.is_command:
        renderer.heading(COMMAND_HEADING)
    _HANDLERS[kind](text, renderer)
    renderer.next_input_hint()
    return kind


def _render_message(text: str, renderer: Renderer) -> None:
    message = extract(text, "message")
    if message is not None:
        renderer.line(message)


def _render_models(text: str, renderer: Renderer) -> None:
    current_model = extract(text, "current_model")
    if current_model is not None:
        renderer.line(f"Current model: {current_model}")

    available = section(text, "available_models")
    if available is not None:
        renderer.line("Available models:")
        for model in iter_tag_values(available, "model"):
            renderer.bullet(model)

    _render_message(text, renderer)


def _render_model_change(text: str, renderer: Renderer) -> None:
    message = extract(text, "message")
    if message is None:
        return
    if extract(text, "success") == "false":
        renderer.error(message)
    else:
        renderer.success(message)


def _render_raw(text: str, renderer: Renderer) -> None:
    renderer.verbatim(text)


def _render_ai_reply(text: str, renderer: Renderer) -> None:
    model = extract(text, "model")
    content = extract(text, "content")
    if model is None or content is None:
        _render_server_response(text, renderer)
        return
    renderer.heading(AI_HEADING)
    renderer.model_header(model)
    renderer.verbatim(content)


def _render_server_response(text: str, renderer: Renderer) -> None:
    renderer.heading(SERVER_HEADING)
    renderer.verbatim(text)


_HANDLERS: dict[ResponseKind, Callable[[str, Renderer], None]] = {
    ResponseKind.COMMAND_CLEAR: _render_message,
    ResponseKind.COMMAND_MODELS: _render_models,
    ResponseKind.COMMAND_MODEL_CHANGE: _render_model_change,
    ResponseKind.COMMAND_OTHER: _render_raw,
    ResponseKind.AI_REPLY: _render_ai_reply,
    ResponseKind.GENERIC_XML: _render_server_response,
    ResponseKind.PLAIN_TEXT: _render_server_response,
}
