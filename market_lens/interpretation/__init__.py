"""
Interpreter hand-off module.

Fixed instruction prompt, payload serialization for the external language
model and a section parser for its fixed-format response. Calling the model
is the orchestrator's job.
"""

from .payload import build_messages, build_payload, format_summary_text, serialize_payload
from .prompt import RESPONSE_SECTIONS, SYSTEM_PROMPT
from .response import parse_interpretation

__all__ = [
    "RESPONSE_SECTIONS",
    "SYSTEM_PROMPT",
    "build_messages",
    "build_payload",
    "format_summary_text",
    "parse_interpretation",
    "serialize_payload",
]
