"""Serialization of the summary and scenarios for the interpreter"""

from datetime import datetime, timezone
from typing import Any, Optional

import orjson

from ..models.analysis import ScenarioBundle
from ..models.summary import StructuredSummary
from ..summary.schema import SUMMARY_SCHEMA, get_field, summary_to_dict
from .prompt import SYSTEM_PROMPT

USER_PROMPT_PREFIX = (
    "Analyze the following structured market summary with multi-timeframe data and scenarios:\n\n"
)


def build_payload(summary: StructuredSummary, scenarios: ScenarioBundle) -> dict[str, Any]:
    """Summary plus scenarios keyed by the field names the prompt expects."""
    payload = summary_to_dict(summary)
    payload["scenarios"] = scenarios.to_dict()
    return payload


def serialize_payload(payload: dict[str, Any]) -> str:
    """Indented JSON text of an interpreter payload."""
    return orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode()


def build_messages(summary: StructuredSummary, scenarios: ScenarioBundle) -> list[dict[str, str]]:
    """System and user chat messages for the interpreter."""
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": USER_PROMPT_PREFIX + serialize_payload(build_payload(summary, scenarios))},
    ]


def format_summary_text(
    summary: StructuredSummary,
    symbol: str,
    generated_at: Optional[datetime] = None,
) -> str:
    """Plain-text rendering of the summary, grouped like the JSON payload."""
    generated_at = generated_at or datetime.now(timezone.utc)

    lines = []
    current_group = None
    for field in SUMMARY_SCHEMA:
        if field.wire_group != current_group:
            if current_group is not None:
                lines.append("")
            lines.append(f"{field.wire_group}:")
            current_group = field.wire_group
        lines.append(f"- {field.wire_name}: {get_field(summary, field)}")

    lines.append("")
    lines.append("notes:")
    lines.extend(f"- {note}" for note in summary.notes)
    lines.append("")
    lines.append(f"Symbol: {symbol}")
    lines.append(f"Generated: {generated_at.isoformat()}")
    return "\n".join(lines)
