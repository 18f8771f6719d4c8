"""Section parser for the interpreter's fixed-format plain-text response"""

from typing import Optional

from .prompt import RESPONSE_SECTIONS

SUMMARY_FALLBACK_CHARS = 500

_HEADINGS = {heading: key for heading, key, _ in RESPONSE_SECTIONS}


def _heading_of(line: str) -> Optional[str]:
    """Known heading on this line, tolerating markdown emphasis and a trailing colon."""
    candidate = line.strip().strip("#*").strip().rstrip(":").strip().upper()
    return candidate if candidate in _HEADINGS else None


def parse_interpretation(text: str) -> dict[str, str]:
    """
    Split an interpreter response into its labelled sections.

    Missing or empty sections take their fallback value; a missing
    interpretation summary falls back to the start of the raw text.
    """
    sections: dict[str, list[str]] = {}
    current: Optional[str] = None

    for line in text.splitlines():
        heading = _heading_of(line)
        if heading is not None:
            current = heading
            sections.setdefault(current, [])
        elif current is not None:
            sections[current].append(line)

    result = {}
    for heading, key, fallback in RESPONSE_SECTIONS:
        content = "\n".join(sections.get(heading, [])).strip()
        if not content:
            content = fallback if fallback is not None else text[:SUMMARY_FALLBACK_CHARS]
        result[key] = content
    return result
