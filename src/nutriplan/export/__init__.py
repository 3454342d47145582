"""Output formatters and plan prompt rendering."""

from nutriplan.export.formatters import (
    JSONFormatter,
    MarkdownFormatter,
    TableFormatter,
    format_plan,
)
from nutriplan.export.llm_prompt import SYSTEM_PROMPT, build_plan_prompt

__all__ = [
    "JSONFormatter",
    "MarkdownFormatter",
    "SYSTEM_PROMPT",
    "TableFormatter",
    "build_plan_prompt",
    "format_plan",
]
