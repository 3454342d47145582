"""Agent interface: JSON envelopes and contract schemas."""

from __future__ import annotations

from nutriplan.agent.response import (
    Envelope,
    error_envelope,
    plan_envelope,
    targets_envelope,
    template_envelope,
    templates_envelope,
    validation_envelope,
)
from nutriplan.agent.schema import get_plan_schema, get_restriction_list

__all__ = [
    "Envelope",
    "error_envelope",
    "get_plan_schema",
    "get_restriction_list",
    "plan_envelope",
    "targets_envelope",
    "template_envelope",
    "templates_envelope",
    "validation_envelope",
]
