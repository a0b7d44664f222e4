"""Configuration for formatting calls.

This module provides options that tighten argument checking and control
observability of a ``RuntimeFormatter``.
"""

from pydantic import BaseModel
from pydantic import Field


class FormatConfig(BaseModel):
    """Configuration for formatting calls.

    Attributes:
        require_all_arguments: Whether every positional argument and every
            name-table entry must be used by some placeholder. Unused arguments
            raise UnusedArgumentError. Default is False.
        max_count: Optional upper bound on any resolved width or precision.
            Larger counts raise InvalidCountError. None means unbounded.
        trace_calls: Whether to emit an OpenTelemetry span per formatting call.
            Default is True.

    """

    model_config = {"frozen": True}

    require_all_arguments: bool = Field(default=False)
    max_count: int | None = Field(default=None, ge=0)
    trace_calls: bool = Field(default=True)
