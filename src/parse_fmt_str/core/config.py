"""Parse configuration.

This module provides the options that tune how strictly templates are read
and whether parsing is traced.
"""

from pydantic import BaseModel
from pydantic import Field


class ParseConfig(BaseModel):
    """Configuration for template parsing.

    Attributes:
        strict_precision: Whether a ``.`` with no precision after it is an
            error. Default is False, which drops the ``.`` silently.
        trace_parsing: Whether to open an OpenTelemetry span for every
            template parse. Default is True.
        max_template_length: Optional upper bound on template length in
            characters. None means no limit.

    """

    model_config = {"frozen": True}

    strict_precision: bool = Field(default=False)
    trace_parsing: bool = Field(default=True)
    max_template_length: int | None = Field(
        default=None,
        ge=1,
        description="Templates longer than this are rejected before scanning",
    )


DEFAULT_CONFIG = ParseConfig()
