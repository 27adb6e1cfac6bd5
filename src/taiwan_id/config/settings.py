"""Unified settings — init kwargs, env vars, and code defaults in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — passed by the embedding application
  2. Env vars     — ``TAIWAN_ID_*`` prefix, ``__`` for nested sections
  3. Code defaults — baked into the section models
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings

from taiwan_id.config.models import GeneratorConfig


class TaiwanIdSettings(BaseSettings):
    """Settings for the ID service.

    Attributes:
        verbose: Enable DEBUG-level logging for ``taiwan_id`` loggers.
        log_json: Render log records as JSON lines.
        generator: Generator section.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "TAIWAN_ID_",
        "env_nested_delimiter": "__",
    }

    verbose: bool = False
    log_json: bool = False

    generator: GeneratorConfig = Field(default_factory=GeneratorConfig)
