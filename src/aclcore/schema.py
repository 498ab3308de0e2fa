"""
Configuration models for aclcore.

AclSettings captures the handful of knobs an embedding application may
want to keep outside of code:
- rule_class: dotted path of the Rule subclass used when add_rule() is
  given a plain rule name
- log_level / log_format: how aclcore's structlog output is rendered

Design Decisions:
    - Settings are immutable (frozen=True) and reject unknown keys
    - rule_class is resolved once, when an Acl is built from settings,
      never lazily at add_rule() time
    - An empty YAML document yields the defaults
"""

import importlib
from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from aclcore.errors import RuleClassImportError


DEFAULT_RULE_CLASS = "aclcore.rule.Rule"


class LogLevel(str, Enum):
    """Log levels accepted in settings."""

    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class LogFormat(str, Enum):
    """Renderer used for log output."""

    CONSOLE = "console"
    JSON = "json"


class AclSettings(BaseModel):
    """
    Settings for building an Acl.

    Attributes:
        rule_class: Dotted path to the Rule class used for named rules
        log_level: Minimum level for aclcore log events
        log_format: Console (human-readable) or JSON output
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    rule_class: str = Field(
        default=DEFAULT_RULE_CLASS,
        description="Dotted path of the Rule class used for named rules",
        min_length=1,
    )
    log_level: LogLevel = Field(
        default=LogLevel.WARNING,
        description="Minimum level for aclcore log events",
    )
    log_format: LogFormat = Field(
        default=LogFormat.CONSOLE,
        description="Log renderer",
    )

    @field_validator("rule_class")
    @classmethod
    def validate_rule_class_format(cls, v: str) -> str:
        """Require a module path and an attribute name."""
        module_path, _, attr = v.rpartition(".")
        if not module_path or not attr:
            msg = f"rule_class must be a dotted path, got: {v}"
            raise ValueError(msg)
        for part in v.split("."):
            if not part.isidentifier():
                msg = f"Invalid rule_class path: {v}"
                raise ValueError(msg)
        return v


def import_rule_class(path: str) -> Any:
    """
    Import the object named by a dotted path.

    Raises:
        RuleClassImportError: If the module or attribute does not exist
    """
    module_path, _, attr = path.rpartition(".")
    try:
        module = importlib.import_module(module_path)
    except ImportError as e:
        raise RuleClassImportError(path=path, underlying_error=str(e)) from e

    try:
        return getattr(module, attr)
    except AttributeError as e:
        raise RuleClassImportError(path=path, underlying_error=str(e)) from e


# =============================================================================
# YAML Loading Helpers
# =============================================================================


def load_settings(path: Path | str) -> AclSettings:
    """
    Load settings from a YAML file.

    Args:
        path: Path to the YAML file

    Returns:
        Validated AclSettings object

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValidationError: If the YAML doesn't match the schema
    """
    path = Path(path)
    with path.open() as f:
        data = yaml.safe_load(f)

    return AclSettings.model_validate(data or {})


def load_settings_from_string(content: str) -> AclSettings:
    """Load settings from a YAML string."""
    data = yaml.safe_load(content)
    return AclSettings.model_validate(data or {})
