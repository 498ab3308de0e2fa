"""
Exception hierarchy for aclcore.

All aclcore exceptions inherit from AclError, allowing callers to catch
every library error with a single except clause.

Exception Categories:
    - InvalidArgumentError: A caller passed a value of the wrong kind
    - InvalidRuleError: A rule argument or factory product is not a Rule
    - ConfigurationError: Settings could not be loaded or applied

Note that "not found" situations (unknown rule name, empty registry,
unmatched role or resource) are never errors. Evaluation simply yields
an empty or undecided result, which reduces to a denial.
"""

from dataclasses import dataclass, field
from typing import Any


# =============================================================================
# Error Codes
# =============================================================================

# Argument errors: 1xxx
ERROR_INVALID_ARGUMENT = 1001
ERROR_INVALID_RULE = 1002
ERROR_INVALID_RULE_FACTORY = 1003

# Configuration errors: 2xxx
ERROR_CONFIG_INVALID = 2001
ERROR_CONFIG_RULE_CLASS = 2002


# =============================================================================
# Base Exception
# =============================================================================


@dataclass
class AclError(Exception):
    """
    Base exception for all aclcore errors.

    Raised only for caller mistakes (a bad rule argument, an unusable
    rule factory, broken settings). Access denials are never exceptions;
    they are plain False results from Acl.is_allowed().

    Attributes:
        message: Human-readable error description
        code: Numeric error code for programmatic handling
        suggestion: Optional hint for how to resolve the error
        context: Optional dict with additional debugging info
    """

    message: str = ""
    code: int = 0
    suggestion: str | None = None
    context: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        """Format error for display."""
        parts = [f"[E{self.code}] {self.message}"]
        if self.suggestion:
            parts.append(f"\nSuggestion: {self.suggestion}")
        return "".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "code": self.code,
            "suggestion": self.suggestion,
            "context": self.context,
        }


# =============================================================================
# Argument Errors
# =============================================================================


@dataclass
class InvalidArgumentError(AclError):
    """
    Raised when an operation receives a value of an unsupported kind.

    Attributes:
        argument: Name of the offending parameter
        value_type: Type name of the value that was passed
    """

    argument: str = ""
    value_type: str = ""

    def __post_init__(self) -> None:
        """Set defaults after dataclass init."""
        if not self.message:
            self.message = f"Invalid value for {self.argument}: {self.value_type}"
        if self.code == 0:
            self.code = ERROR_INVALID_ARGUMENT
        self.context.update({
            "argument": self.argument,
            "value_type": self.value_type,
        })


@dataclass
class InvalidRuleError(InvalidArgumentError):
    """Raised when add_rule cannot resolve its rule argument to a Rule."""

    def __post_init__(self) -> None:
        """Set defaults after dataclass init."""
        if not self.argument:
            self.argument = "rule"
        if not self.message:
            self.message = f"Rule must be a Rule instance or a rule name, got {self.value_type}"
        if self.code == 0:
            self.code = ERROR_INVALID_RULE
        if not self.suggestion:
            self.suggestion = "Pass a Rule object or a string name, or fix the rule factory"
        super().__post_init__()


@dataclass
class InvalidRuleFactoryError(InvalidArgumentError):
    """Raised when a rule factory is not callable."""

    def __post_init__(self) -> None:
        """Set defaults after dataclass init."""
        if not self.argument:
            self.argument = "rule_class"
        if not self.message:
            self.message = f"Rule class must be callable, got {self.value_type}"
        if self.code == 0:
            self.code = ERROR_INVALID_RULE_FACTORY
        super().__post_init__()


# =============================================================================
# Configuration Errors
# =============================================================================


@dataclass
class ConfigurationError(AclError):
    """
    Raised when settings cannot be loaded or applied.

    Attributes:
        setting: The setting that failed, if known
    """

    setting: str | None = None

    def __post_init__(self) -> None:
        """Set defaults after dataclass init."""
        if self.code == 0:
            self.code = ERROR_CONFIG_INVALID
        self.context["setting"] = self.setting


@dataclass
class RuleClassImportError(ConfigurationError):
    """Raised when the configured rule_class cannot be imported."""

    path: str = ""
    underlying_error: str = ""

    def __post_init__(self) -> None:
        """Set defaults after dataclass init."""
        if not self.setting:
            self.setting = "rule_class"
        if not self.message:
            self.message = f"Cannot import rule class {self.path!r}: {self.underlying_error}"
        if self.code == 0:
            self.code = ERROR_CONFIG_RULE_CLASS
        if not self.suggestion:
            self.suggestion = "Use a dotted path such as 'package.module.ClassName'"
        super().__post_init__()
        self.context.update({
            "path": self.path,
            "underlying_error": self.underlying_error,
        })
