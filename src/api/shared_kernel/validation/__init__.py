"""Declarative request field validation.

Routes describe their fields as rule sets and run them through
``validate_fields`` before touching storage.
"""

from shared_kernel.validation.engine import ValidationResult, validate_fields
from shared_kernel.validation.rules import (
    MisconfiguredRuleError,
    RuleKind,
    RuleSet,
    ValidationRule,
    parse_rule,
    parse_rules,
)

__all__ = [
    "MisconfiguredRuleError",
    "RuleKind",
    "RuleSet",
    "ValidationResult",
    "ValidationRule",
    "parse_rule",
    "parse_rules",
    "validate_fields",
]
