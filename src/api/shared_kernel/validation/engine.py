"""Evaluation of rule sets against request payloads.

``validate_fields`` is a pure function: it never logs, never raises for
bad input, and always visits every field of the rule set so that the
caller gets the complete error map in one pass.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Callable, Mapping, Sequence

from shared_kernel.i18n import Language
from shared_kernel.validation.messages import format_message
from shared_kernel.validation.rules import RuleKind, RuleSet, ValidationRule

_NUMBER_RE = re.compile(r"[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")
_DECIMAL_RE = re.compile(r"[+-]?(\d+(\.\d+)?|\.\d+)")
_EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
_PHONE_RE = re.compile(r"\+?[0-9\s\-()]{7,20}")


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a payload.

    ``valid`` is derived from ``errors`` so the two can never disagree.
    ``errors`` maps field name to a localized message and is used as-is
    as the HTTP 400 body.
    """

    errors: dict[str, str] = field(default_factory=dict)

    @property
    def valid(self) -> bool:
        return not self.errors


def _is_empty(value: Any) -> bool:
    return value is None or value == ""


def _is_finite_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, float):
        return math.isfinite(value)
    return False


def _check_number(value: Any, _: Any) -> bool:
    if isinstance(value, str):
        text = value.strip()
        return bool(_NUMBER_RE.fullmatch(text)) and math.isfinite(float(text))
    return _is_finite_number(value)


def _check_decimal(value: Any, _: Any) -> bool:
    if isinstance(value, str):
        return bool(_DECIMAL_RE.fullmatch(value.strip()))
    return _is_finite_number(value)


def _check_email(value: Any, _: Any) -> bool:
    return isinstance(value, str) and bool(_EMAIL_RE.fullmatch(value))


def _check_phone(value: Any, enabled: Any) -> bool:
    if not enabled:
        return True
    if isinstance(value, int) and not isinstance(value, bool):
        value = str(value)
    return isinstance(value, str) and bool(_PHONE_RE.fullmatch(value.strip()))


def _check_min_length(value: Any, bound: Any) -> bool:
    return not isinstance(value, str) or len(value) >= bound


def _check_max_length(value: Any, bound: Any) -> bool:
    return not isinstance(value, str) or len(value) <= bound


_CHECKS: dict[RuleKind, Callable[[Any, Any], bool]] = {
    RuleKind.MIN_LENGTH: _check_min_length,
    RuleKind.MAX_LENGTH: _check_max_length,
    RuleKind.NUMBER: _check_number,
    RuleKind.DECIMAL: _check_decimal,
    RuleKind.EMAIL: _check_email,
    RuleKind.PHONE: _check_phone,
}


def _label_for(
    rule: ValidationRule, rules: Sequence[ValidationRule], field_name: str
) -> str:
    if rule.label:
        return rule.label
    for other in rules:
        if other.label:
            return other.label
    return field_name


def _first_error(
    field_name: str,
    value: Any,
    rules: Sequence[ValidationRule],
    language: Language,
) -> str | None:
    if _is_empty(value):
        for rule in rules:
            if rule.is_required:
                return format_message(
                    RuleKind.REQUIRED, language, _label_for(rule, rules, field_name)
                )
        return None

    for rule in rules:
        if rule.kind is RuleKind.REQUIRED:
            continue
        if not _CHECKS[rule.kind](value, rule.param):
            return format_message(
                rule.kind, language, _label_for(rule, rules, field_name), rule.param
            )
    return None


def validate_fields(
    payload: Mapping[str, Any] | None,
    rule_set: RuleSet,
    language: Language | str | None = None,
) -> ValidationResult:
    """Validate ``payload`` against ``rule_set``.

    Args:
        payload: Field name to raw value. Missing keys count as absent.
        rule_set: Field name to ordered rules.
        language: Message language code; unknown codes fall back to English.

    Returns:
        ValidationResult with one message per failing field.
    """
    lang = Language.coerce(language)
    data = payload or {}
    errors: dict[str, str] = {}

    for field_name, rules in rule_set.items():
        message = _first_error(field_name, data.get(field_name), rules, lang)
        if message is not None:
            errors[field_name] = message

    return ValidationResult(errors=errors)
