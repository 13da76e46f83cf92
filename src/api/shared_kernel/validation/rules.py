"""Declarative field validation rules.

A rule is one of a closed set of kinds, each carrying its own typed
parameter. Rules for a field form an ordered sequence; the engine reports
the first one that fails.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Mapping, Sequence


class MisconfiguredRuleError(ValueError):
    """Raised when a rule definition is malformed.

    This is a programming error in a route's rule table, never a user
    input error, so it is raised while the rule set is being built.
    """

    pass


class RuleKind(StrEnum):
    """Kinds of validation rule."""

    REQUIRED = "required"
    MIN_LENGTH = "min_length"
    MAX_LENGTH = "max_length"
    NUMBER = "number"
    DECIMAL = "decimal"
    EMAIL = "email"
    PHONE = "phone"


_BOOL_PARAM_KINDS = frozenset({RuleKind.REQUIRED, RuleKind.PHONE})
_LENGTH_KINDS = frozenset({RuleKind.MIN_LENGTH, RuleKind.MAX_LENGTH})


@dataclass(frozen=True)
class ValidationRule:
    """A single validation constraint on one field.

    Attributes:
        kind: The rule kind.
        param: Kind-specific parameter. ``bool`` for required/phone,
            a non-negative ``int`` for the length bounds, ``None`` otherwise.
        label: Human-readable field label used in the error message.
    """

    kind: RuleKind
    param: bool | int | None = None
    label: str | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.kind, RuleKind):
            raise MisconfiguredRuleError(f"Unknown rule kind: {self.kind!r}")

        if self.kind in _BOOL_PARAM_KINDS:
            if not isinstance(self.param, bool):
                raise MisconfiguredRuleError(
                    f"Rule '{self.kind}' requires a boolean parameter, "
                    f"got {self.param!r}"
                )
        elif self.kind in _LENGTH_KINDS:
            if (
                isinstance(self.param, bool)
                or not isinstance(self.param, int)
                or self.param < 0
            ):
                raise MisconfiguredRuleError(
                    f"Rule '{self.kind}' requires a non-negative integer, "
                    f"got {self.param!r}"
                )
        elif self.param is not None:
            raise MisconfiguredRuleError(f"Rule '{self.kind}' takes no parameter")

    @classmethod
    def required(cls, label: str | None = None, enabled: bool = True) -> ValidationRule:
        return cls(RuleKind.REQUIRED, enabled, label)

    @classmethod
    def optional(cls, label: str | None = None) -> ValidationRule:
        return cls(RuleKind.REQUIRED, False, label)

    @classmethod
    def min_length(cls, length: int, label: str | None = None) -> ValidationRule:
        return cls(RuleKind.MIN_LENGTH, length, label)

    @classmethod
    def max_length(cls, length: int, label: str | None = None) -> ValidationRule:
        return cls(RuleKind.MAX_LENGTH, length, label)

    @classmethod
    def number(cls, label: str | None = None) -> ValidationRule:
        return cls(RuleKind.NUMBER, None, label)

    @classmethod
    def decimal(cls, label: str | None = None) -> ValidationRule:
        return cls(RuleKind.DECIMAL, None, label)

    @classmethod
    def email(cls, label: str | None = None) -> ValidationRule:
        return cls(RuleKind.EMAIL, None, label)

    @classmethod
    def phone(cls, label: str | None = None, enabled: bool = True) -> ValidationRule:
        return cls(RuleKind.PHONE, enabled, label)

    @property
    def is_required(self) -> bool:
        """True for an enabled ``required`` rule."""
        return self.kind is RuleKind.REQUIRED and self.param is True


RuleSet = Mapping[str, Sequence[ValidationRule]]


# Keys accepted in the dict form of a rule definition
_TYPE_KINDS = {
    "number": RuleKind.NUMBER,
    "decimal": RuleKind.DECIMAL,
    "email": RuleKind.EMAIL,
    "phone": RuleKind.PHONE,
}
_KEY_KINDS = {
    "required": RuleKind.REQUIRED,
    "minLength": RuleKind.MIN_LENGTH,
    "min_length": RuleKind.MIN_LENGTH,
    "maxLength": RuleKind.MAX_LENGTH,
    "max_length": RuleKind.MAX_LENGTH,
    "phone": RuleKind.PHONE,
}


def parse_rule(definition: Mapping[str, Any]) -> list[ValidationRule]:
    """Build rules from one dict definition.

    A single dict may combine several constraints, for example
    ``{"required": False, "type": "email", "label": "Email"}``; they are
    expanded in key order, all sharing the same label.

    Raises:
        MisconfiguredRuleError: On unknown keys, unknown types or bad parameters.
    """
    label = definition.get("label")
    rules: list[ValidationRule] = []

    for key, value in definition.items():
        if key == "label":
            continue
        if key == "type":
            kind = _TYPE_KINDS.get(value)
            if kind is None:
                raise MisconfiguredRuleError(f"Unknown rule type: {value!r}")
            param = True if kind is RuleKind.PHONE else None
            rules.append(ValidationRule(kind, param, label))
        elif key in _KEY_KINDS:
            rules.append(ValidationRule(_KEY_KINDS[key], value, label))
        else:
            raise MisconfiguredRuleError(f"Unknown rule key: {key!r}")

    if not rules:
        raise MisconfiguredRuleError(
            f"Rule definition has no constraint: {definition!r}"
        )
    return rules


def parse_rules(
    definitions: Mapping[str, Sequence[Mapping[str, Any]]],
) -> dict[str, tuple[ValidationRule, ...]]:
    """Build a rule set from the dict form used in route rule tables."""
    rule_set: dict[str, tuple[ValidationRule, ...]] = {}
    for field_name, field_definitions in definitions.items():
        rules: list[ValidationRule] = []
        for definition in field_definitions:
            rules.extend(parse_rule(definition))
        rule_set[field_name] = tuple(rules)
    return rule_set
