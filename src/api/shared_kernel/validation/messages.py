"""Localized message templates for validation failures."""

from __future__ import annotations

from shared_kernel.i18n import Language
from shared_kernel.validation.rules import RuleKind

VALIDATION_MESSAGES: dict[Language, dict[RuleKind, str]] = {
    Language.EN: {
        RuleKind.REQUIRED: "{label} is required.",
        RuleKind.MIN_LENGTH: "{label} must be at least {param} characters.",
        RuleKind.MAX_LENGTH: "{label} must be at most {param} characters.",
        RuleKind.NUMBER: "{label} must be a number.",
        RuleKind.DECIMAL: "{label} must be a decimal number.",
        RuleKind.EMAIL: "{label} must be a valid email address.",
        RuleKind.PHONE: "{label} must be a valid phone number.",
    },
    Language.AR: {
        RuleKind.REQUIRED: "الحقل {label} مطلوب.",
        RuleKind.MIN_LENGTH: "يجب أن يحتوي الحقل {label} على {param} أحرف على الأقل.",
        RuleKind.MAX_LENGTH: "يجب ألا يتجاوز الحقل {label} {param} حرفاً.",
        RuleKind.NUMBER: "يجب أن يكون الحقل {label} رقماً.",
        RuleKind.DECIMAL: "يجب أن يكون الحقل {label} رقماً عشرياً.",
        RuleKind.EMAIL: "يجب أن يكون الحقل {label} بريداً إلكترونياً صالحاً.",
        RuleKind.PHONE: "يجب أن يكون الحقل {label} رقم هاتف صالحاً.",
    },
}


def format_message(
    kind: RuleKind, language: Language, label: str, param: object = None
) -> str:
    """Render the message for a failed rule in the given language."""
    template = VALIDATION_MESSAGES[language].get(kind)
    if template is None:
        template = VALIDATION_MESSAGES[Language.EN][kind]
    return template.format(label=label, param=param)
