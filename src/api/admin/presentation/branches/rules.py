"""Field labels and validation rules for branch payloads."""

from __future__ import annotations

from functools import lru_cache

from shared_kernel.i18n import Language, LabelTable
from shared_kernel.validation import RuleSet, ValidationRule

BRANCH_LABELS = LabelTable(
    {
        "tenant_id": {Language.EN: "Tenant", Language.AR: "المنظمة"},
        "name": {Language.EN: "Branch Name", Language.AR: "اسم الفرع"},
        "name_ar": {Language.EN: "Arabic Branch Name", Language.AR: "اسم الفرع بالعربي"},
        "address": {Language.EN: "Address", Language.AR: "العنوان"},
        "address_ar": {Language.EN: "Arabic Address", Language.AR: "العنوان بالعربي"},
        "latitude": {Language.EN: "Latitude", Language.AR: "خط العرض"},
        "longitude": {Language.EN: "Longitude", Language.AR: "خط الطول"},
    }
)


# (precision, scale) of the NUMERIC columns behind numeric fields
BRANCH_NUMERIC_COLUMNS = {"latitude": (10, 7), "longitude": (10, 7)}


def _bounded(
    field: str, language: Language, low: int, high: int, required: bool
) -> tuple[ValidationRule, ...]:
    label = BRANCH_LABELS(field, language)
    return (
        ValidationRule.required(label, enabled=required),
        ValidationRule.min_length(low, label),
        ValidationRule.max_length(high, label),
    )


def _coordinate(field: str, language: Language) -> tuple[ValidationRule, ...]:
    label = BRANCH_LABELS(field, language)
    return (ValidationRule.optional(label), ValidationRule.decimal(label))


@lru_cache
def branch_rules(language: Language) -> RuleSet:
    """Rules for ``POST /branches`` with labels in ``language``."""
    return {
        "name": _bounded("name", language, 3, 200, required=True),
        "name_ar": _bounded("name_ar", language, 3, 200, required=False),
        "tenant_id": (
            ValidationRule.required(BRANCH_LABELS("tenant_id", language)),
            ValidationRule.number(BRANCH_LABELS("tenant_id", language)),
        ),
        "address": _bounded("address", language, 3, 255, required=False),
        "address_ar": _bounded("address_ar", language, 3, 255, required=False),
        "latitude": _coordinate("latitude", language),
        "longitude": _coordinate("longitude", language),
    }
