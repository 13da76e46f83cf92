"""Field labels and validation rules for product payloads."""

from __future__ import annotations

from functools import lru_cache

from shared_kernel.i18n import Language, LabelTable
from shared_kernel.validation import RuleSet, ValidationRule

PRODUCT_LABELS = LabelTable(
    {
        "tenant_id": {Language.EN: "Tenant", Language.AR: "المنظمة"},
        "sku": {Language.EN: "SKU", Language.AR: "رمز SKU"},
        "product_name": {Language.EN: "Product Name", Language.AR: "اسم المنتج"},
        "product_name_ar": {
            Language.EN: "Product Name (Arabic)",
            Language.AR: "اسم المنتج بالعربية",
        },
        "category": {Language.EN: "Category", Language.AR: "الفئة"},
        "category_ar": {Language.EN: "Category (Arabic)", Language.AR: "الفئة بالعربية"},
        "barcode": {Language.EN: "Barcode", Language.AR: "الباركود"},
        "base_price": {Language.EN: "Base Price", Language.AR: "السعر الأساسي"},
    }
)


PRODUCT_NUMERIC_COLUMNS = {"base_price": (12, 2)}


def _text_field(
    field: str, language: Language, min_length: int, max_length: int
) -> tuple[ValidationRule, ...]:
    label = PRODUCT_LABELS(field, language)
    return (
        ValidationRule.required(label),
        ValidationRule.min_length(min_length, label),
        ValidationRule.max_length(max_length, label),
    )


@lru_cache
def product_rules(language: Language) -> RuleSet:
    """Rules for creating and editing a product, labelled in ``language``.

    Maximum lengths follow the column sizes.
    """
    return {
        "tenant_id": (
            ValidationRule.required(PRODUCT_LABELS("tenant_id", language)),
            ValidationRule.number(PRODUCT_LABELS("tenant_id", language)),
        ),
        "sku": _text_field("sku", language, 1, 100),
        "product_name": _text_field("product_name", language, 2, 255),
        "product_name_ar": _text_field("product_name_ar", language, 2, 255),
        "category": _text_field("category", language, 2, 150),
        "category_ar": _text_field("category_ar", language, 2, 150),
        "barcode": _text_field("barcode", language, 2, 100),
        "base_price": (
            ValidationRule.required(PRODUCT_LABELS("base_price", language)),
            ValidationRule.number(PRODUCT_LABELS("base_price", language)),
        ),
    }
