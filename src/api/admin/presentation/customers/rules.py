"""Field labels and validation rules for customer payloads.

The rule table is kept in the dict form used across the admin screens
and compiled with ``parse_rules``.
"""

from __future__ import annotations

from functools import lru_cache

from shared_kernel.i18n import Language, LabelTable
from shared_kernel.validation import RuleSet, parse_rules

CUSTOMER_LABELS = LabelTable(
    {
        "full_name": {Language.EN: "Full Name", Language.AR: "الاسم الكامل"},
        "full_name_ar": {Language.EN: "Arabic Name", Language.AR: "الاسم العربي"},
        "email": {Language.EN: "Email", Language.AR: "البريد الإلكتروني"},
        "tenant_id": {Language.EN: "Tenant", Language.AR: "المنظمة"},
        "phone": {Language.EN: "Phone", Language.AR: "رقم الهاتف"},
        "branch_id": {Language.EN: "Branch", Language.AR: "الفرع"},
        "address": {Language.EN: "Address", Language.AR: "العنوان"},
        "address_ar": {Language.EN: "Arabic Address", Language.AR: "العنوان العربي"},
        "credit_limit": {Language.EN: "Credit Limit", Language.AR: "الحد الائتماني"},
    }
)


CUSTOMER_NUMERIC_COLUMNS = {"credit_limit": (12, 2)}


def _rule_table(language: Language, email_required: bool) -> RuleSet:
    def label(field: str) -> str:
        return CUSTOMER_LABELS(field, language)

    return parse_rules(
        {
            "full_name": [
                {"required": True, "label": label("full_name")},
                {"minLength": 3, "maxLength": 200, "label": label("full_name")},
            ],
            "full_name_ar": [
                {"required": False, "label": label("full_name_ar")},
                {"minLength": 3, "maxLength": 200, "label": label("full_name_ar")},
            ],
            "email": [
                {"required": email_required, "type": "email", "label": label("email")},
                {"maxLength": 255, "label": label("email")},
            ],
            "tenant_id": [
                {"required": True, "type": "number", "label": label("tenant_id")},
            ],
            "branch_id": [
                {"required": False, "type": "number", "label": label("branch_id")},
            ],
            "phone": [
                {"required": False, "phone": True, "label": label("phone")},
                {"maxLength": 30, "label": label("phone")},
            ],
            "address": [
                {"required": False, "maxLength": 255, "label": label("address")},
            ],
            "address_ar": [
                {"required": False, "maxLength": 255, "label": label("address_ar")},
            ],
            "credit_limit": [
                {"required": False, "type": "number", "label": label("credit_limit")},
            ],
        }
    )


@lru_cache
def customer_rules(language: Language) -> RuleSet:
    """Rules for ``POST /customers`` with labels in ``language``."""
    return _rule_table(language, email_required=True)


@lru_cache
def customer_update_rules(language: Language) -> RuleSet:
    """Rules for ``PUT /customers/{id}``; the email may be left out."""
    return _rule_table(language, email_required=False)
