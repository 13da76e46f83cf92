"""Response language dependency."""

from typing import Annotated

from fastapi import Header

from shared_kernel.i18n import Language, resolve_language


def get_language(
    accept_language: Annotated[str | None, Header()] = None,
) -> Language:
    """Resolve the response language from the Accept-Language header.

    Returns:
        Language.AR when the header starts with ``ar``, else Language.EN
    """
    return resolve_language(accept_language)
