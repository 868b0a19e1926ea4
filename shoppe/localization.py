"""Mapping from a stored language code to the effective UI locale."""

from typing import Dict

DEFAULT_LANGUAGE_CODE = "en"

# Display names of the supported locales
SUPPORTED_LANGUAGES: Dict[str, str] = {
    "en": "English",
    "ar": "Arabic",
}


def resolve_locale(language_code: str) -> str:
    """
    Resolve a stored language code to a supported locale.

    Args:
        language_code: Code read from preferences; may be empty or unknown

    Returns:
        ``"ar"`` for Arabic, ``"en"`` for anything else
    """
    code = (language_code or "").strip().lower()
    return code if code in SUPPORTED_LANGUAGES else DEFAULT_LANGUAGE_CODE


def language_name(language_code: str) -> str:
    """Display name of the locale ``language_code`` resolves to."""
    return SUPPORTED_LANGUAGES[resolve_locale(language_code)]
