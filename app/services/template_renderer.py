"""
Placeholder substitution for the checkout build templates.

A placeholder is a ``{{name}}`` token, optionally wrapped in double quotes.
Quotes are consumed along with the token, so ``"{{hideEmailStep}}"`` renders
as a bare ``true`` while an unquoted ``{{primary}}`` drops a CSS value in
place.
"""

import re
from typing import Any, Mapping

PLACEHOLDER_PATTERN = re.compile(r'"?\{\{([A-Za-z0-9_]+?)\}\}"?')

MISSING_VALUE = "false"


def _stringify(value: Any) -> str:
    if value is True:
        return "true"
    return str(value)


def render(template: str, keys: Mapping[str, Any]) -> str:
    """Replace every placeholder in ``template`` with its value from ``keys``.

    Absent keys and falsy values render as the literal ``false``. Substituted
    values are never scanned for placeholders again.
    """
    def _replace(match: re.Match) -> str:
        value = keys.get(match.group(1))
        if not value:
            return MISSING_VALUE
        return _stringify(value)

    return PLACEHOLDER_PATTERN.sub(_replace, template)


def placeholders(template: str) -> set[str]:
    """Return the placeholder names referenced by ``template``."""
    return set(PLACEHOLDER_PATTERN.findall(template))
