"""Configuration utilities for consequences.

The only setting is the collation locale used by the ``LOCALIZED*`` orders of
`consequences.sorting.TextOrder`. It is read from the
``CONSEQUENCES_COLLATION_LOCALE`` environment variable and applied to the
process-wide ``LC_COLLATE`` category on request; nothing happens at import
time.
"""

import locale
import logging
import os

from .errors import UnknownLocaleError

logger = logging.getLogger(__name__)

COLLATION_LOCALE_ENV = "CONSEQUENCES_COLLATION_LOCALE"  # pragma: no mutate


def get_collation_locale() -> str | None:
    """Get the configured collation locale from the environment.

    Returns:
        The value of ``CONSEQUENCES_COLLATION_LOCALE``, or None when it is
        unset or empty.
    """
    if not (name := os.environ.get(COLLATION_LOCALE_ENV)):
        return None
    return name


def apply_collation_locale(name: str | None = None) -> str:
    """Set ``LC_COLLATE`` for the process.

    Args:
        name: Locale to activate (e.g. ``"de_DE.UTF-8"``). Defaults to the
            configured `get_collation_locale` value. When neither is given
            the process locale is left untouched.

    Returns:
        The active ``LC_COLLATE`` setting.

    Raises:
        UnknownLocaleError: If the host does not provide the locale.

    Note:
        ``locale.setlocale`` is not thread-safe and affects the whole process.
        Call this once during application start-up.
    """
    if name is None:
        name = get_collation_locale()
    if name is None:
        return locale.setlocale(locale.LC_COLLATE)
    try:
        active = locale.setlocale(locale.LC_COLLATE, name)
    except locale.Error as e:
        raise UnknownLocaleError(name) from e
    logger.debug("LC_COLLATE set to %s", active)
    return active
