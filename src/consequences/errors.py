"""Error definitions for consequences.

The collection operations are total and raise nothing of their own. The
errors below come from configuration.
"""


class ConsequencesError(Exception):
    """Base class for consequences errors."""


class UnknownLocaleError(ConsequencesError):
    """Raised when a requested collation locale is not available on the host.

    Attributes:
        locale_name (str): The locale that could not be activated.
    """

    def __init__(self, locale_name: str) -> None:
        super().__init__(f"Collation locale '{locale_name}' is not available.")
        self.locale_name = locale_name
