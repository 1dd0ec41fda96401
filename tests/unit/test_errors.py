"""Unit tests for consequences errors."""

from consequences import errors


class TestUnknownLocaleError:
    """Tests for the UnknownLocaleError configuration error."""

    @staticmethod
    def test_attributes() -> None:
        """Test that the error keeps the rejected locale name."""
        error = errors.UnknownLocaleError("xx_YY.UTF-8")
        assert error.locale_name == "xx_YY.UTF-8"

    @staticmethod
    def test_error_message() -> None:
        """Test that the error message is formatted correctly."""
        error = errors.UnknownLocaleError("xx_YY.UTF-8")
        assert str(error) == "Collation locale 'xx_YY.UTF-8' is not available."

    @staticmethod
    def test_is_consequences_error() -> None:
        """Test that the error derives from the package base class."""
        assert isinstance(errors.UnknownLocaleError("C"), errors.ConsequencesError)
