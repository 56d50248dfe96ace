"""
Unit tests for safecoll error types.
"""

import pytest

from safecoll import IllegalArgumentError, SafeCollError


class TestIllegalArgumentError:
    """Tests for the illegal argument error."""

    def test_message_with_argument(self):
        """Test the offending argument prefixes the message."""
        error = IllegalArgumentError("Map must not be null", "target")
        assert str(error) == "[target] Map must not be null"
        assert error.message == "Map must not be null"
        assert error.argument == "target"

    def test_message_without_argument(self):
        """Test a bare message is kept as is."""
        assert str(IllegalArgumentError("bad")) == "bad"

    def test_hierarchy(self):
        """Test the error can be caught as SafeCollError or ValueError."""
        with pytest.raises(SafeCollError):
            raise IllegalArgumentError("bad")
        with pytest.raises(ValueError):
            raise IllegalArgumentError("bad")
