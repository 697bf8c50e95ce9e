"""
Unit tests for command name normalization and help tokens.
"""

from litecore.names import HELP_TOKENS, is_help_token, normalize_name


class TestNormalizeName:
    """Test name normalization."""

    def test_lowercase(self):
        """Test case folding."""
        assert normalize_name("ATTACH DATABASE") == "attach database"

    def test_strip_marker(self):
        """Test leading marker removal."""
        assert normalize_name(".Exit") == "exit"
        assert normalize_name("exit") == "exit"

    def test_strip_single_marker_only(self):
        """Test that only one leading marker is stripped."""
        assert normalize_name("..exit") == ".exit"

    def test_interior_marker_kept(self):
        """Test that interior markers are not stripped."""
        assert normalize_name("db.main") == "db.main"

    def test_empty(self):
        """Test empty and marker-only names."""
        assert normalize_name("") == ""
        assert normalize_name(".") == ""


class TestHelpTokens:
    """Test help token detection."""

    def test_all_tokens(self):
        """Test every help token is recognized."""
        for token in HELP_TOKENS:
            assert is_help_token(token) is True

    def test_case_insensitive(self):
        """Test help tokens in other cases."""
        assert is_help_token("HELP") is True
        assert is_help_token("--Help") is True
        assert is_help_token("-H") is True

    def test_not_help(self):
        """Test non-help tokens."""
        assert is_help_token("exit") is False
        assert is_help_token("helpme") is False
        assert is_help_token("") is False
