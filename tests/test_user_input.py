"""Tests for user input parsing."""

import pytest

from graviton.core.user_input import UserInput, parse_user_input
from graviton.errors import UserInputError


class TestParseUserInput:
    """Tests for parse_user_input."""

    def test_bare_coordinate(self) -> None:
        parsed = parse_user_input("com.example:app")
        assert parsed == UserInput(package_name="com.example:app")

    def test_domain_name(self) -> None:
        assert parse_user_input("example.com").package_name == "example.com"

    def test_leading_flags(self) -> None:
        parsed = parse_user_input("--clear-cache -r com.example:app")
        assert parsed.package_name == "com.example:app"
        assert parsed.clear_cache is True
        assert parsed.refresh is True
        assert parsed.offline is False
        assert parsed.flags == frozenset({"--clear-cache", "-r"})

    def test_program_arguments_pass_through(self) -> None:
        parsed = parse_user_input("--offline g:a --port 8080 'hello world'")
        assert parsed.package_name == "g:a"
        assert parsed.offline is True
        assert parsed.args == ("--port", "8080", "hello world")

    def test_same_package_with_different_flags(self) -> None:
        """Flags do not change the package name."""
        assert (
            parse_user_input("--verbose g:a").package_name
            == parse_user_input("g:a").package_name
        )

    @pytest.mark.parametrize("text", ["", "   ", "--offline", "-v --refresh"])
    def test_missing_package_name(self, text: str) -> None:
        with pytest.raises(UserInputError, match="No package name"):
            parse_user_input(text)

    def test_unknown_flag(self) -> None:
        with pytest.raises(UserInputError, match="Unknown option"):
            parse_user_input("--frobnicate g:a")

    def test_unbalanced_quotes(self) -> None:
        with pytest.raises(UserInputError, match="Cannot parse"):
            parse_user_input("g:a 'unterminated")
