"""Tests for player input validation."""

from __future__ import annotations

import pytest

from rpg_adventure.core.validation import (
    ValidationResult,
    sanitize_filename,
    sanitize_input,
    validate_character_name,
    validate_menu_choice,
    validate_save_name,
    validate_yes_no,
)


class TestValidationResult:
    """Tests for the ValidationResult container."""

    def test_ok_with_value(self) -> None:
        """Test a value without error is ok."""
        assert ValidationResult(3).ok

    def test_not_ok_with_error(self) -> None:
        """Test an error makes the result fail."""
        assert not ValidationResult(None, "bad").ok

    def test_zero_is_a_valid_value(self) -> None:
        """Test a falsy value still counts as ok."""
        assert ValidationResult(0).ok


class TestMenuChoice:
    """Tests for validate_menu_choice."""

    @pytest.mark.parametrize(("raw", "expected"), [("1", 1), (" 3 ", 3), ("0", 0)])
    def test_valid_choices(self, raw: str, expected: int) -> None:
        """Test in-range numbers are accepted."""
        assert validate_menu_choice(raw, 3).value == expected

    def test_empty_input(self) -> None:
        """Test empty input asks for a number."""
        assert validate_menu_choice("   ", 3).error == "Please enter a number!"

    def test_none_input(self) -> None:
        """Test missing input is rejected."""
        assert not validate_menu_choice(None, 3).ok

    def test_not_a_number(self) -> None:
        """Test text input is rejected."""
        assert validate_menu_choice("abc", 3).error == "That's not a number!"

    def test_out_of_range(self) -> None:
        """Test numbers above the option count are rejected."""
        result = validate_menu_choice("4", 3)
        assert result.error == "Choose between 0 and 3!"

    def test_negative(self) -> None:
        """Test negative numbers are rejected."""
        assert not validate_menu_choice("-1", 3).ok

    def test_zero_refused_when_disallowed(self) -> None:
        """Test zero is rejected for menus without a back option."""
        result = validate_menu_choice("0", 3, allow_zero=False)
        assert result.error == "Choose between 1 and 3!"


class TestCharacterName:
    """Tests for validate_character_name."""

    def test_trims_whitespace(self) -> None:
        """Test surrounding whitespace is removed."""
        assert validate_character_name("  Aria  ").value == "Aria"

    @pytest.mark.parametrize(
        ("raw", "message"),
        [
            ("", "Name cannot be empty!"),
            ("   ", "Name cannot be empty!"),
            ("A", "Name too short!"),
            ("A" * 21, "Name too long!"),
        ],
    )
    def test_rejections(self, raw: str, message: str) -> None:
        """Test empty, short and long names are rejected."""
        assert validate_character_name(raw).error == message

    @pytest.mark.parametrize("raw", ["Al", "A" * 20])
    def test_length_bounds_inclusive(self, raw: str) -> None:
        """Test 2 and 20 characters are both accepted."""
        assert validate_character_name(raw).ok


class TestFilenames:
    """Tests for sanitize_filename and validate_save_name."""

    def test_unsafe_characters_replaced(self) -> None:
        """Test characters outside the safe set become underscores."""
        assert sanitize_filename("my save!") == "my_save_"

    def test_safe_name_unchanged(self) -> None:
        """Test a safe name passes through."""
        assert sanitize_filename("hero-01_a") == "hero-01_a"

    @pytest.mark.parametrize("raw", ["../etc", ".hidden", "/root", "\\share", "a..b"])
    def test_traversal_rejected(self, raw: str) -> None:
        """Test path traversal patterns are rejected."""
        assert sanitize_filename(raw) == ""

    def test_too_long_rejected(self) -> None:
        """Test names over 30 characters are rejected."""
        assert sanitize_filename("a" * 31) == ""
        assert sanitize_filename("a" * 30) == "a" * 30

    def test_save_name_messages(self) -> None:
        """Test save name validation messages."""
        assert validate_save_name("").error == "Save name cannot be empty!"
        assert validate_save_name("a" * 31).error == "Save name too long!"
        assert validate_save_name("../x").error == "Invalid save name!"
        assert validate_save_name(" slot 1 ").value == "slot_1"


class TestMisc:
    """Tests for sanitize_input and validate_yes_no."""

    def test_sanitize_none(self) -> None:
        """Test None becomes an empty string."""
        assert sanitize_input(None) == ""

    @pytest.mark.parametrize(("raw", "expected"), [("y", True), ("YES", True), ("n", False), ("", False)])
    def test_yes_no(self, raw: str, expected: bool) -> None:
        """Test yes/no interpretation."""
        assert validate_yes_no(raw) is expected
