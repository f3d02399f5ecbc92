"""
Tests for the simplepass command line interface.
"""

from unittest.mock import patch

import pytest
from click.testing import CliRunner

from simplepass.__main__ import build_options, cli
from simplepass.exceptions import ClipboardError
from simplepass.utils.password_generator import GenerationOptions


def output_lines(result):
    return [line for line in result.output.splitlines() if line]


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def mock_copy():
    with patch('simplepass.__main__.copy_to_clipboard') as mock:
        mock.return_value = None
        yield mock


class TestBuildOptions:
    """Test option assembly from presets and flags."""

    def test_preset_only(self):
        """Test that unset flags keep the preset values."""
        options = build_options(12, "for_reading", None, None, None, None, None)
        assert options == GenerationOptions(
            length=12,
            use_numbers=False,
            use_symbols=False,
            use_lowercase=True,
            use_uppercase=True,
            allow_ambiguous_characters=False,
        )

    def test_explicit_flags_override_preset(self):
        """Test that the user's flags win over the preset."""
        options = build_options(12, "for_reading", True, None, None, False, True)
        assert options.use_numbers is True
        assert options.use_symbols is False
        assert options.use_uppercase is False
        assert options.allow_ambiguous_characters is True


class TestGenerateCommand:
    """Test the generate command."""

    def test_default_generate(self, runner, mock_copy):
        """Test generating and copying a default password."""
        result = runner.invoke(cli, ["generate"])

        assert result.exit_code == 0, result.output
        password = output_lines(result)[0]
        assert len(password) == 16
        mock_copy.assert_called_once_with(password, clear_after=60)
        assert "Password copied to clipboard!" in result.output

    def test_user_options_are_used(self, runner, mock_copy):
        """Test that the chosen options reach the generator."""
        result = runner.invoke(cli, [
            "generate", "--length", "8", "--no-symbols", "--no-lowercase",
            "--no-uppercase", "--no-ambiguous", "--no-copy",
        ])

        assert result.exit_code == 0, result.output
        password = output_lines(result)[0]
        assert len(password) == 8
        assert set(password) <= set("23456789")
        mock_copy.assert_not_called()

    def test_multiple_passwords(self, runner, mock_copy):
        """Test generating several passwords at once."""
        result = runner.invoke(cli, ["generate", "-n", "3", "-l", "10", "-p", "for_saying"])

        assert result.exit_code == 0, result.output
        passwords = output_lines(result)[:3]
        assert all(len(p) == 10 and p.isalpha() for p in passwords)
        mock_copy.assert_called_once_with("\n".join(passwords), clear_after=60)
        assert "Passwords copied to clipboard!" in result.output

    def test_show_entropy(self, runner, mock_copy):
        """Test printing entropy after generation."""
        result = runner.invoke(cli, [
            "generate", "-l", "8", "--no-symbols", "--no-lowercase", "--no-uppercase",
            "--no-ambiguous", "--no-copy", "--show-entropy",
        ])

        assert result.exit_code == 0, result.output
        assert "Entropy bits: 24.00 (Average)" in result.output

    def test_empty_alphabet(self, runner, mock_copy):
        """Test that generation without characters fails cleanly."""
        result = runner.invoke(cli, [
            "generate", "--no-numbers", "--no-symbols", "--no-lowercase", "--no-uppercase",
        ])

        assert result.exit_code == 1
        assert "Error: At least one character type must be enabled" in result.output
        mock_copy.assert_not_called()

    @pytest.mark.parametrize("length, message", [
        ("abc", "Password length must be a number"),
        ("3", "Password must be at least 4 symbols"),
        ("257", "Password must be less than 256 symbols"),
    ])
    def test_invalid_length(self, runner, mock_copy, length, message):
        """Test length validation messages."""
        result = runner.invoke(cli, ["generate", "--length", length])

        assert result.exit_code == 2
        assert message in result.output
        mock_copy.assert_not_called()

    def test_clipboard_unavailable(self, runner, mock_copy):
        """Test that a clipboard failure still shows the password."""
        mock_copy.side_effect = ClipboardError("Could not copy to clipboard: no backend")

        result = runner.invoke(cli, ["generate", "-l", "12"])

        assert result.exit_code == 0
        assert len(output_lines(result)[0]) == 12
        assert "Error: Could not copy to clipboard: no backend" in result.output

    def test_length_from_environment(self, runner, mock_copy):
        """Test configuring the length through an environment variable."""
        result = runner.invoke(
            cli, ["generate", "--no-copy"],
            env={"SIMPLEPASS_GENERATE_LENGTH": "24"},
            auto_envvar_prefix="SIMPLEPASS",
        )

        assert result.exit_code == 0, result.output
        assert len(output_lines(result)[0]) == 24


class TestEntropyCommand:
    """Test the entropy command."""

    def test_digits_scenario(self, runner):
        """Test entropy output for digits without ambiguous characters."""
        result = runner.invoke(cli, [
            "entropy", "-l", "8", "--no-symbols", "--no-lowercase", "--no-uppercase", "--no-ambiguous",
        ])

        assert result.exit_code == 0, result.output
        assert "(8 characters)" in result.output
        assert "Entropy bits: 24.00" in result.output
        assert "Password strength: Average" in result.output

    def test_empty_alphabet_is_zero(self, runner):
        """Test that entropy never fails on an empty alphabet."""
        result = runner.invoke(cli, [
            "entropy", "--no-numbers", "--no-symbols", "--no-lowercase", "--no-uppercase",
        ])

        assert result.exit_code == 0, result.output
        assert "Entropy bits: 0.00" in result.output
        assert "Password strength: Very weak" in result.output

    def test_default_is_very_strong(self, runner):
        """Test the default options."""
        result = runner.invoke(cli, ["entropy"])

        assert result.exit_code == 0, result.output
        assert "Password strength: Very strong" in result.output


class TestPresetsCommand:
    """Test the presets command."""

    def test_lists_presets(self, runner):
        """Test that every preset is listed."""
        result = runner.invoke(cli, ["presets"])

        assert result.exit_code == 0
        for name in ["all_characters", "for_reading", "for_saying"]:
            assert name in result.output
        assert "(default)" in result.output


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
