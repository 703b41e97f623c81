"""Tests for CLI UX module - environment detection and output helpers."""

from unittest.mock import patch


class TestEnvironmentDetection:
    """Test environment detection functions."""

    def test_is_interactive_in_ci(self):
        """_is_interactive returns False when CI env var is set."""
        from terragrade.cli.ux import _is_interactive

        with patch.dict("os.environ", {"CI": "true"}, clear=True):
            assert _is_interactive() is False

    def test_is_interactive_in_github_actions(self):
        """_is_interactive returns False in GitHub Actions."""
        from terragrade.cli.ux import _is_interactive

        with patch.dict("os.environ", {"GITHUB_ACTIONS": "true"}, clear=True):
            assert _is_interactive() is False

    def test_is_interactive_with_tty(self):
        """_is_interactive returns True when stdout is TTY and not CI."""
        from terragrade.cli.ux import _is_interactive

        with patch.dict("os.environ", {}, clear=True):
            with patch("sys.stdout") as mock_stdout:
                mock_stdout.isatty.return_value = True
                assert _is_interactive() is True

    def test_is_interactive_without_tty(self):
        """_is_interactive returns False when stdout is not TTY."""
        from terragrade.cli.ux import _is_interactive

        with patch.dict("os.environ", {}, clear=True):
            with patch("sys.stdout") as mock_stdout:
                mock_stdout.isatty.return_value = False
                assert _is_interactive() is False

    def test_should_use_color_no_color(self):
        """_should_use_color returns False when NO_COLOR is set."""
        from terragrade.cli.ux import _should_use_color

        with patch.dict("os.environ", {"NO_COLOR": "1"}, clear=True):
            assert _should_use_color() is False

    def test_should_use_color_force_color(self):
        """_should_use_color returns True when FORCE_COLOR is set."""
        from terragrade.cli.ux import _should_use_color

        with patch.dict("os.environ", {"FORCE_COLOR": "1"}, clear=True):
            assert _should_use_color() is True

    def test_is_interactive_public_function(self):
        """is_interactive() (public) wraps _is_interactive()."""
        from terragrade.cli.ux import is_interactive

        with patch.dict("os.environ", {"CI": "true"}, clear=True):
            assert is_interactive() is False


class TestOutputFunctions:
    """Test output helpers write the expected text."""

    def test_plain_keeps_brackets_and_emoji(self, capsys):
        from terragrade.cli.ux import plain

        plain("[bold]hashicorp/aws[/bold] 🟢 :warning:")
        assert capsys.readouterr().out == "[bold]hashicorp/aws[/bold] 🟢 :warning:\n"

    def test_error_escapes_markup(self, capsys):
        from terragrade.cli.ux import error

        error("Error: bad [input]")
        assert "✗ Error: bad [input]" in capsys.readouterr().out

    def test_warning(self, capsys):
        from terragrade.cli.ux import warning

        warning("OPENAI_API_KEY not found")
        assert "⚠ OPENAI_API_KEY not found" in capsys.readouterr().out

    def test_header_plain_fallback(self, capsys):
        from terragrade.cli.ux import header

        with patch("terragrade.cli.ux._should_use_color", return_value=False):
            header("SUMMARY OF PROVIDERS:")

        assert capsys.readouterr().out == "\nSUMMARY OF PROVIDERS:\n" + "=" * 40 + "\n"

    def test_header_with_color(self, capsys):
        from terragrade.cli.ux import header

        with patch("terragrade.cli.ux._should_use_color", return_value=True):
            header("Terraform Provider Security Analysis")

        assert "Terraform Provider Security Analysis" in capsys.readouterr().out

    def test_rule_width(self, capsys):
        from terragrade.cli.ux import rule

        rule(10)
        assert capsys.readouterr().out == "=" * 10 + "\n"
