"""Tests for unified CLI error handling."""

from terragrade.core.errors import (
    ConfigurationError,
    ExitCode,
    InputFileError,
    ProviderError,
    TerragradeError,
    format_error_message,
    main_with_error_handling,
)


class TestErrorTypes:
    def test_exit_codes(self):
        assert InputFileError("x").exit_code == ExitCode.INPUT_ERROR
        assert ConfigurationError("x").exit_code == ExitCode.CONFIG_ERROR
        assert ProviderError("x").exit_code == ExitCode.PROVIDER_ERROR
        assert TerragradeError("x").exit_code == ExitCode.UNKNOWN_ERROR

    def test_details_default_empty(self):
        assert InputFileError("missing").details == {}

    def test_format_error_message(self):
        assert format_error_message(InputFileError("missing")) == "missing"
        error = ProviderError("AI analysis failed", details={"error": "timeout"})
        assert format_error_message(error) == "AI analysis failed (error=timeout)"


class TestMainWithErrorHandling:
    def test_success_passthrough(self):
        @main_with_error_handling()
        def command() -> int:
            return 0

        assert command() == 0

    def test_terragrade_error(self, capsys):
        @main_with_error_handling()
        def command() -> int:
            raise InputFileError("File not found: .terraform.lock.hcl")

        assert command() == ExitCode.INPUT_ERROR
        assert "Error: File not found: .terraform.lock.hcl" in capsys.readouterr().out

    def test_unexpected_error(self, capsys):
        @main_with_error_handling()
        def command() -> int:
            raise RuntimeError("boom")

        assert command() == ExitCode.UNKNOWN_ERROR
        assert "Error: boom" in capsys.readouterr().out

    def test_keyboard_interrupt(self):
        @main_with_error_handling()
        def command() -> int:
            raise KeyboardInterrupt

        assert command() == 130
