"""
Test error taxonomy and CLI exit code mapping.

Validates exception messages and that run_and_exit maps each error class to
its exit code.
"""
from __future__ import annotations

import pytest
import typer

from posixfs import (
    CallFailure,
    FileSystemError,
    InvalidPathArgument,
    NotADirectory,
    NotAFile,
    Path,
    PathError,
)
from posixfs.mappers import EXIT_CODES, exit_code_for, run_and_exit


class TestErrorMessages:
    """Formatting of error messages."""

    def test_call_failure(self):
        """Test CallFailure message and attributes."""
        failure = CallFailure("Failed to execute unlink('/x')", "No such file or directory", 2)

        assert str(failure) == "Failed to execute unlink('/x'): `No such file or directory`"
        assert failure.code == 2

    def test_call_failure_without_code(self):
        """Test that a missing OS code becomes 0."""
        assert CallFailure("ctx", "boom").code == 0

    def test_path_errors(self):
        """Test path-bound messages."""
        path = Path("/srv/data")

        assert str(PathError(path, "Broken")) == "With '/srv/data': Broken"
        assert str(NotAFile(path)) == "With '/srv/data': Is not a file!"
        assert str(NotADirectory(path, "Need one")) == "With '/srv/data': Is not a directory! Need one"
        assert NotAFile(path).path is path

    def test_hierarchy(self):
        """Test that every error derives from FileSystemError."""
        for cls in (CallFailure, PathError, NotAFile, NotADirectory, InvalidPathArgument):
            assert issubclass(cls, FileSystemError)
        assert issubclass(InvalidPathArgument, TypeError)
        assert issubclass(NotAFile, PathError)


class TestExitCodeMapping:
    """Test exception to exit code mapping."""

    def test_known_exceptions_mapped_correctly(self):
        """Test that known exceptions map to correct exit codes."""
        assert exit_code_for(InvalidPathArgument(1)) == 2
        assert exit_code_for(ValueError("bad")) == 2
        assert exit_code_for(CallFailure("ctx", "boom")) == 3
        assert exit_code_for(PathError("/x", "bad")) == 4
        assert exit_code_for(NotAFile("/x")) == 4
        assert exit_code_for(NotADirectory("/x")) == 4

    def test_unknown_exception_maps_to_fallback(self):
        """Test that unknown exceptions map to the fallback exit code."""
        assert exit_code_for(RuntimeError("test")) == 1
        assert exit_code_for(KeyError("test")) == 1

    def test_exit_code_completeness(self):
        """Test that all error types are mapped."""
        assert set(EXIT_CODES) == {
            "InvalidPathArgument",
            "ValueError",
            "CallFailure",
            "PathError",
            "NotAFile",
            "NotADirectory",
        }


class TestRunAndExit:
    """Test the command wrapper."""

    def test_success_returns_value(self):
        """Test that a successful function result is returned."""
        assert run_and_exit(lambda: 42) == 42

    def test_failure_raises_exit(self, capsys):
        """Test that failures become typer.Exit with the mapped code."""
        def fail():
            raise CallFailure("Failed to execute rmdir('/x')", "No such file or directory", 2)

        with pytest.raises(typer.Exit) as exc_info:
            run_and_exit(fail)

        assert exc_info.value.exit_code == 3
        assert "Error: Failed to execute rmdir('/x')" in capsys.readouterr().err
