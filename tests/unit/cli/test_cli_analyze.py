"""Unit tests for the analyze command."""

import json
from collections.abc import Callable
from pathlib import Path

from typer.testing import CliRunner

from pathctl.cli.main import app
from pathctl.filesystem.base import FileSystem

runner = CliRunner()


def _analyze(fs: FileSystem, path: str, *args: str) -> str:
    """Run analyze against an in-memory filesystem and return stdout."""
    result = runner.invoke(
        app,
        ["-e", "TEST_PATH", "-d", ":", *args, "analyze"],
        env={"TEST_PATH": path},
        obj={"filesystem": fs},
    )
    assert result.exit_code == 0, result.output
    return result.stdout


class TestAnalyzeText:
    """Tests for the text report."""

    def test_clean_path_prints_none_everywhere(self, memfs: FileSystem) -> None:
        """All three sections print None when there is nothing to report."""
        output = _analyze(memfs, "/usr/local/bin:/sbin")
        assert output == (
            "Invalid Directories:\n"
            "    None\n"
            "\n"
            "Duplicate Directories:\n"
            "    None\n"
            "\n"
            "Shadowed Files:\n"
            "    None\n"
        )

    def test_bin_sbin_bin(self, make_fs: Callable[..., FileSystem]) -> None:
        """/bin once under duplicates; ls in /sbin shadowed by /bin."""
        fs = make_fs({"/bin": ["ls"], "/sbin": ["ls"]})
        output = _analyze(fs, "/bin:/sbin:/bin")

        duplicates = output.split("Duplicate Directories:\n")[1].split("\n\n")[0]
        assert duplicates == "    /bin"
        shadowed = output.split("Shadowed Files:\n")[1]
        assert shadowed.startswith("    /sbin\n        ls -> /bin\n")

    def test_invalid_directories(self, memfs: FileSystem) -> None:
        """Invalid entries are listed with the reason."""
        output = _analyze(memfs, "/bin:/does/not/exist:/etc/passwd")
        assert "    /does/not/exist (missing)\n" in output
        assert "    /etc/passwd (not a directory)\n" in output

    def test_missing_directory_not_shadowed(self, make_fs: Callable[..., FileSystem]) -> None:
        """A missing directory never causes shadowing."""
        fs = make_fs({"/d2": ["g"]})
        output = _analyze(fs, "/does/not/exist:/d2")
        assert output.endswith("Shadowed Files:\n    None\n")

    def test_analyze_prints_no_path(self, memfs: FileSystem) -> None:
        """analyze prints only the report, not the path itself."""
        output = _analyze(memfs, "/bin:/sbin")
        assert "/bin:/sbin" not in output


class TestAnalyzeJson:
    """Tests for analyze --json."""

    def test_json_report(self, make_fs: Callable[..., FileSystem]) -> None:
        """--json prints the report as a JSON document."""
        fs = make_fs({"/bin": ["ls"], "/sbin": ["ls"]})
        result = runner.invoke(
            app,
            ["-e", "TEST_PATH", "-d", ":", "analyze", "--json"],
            env={"TEST_PATH": "/bin:/sbin:/nope"},
            obj={"filesystem": fs},
        )

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["invalid"] == [{"directory": "/nope", "position": 2, "status": "missing"}]
        assert data["duplicates"] == []
        assert data["shadowed"][0]["directory"] == "/sbin"


class TestAnalyzeRealFilesystem:
    """Tests for analyze against a real directory tree."""

    def test_shadowing_on_disk(self, path_tree: Path) -> None:
        """Files in later directories are reported under the directory that loses."""
        a, b, c = (str(path_tree / name) for name in ("a", "b", "c"))
        result = runner.invoke(
            app, ["-e", "TEST_PATH", "analyze"], env={"TEST_PATH": f"{a}:{b}:{c}"}
        )

        assert result.exit_code == 0
        shadowed = result.stdout.split("Shadowed Files:\n")[1]
        assert shadowed == (
            f"    {b}\n"
            f"        keepme.txt -> {a}\n"
            f"    {c}\n"
            f"        x -> {b}\n"
        )

    def test_normalize_finds_symlink_duplicate(self, path_tree: Path) -> None:
        """With --normalize, a symlink to a directory already listed is a duplicate."""
        a, la = str(path_tree / "a"), str(path_tree / "la")
        result = runner.invoke(
            app, ["-e", "TEST_PATH", "--normalize", "analyze"], env={"TEST_PATH": f"{a}:{la}"}
        )

        duplicates = result.stdout.split("Duplicate Directories:\n")[1].split("\n\n")[0]
        assert duplicates == f"    {(path_tree / 'a').resolve()}"
