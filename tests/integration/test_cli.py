#!/usr/bin/env python3
"""
Integration tests for the thoughty CLI.

Invokes the commands through Click's test runner against a temporary
database and log directory.
"""
import pytest
import yaml
from click.testing import CliRunner

from thoughty.pipeline.cli import cli


@pytest.fixture
def runner():
    """Create Click test runner."""
    return CliRunner()


@pytest.fixture
def invoke(runner, tmp_dir):
    """Run the CLI with a temporary database and log directory."""
    def _invoke(*args):
        return runner.invoke(
            cli,
            ["--db", str(tmp_dir / "cli.db"), "--log-dir", str(tmp_dir / "logs"), *args],
        )
    return _invoke


@pytest.fixture
def journal_file(tmp_dir, sample_journal_text):
    """Sample journal text written to disk."""
    path = tmp_dir / "journal.txt"
    path.write_text(sample_journal_text, encoding="utf-8")
    return path


class TestCLIBasics:
    """Test basic CLI functionality."""

    def test_cli_help(self, runner):
        """Test that CLI help message works."""
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "Thoughty journal import/export tools" in result.output

    @pytest.mark.parametrize("command", ["format", "export", "preview", "import", "convert"])
    def test_command_help(self, runner, command):
        """Every command has help."""
        result = runner.invoke(cli, [command, "--help"])
        assert result.exit_code == 0

    def test_logs_written(self, invoke, tmp_dir):
        """Operation logs go below the log directory."""
        invoke("format", "show")
        assert (tmp_dir / "logs" / "operations" / "cli.log").exists()
        assert (tmp_dir / "logs" / "system" / "database.log").exists()


class TestFormatCommands:
    """Test format show / set."""

    def test_show_defaults(self, invoke):
        """A fresh user sees the default tokens."""
        result = invoke("format", "show")
        assert result.exit_code == 0
        data = yaml.safe_load(result.output)
        assert data["entrySeparator"] == "-" * 80
        assert data["dateFormat"] == "YYYY-MM-DD"

    def test_set_options(self, invoke):
        """Options are stored and shown afterwards."""
        result = invoke("format", "set", "--tag-open-bracket", "(", "--tag-close-bracket", ")")
        assert result.exit_code == 0
        assert "Format saved" in result.output

        data = yaml.safe_load(invoke("format", "show").output)
        assert data["tagOpenBracket"] == "("
        assert data["tagCloseBracket"] == ")"

    def test_set_from_file(self, invoke, tmp_dir):
        """Tokens can come from a YAML file; options win."""
        path = tmp_dir / "format.yaml"
        path.write_text('datePrefix: "#"\ntagSeparator: ";"\n', encoding="utf-8")

        result = invoke("format", "set", "--file", str(path), "--tag-separator", "|")
        assert result.exit_code == 0

        data = yaml.safe_load(invoke("format", "show").output)
        assert data["datePrefix"] == "#"
        assert data["tagSeparator"] == "|"

    def test_set_bad_file(self, invoke, tmp_dir):
        """A malformed format file fails with a readable error."""
        path = tmp_dir / "format.yaml"
        path.write_text("- not\n- a mapping\n", encoding="utf-8")

        result = invoke("format", "set", "--file", str(path))
        assert result.exit_code == 1
        assert "FormatConfigError" in result.output

    def test_per_user(self, invoke):
        """Settings belong to the selected user."""
        invoke("--user", "2", "format", "set", "--date-prefix", "#")
        data = yaml.safe_load(invoke("format", "show").output)
        assert data["datePrefix"] == "---"


class TestTransferCommands:
    """Test import, preview and export."""

    def test_import_then_export(self, invoke, journal_file, tmp_dir):
        """Imported entries come back out in the export."""
        result = invoke("import", str(journal_file))
        assert result.exit_code == 0
        assert "Imported 3 entries" in result.output

        out = tmp_dir / "out.txt"
        result = invoke("export", "-o", str(out))
        assert result.exit_code == 0
        assert "Exported 3 entries" in result.output

        text = out.read_bytes().decode("utf-8")
        assert "\r\n---2024-01-15--[work,ideas]\r\n" in text
        assert "\r\n---2--[home]\r\nEvening notes\r\n" in text

    def test_export_to_directory(self, invoke, journal_file, tmp_dir):
        """A directory output gets the suggested file name."""
        invoke("import", str(journal_file))
        out_dir = tmp_dir / "exports"
        out_dir.mkdir()

        result = invoke("export", "-o", str(out_dir))
        assert result.exit_code == 0

        files = list(out_dir.glob("thoughty_export_*.txt"))
        assert len(files) == 1

    def test_export_to_new_directory(self, invoke, journal_file, tmp_dir):
        """A directory that does not exist yet is created."""
        invoke("import", str(journal_file))

        result = invoke("export", "-o", str(tmp_dir / "backups" / "2024") + "/")
        assert result.exit_code == 0

        files = list((tmp_dir / "backups" / "2024").glob("thoughty_export_*.txt"))
        assert len(files) == 1

    def test_second_import_skips_duplicates(self, invoke, journal_file):
        """Re-importing reports skipped duplicates."""
        invoke("import", str(journal_file))
        result = invoke("import", str(journal_file))
        assert result.exit_code == 0
        assert "Imported 0 entries" in result.output
        assert "Skipped 3 duplicates" in result.output

    def test_keep_duplicates(self, invoke, journal_file):
        """--keep-duplicates imports everything again."""
        invoke("import", str(journal_file))
        result = invoke("import", str(journal_file), "--keep-duplicates")
        assert "Imported 3 entries" in result.output

    def test_preview(self, invoke, journal_file):
        """Preview lists counts and duplicates without importing."""
        result = invoke("preview", str(journal_file))
        assert result.exit_code == 0
        assert "3 entries found" in result.output
        assert "0 duplicates" in result.output

        invoke("import", str(journal_file))
        result = invoke("preview", str(journal_file))
        assert "3 duplicates" in result.output
        assert "2024-01-16: Next day" in result.output

    def test_preview_verbose_lists_entries(self, invoke, journal_file):
        """Verbose preview shows every parsed entry."""
        result = invoke("-v", "preview", str(journal_file))
        assert "2024-01-15 #2 [home]" in result.output

    def test_import_unknown_diary(self, invoke, journal_file):
        """A missing diary fails with exit code 1."""
        result = invoke("import", str(journal_file), "--diary", "42")
        assert result.exit_code == 1
        assert "ValidationError: Diary 42 not found" in result.output

    def test_import_empty_file(self, invoke, tmp_dir):
        """Empty uploads are rejected."""
        path = tmp_dir / "empty.txt"
        path.write_text("", encoding="utf-8")
        result = invoke("import", str(path))
        assert result.exit_code == 1
        assert "File content is required" in result.output

    def test_import_missing_file(self, invoke, tmp_dir):
        """Click rejects paths that do not exist."""
        result = invoke("import", str(tmp_dir / "nope.txt"))
        assert result.exit_code == 2


class TestConvertCommand:
    """Test convert."""

    def test_convert_to_stdout(self, invoke, journal_file, tmp_dir):
        """Converted text is printed when no output is given."""
        target = tmp_dir / "target.yaml"
        target.write_text('tagOpenBracket: "<"\ntagCloseBracket: ">"\n', encoding="utf-8")

        result = invoke("convert", str(journal_file), "--to-format", str(target))

        assert result.exit_code == 0
        assert "---2024-01-15--<work,ideas>" in result.output

    def test_convert_to_file(self, invoke, journal_file, tmp_dir):
        """Converted text is written with CRLF endings."""
        out = tmp_dir / "converted.txt"
        result = invoke("convert", str(journal_file), "-o", str(out))

        assert result.exit_code == 0
        assert "Converted 3 entries" in result.output
        assert out.read_bytes().startswith(b"\r\n---2024-01-15--[work,ideas]\r\n")

    def test_convert_from_custom_format(self, invoke, tmp_dir):
        """The source tokens decide how the input is read."""
        source = tmp_dir / "source.yaml"
        source.write_text('datePrefix: "# "\ndateSuffix: " "\n', encoding="utf-8")
        journal = tmp_dir / "custom.txt"
        journal.write_text("# 2024-01-15 [a]\nhello\n", encoding="utf-8")

        result = invoke("convert", str(journal), "--from-format", str(source))

        assert result.exit_code == 0
        assert "---2024-01-15--[a]" in result.output
