"""Unit tests for the 'quoth ref' command.

Tests cover:
- LINE[:COL] parsing (1-based lines, validation errors)
- Link style and fallback options
- Exit codes (0=reference printed, 1=no unique reference, 2=config error)
"""

from pathlib import Path

import pytest
import yaml
from click.testing import CliRunner

from quoth.cli.commands.ref import ref


@pytest.mark.unit
class TestRefCommand:
    """Tests for reference output."""

    def test_heading_reference(self, notes_dir: Path) -> None:
        """Test the shortest unique heading path for a body line."""
        runner = CliRunner()
        result = runner.invoke(ref, [str(notes_dir / "duplicates.md"), "--from", "9"])
        assert result.exit_code == 0
        assert "[[duplicates#B#1]]" in result.output

    def test_full_chain_reference(self, notes_dir: Path) -> None:
        """Test a selection that needs the root title."""
        runner = CliRunner()
        result = runner.invoke(
            ref,
            [str(notes_dir / "duplicates.md"), "--from", "13:2", "--to", "13:5"],
        )
        assert result.exit_code == 0
        assert "[[duplicates#Section 2#A#1]]" in result.output

    def test_block_reference(self, notes_dir: Path) -> None:
        """Test that a block anchor line produces a block reference."""
        runner = CliRunner()
        result = runner.invoke(
            ref, [str(notes_dir / "example.md"), "--from", "7", "--link-style", "plain"]
        )
        assert result.exit_code == 0
        assert "example#^ablockid" in result.output
        assert "[[" not in result.output

    def test_reversed_selection(self, notes_dir: Path) -> None:
        """Test that --to may come before --from."""
        runner = CliRunner()
        result = runner.invoke(
            ref, [str(notes_dir / "duplicates.md"), "--from", "6", "--to", "4"]
        )
        assert result.exit_code == 0
        assert "[[duplicates#Section 1#A]]" in result.output

    def test_no_unique_reference(self, notes_dir: Path) -> None:
        """Test exit code 1 under a duplicated root heading."""
        runner = CliRunner()
        result = runner.invoke(ref, [str(notes_dir / "duplicates.md"), "--from", "15"])
        assert result.exit_code == 1
        assert "No unique reference" in result.output

    def test_lines_fallback(self, notes_dir: Path) -> None:
        """Test the line citation fallback."""
        runner = CliRunner()
        result = runner.invoke(
            ref,
            [str(notes_dir / "duplicates.md"), "--from", "15", "--fallback", "lines"],
        )
        assert result.exit_code == 0
        assert "duplicates:L15" in result.output


@pytest.mark.unit
class TestRefArguments:
    """Tests for argument and option parsing."""

    def test_note_required(self) -> None:
        """Test that NOTE is required."""
        result = CliRunner().invoke(ref, [])
        assert result.exit_code != 0
        assert "Missing argument" in result.output

    def test_note_must_exist(self, temp_dir: Path) -> None:
        """Test that a missing note is a usage error."""
        result = CliRunner().invoke(ref, [str(temp_dir / "missing.md"), "--from", "1"])
        assert result.exit_code == 2

    def test_from_required(self, notes_dir: Path) -> None:
        """Test that --from is required."""
        result = CliRunner().invoke(ref, [str(notes_dir / "example.md")])
        assert result.exit_code == 2
        assert "--from" in result.output

    @pytest.mark.parametrize("value", ["abc", "3:x", "0", ":4"])
    def test_bad_cursor(self, notes_dir: Path, value: str) -> None:
        """Test that malformed positions are rejected."""
        note = str(notes_dir / "example.md")
        result = CliRunner().invoke(ref, [note, "--from", value])
        assert result.exit_code == 2

    def test_bad_link_style(self, notes_dir: Path) -> None:
        """Test that --link-style only accepts known styles."""
        result = CliRunner().invoke(
            ref, [str(notes_dir / "example.md"), "--from", "3", "--link-style", "html"]
        )
        assert result.exit_code == 2


@pytest.mark.unit
class TestRefConfig:
    """Tests for configuration handling."""

    def test_config_file_sets_style(self, notes_dir: Path, temp_dir: Path) -> None:
        """Test that --config is honoured."""
        config = temp_dir / "quoth.yaml"
        config.write_text(yaml.dump({"link_style": "plain", "quiet": True}))
        result = CliRunner().invoke(
            ref,
            [str(notes_dir / "duplicates.md"), "--from", "9", "--config", str(config)],
        )
        assert result.exit_code == 0
        assert "duplicates#B#1" in result.output
        assert "[[" not in result.output

    def test_cli_flag_beats_config_file(self, notes_dir: Path, temp_dir: Path) -> None:
        """Test that --link-style overrides the file."""
        config = temp_dir / "quoth.yaml"
        config.write_text(yaml.dump({"link_style": "plain"}))
        result = CliRunner().invoke(
            ref,
            [
                str(notes_dir / "duplicates.md"),
                "--from",
                "9",
                "--config",
                str(config),
                "--link-style",
                "wikilink",
                "--quiet",
            ],
        )
        assert result.exit_code == 0
        assert "[[duplicates#B#1]]" in result.output

    def test_invalid_config_exits_2(self, notes_dir: Path, temp_dir: Path) -> None:
        """Test that a bad config file exits with code 2."""
        config = temp_dir / "quoth.yaml"
        config.write_text(yaml.dump({"fallback": "sometimes"}))
        result = CliRunner().invoke(
            ref,
            [str(notes_dir / "duplicates.md"), "--from", "9", "--config", str(config)],
        )
        assert result.exit_code == 2
        assert "Failed to load configuration" in result.output

    def test_missing_config_exits_2(self, notes_dir: Path, temp_dir: Path) -> None:
        """Test that a missing --config file exits with code 2."""
        result = CliRunner().invoke(
            ref,
            [
                str(notes_dir / "duplicates.md"),
                "--from",
                "9",
                "--config",
                str(temp_dir / "absent.yaml"),
            ],
        )
        assert result.exit_code == 2
        assert "Failed to load configuration" in result.output


@pytest.mark.unit
class TestRefErrors:
    """Tests for failures while reading the note."""

    def test_invalid_utf8_note(self, temp_dir: Path) -> None:
        """Test that an undecodable note exits with code 2 and a message."""
        note = temp_dir / "latin1.md"
        note.write_bytes(b"# Caf\xe9\nbody\n")
        result = CliRunner().invoke(ref, [str(note), "--from", "2"])
        assert result.exit_code == 2
        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert "UTF-8" in result.output

    def test_unexpected_error(
        self, notes_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that an unexpected exception is reported, not raised."""

        def _boom(self: object, path: object) -> None:
            raise RuntimeError("disk on fire")

        monkeypatch.setattr(
            "quoth.cli.commands.ref.MarkdownMetadataExtractor.extract_file", _boom
        )
        result = CliRunner().invoke(ref, [str(notes_dir / "example.md"), "--from", "3"])
        assert result.exit_code == 2
        assert "Error: disk on fire" in result.output


@pytest.mark.unit
class TestRefLogging:
    """Tests for the command's log output."""

    def test_logs_one_based_positions(self, notes_dir: Path) -> None:
        """Test that the selection is logged as 1-based LINE:COL."""
        result = CliRunner().invoke(
            ref, [str(notes_dir / "duplicates.md"), "--from", "6:3", "--to", "4"]
        )
        assert result.exit_code == 0
        assert "from=4:0, to=6:3" in result.output
        assert "line=" not in result.output
