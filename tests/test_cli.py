"""
Tests for CLI Commands
======================
Tests for the namesmith CLI in namesmith/cli.py.
"""

import json
import pytest
import sys
import subprocess
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from namesmith.cli import main
from namesmith.config import Config


class TestCLIBasic:
    """Basic CLI tests."""

    def test_version_flag(self):
        """Test --version flag."""
        result = subprocess.run(
            [sys.executable, "-m", "namesmith", "--version"],
            capture_output=True,
            text=True,
            cwd=str(ROOT),
        )
        assert result.returncode == 0
        assert "namesmith" in result.stdout.lower()

    def test_help_flag(self):
        """Test --help flag."""
        result = subprocess.run(
            [sys.executable, "-m", "namesmith", "--help"],
            capture_output=True,
            text=True,
            cwd=str(ROOT),
        )
        assert result.returncode == 0
        assert "generate" in result.stdout.lower()
        assert "check" in result.stdout.lower()

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "usage" in capsys.readouterr().out.lower()

    def test_invalid_style_rejected(self):
        with pytest.raises(SystemExit):
            main(["generate", "flow", "--style", "fancy"])


class TestCLIGenerate:
    """Tests for generate command."""

    def test_generate_json(self, capsys):
        assert main(["generate", "flow", "--seed", "7", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert 0 < len(data) <= 20
        assert {"name", "style", "score"} <= set(data[0])
        scores = [d["score"] for d in data]
        assert scores == sorted(scores, reverse=True)

    def test_generate_style(self, capsys):
        assert main(["generate", "flow", "-s", "compound", "-r", "low", "--seed", "7", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data
        assert {d["style"] for d in data} == {"compound"}

    def test_generate_alias_table(self, capsys):
        assert main(["gen", "flow", "--seed", "7"]) == 0
        out = capsys.readouterr().out
        assert "Name" in out
        assert "Score" in out

    def test_generate_quiet_json_still_prints(self, capsys):
        assert main(["-q", "generate", "flow", "--seed", "1", "--json"]) == 0
        assert json.loads(capsys.readouterr().out)


class TestCLIDiscover:
    """Tests for discover command."""

    def test_discover_local(self, capsys):
        assert main(["discover", "mental health", "--seed", "3", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["source"] == "local"
        assert data["attempts"] == 1
        assert data["names"]

    def test_discover_ai_requires_key(self, monkeypatch, capsys):
        monkeypatch.setattr("namesmith.config.get_config", lambda env_path=None: Config())
        assert main(["discover", "flow", "--ai"]) == 1
        assert "ANTHROPIC_API_KEY" in capsys.readouterr().err


class TestCLIUtilities:
    """Tests for check, roots and styles commands."""

    def test_check_pass(self, capsys):
        assert main(["check", "Clovana"]) == 0
        assert "passes" in capsys.readouterr().out

    def test_check_fail(self, capsys):
        assert main(["check", "looop"]) == 1
        assert "repeated_char" in capsys.readouterr().out

    def test_roots_json(self, capsys):
        assert main(["roots", "privacy focused mental health app", "--json"]) == 0
        assert json.loads(capsys.readouterr().out) == ["mental", "health", "privacy"]

    def test_roots_plain(self, capsys):
        assert main(["roots", "tech startup"]) == 0
        assert "tech, startup" in capsys.readouterr().out

    def test_styles(self, capsys):
        assert main(["styles"]) == 0
        out = capsys.readouterr().out
        for style in ["auto", "brandable", "alternate", "compound", "real_word", "short"]:
            assert style in out
