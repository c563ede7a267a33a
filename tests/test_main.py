"""
Tests for main.py (command-line entry point)

Tests cover:
- list, show and check commands
"""

import pytest

from main import main
from src.catalog import DanglingReferenceError


@pytest.fixture(autouse=True)
def lenient(monkeypatch):
    monkeypatch.setenv("CATALOG_STRICT", "0")
    monkeypatch.setenv("CATALOG_QUIET_AUDIT", "1")


class TestCli:
    """Tests for main()"""

    def test_list(self, capsys):
        assert main(["list"]) == 0
        out = capsys.readouterr().out
        assert "Numbers (7)" in out
        assert "Position (0)" in out
        assert "liga  Standard Ligatures *" in out

    def test_show(self, capsys):
        assert main(["show", "onum"]) == 0
        out = capsys.readouterr().out
        assert out.startswith("Oldstyle Figures (onum) [digit]")
        assert "See also: Lining Figures (lnum), Tabular Figures (tnum), Proportional Figures (pnum)" in out

    def test_show_required_note(self, capsys):
        assert main(["show", "hlig"]) == 0
        assert 'Requires: "hist"' in capsys.readouterr().out

    def test_show_unknown(self, capsys):
        assert main(["show", "ghost"]) == 1
        assert "Unknown feature: ghost" in capsys.readouterr().out

    def test_check_lenient(self, capsys):
        assert main(["check"]) == 0
        assert "13 dangling reference(s)" in capsys.readouterr().out

    def test_check_strict(self):
        assert main(["check", "--strict"]) == 1

    def test_mode_required(self):
        with pytest.raises(SystemExit):
            main([])

    def test_strict_env_fails_list(self, monkeypatch):
        """Test that strict mode stops serving the catalog"""
        monkeypatch.setenv("CATALOG_STRICT", "1")
        with pytest.raises(DanglingReferenceError):
            main(["list"])

    def test_strict_env_fails_show(self, monkeypatch):
        monkeypatch.setenv("CATALOG_STRICT", "1")
        with pytest.raises(DanglingReferenceError):
            main(["show", "tnum"])

    def test_strict_env_check_reports(self, monkeypatch, capsys):
        """Test that check still reports under strict mode instead of raising"""
        monkeypatch.setenv("CATALOG_STRICT", "1")
        assert main(["check"]) == 0
        assert "13 dangling reference(s)" in capsys.readouterr().out
