"""
Tests for the datewidget command line.
"""

import io

import pytest

from datewidget_cli.cli import main

BASE = ["--base", "2011-09-08T09:54:55"]


class TestRenderCommand:
    """Tests for rendering a single widget."""

    def test_default(self, capsys):
        """Test no options prints the date."""
        assert main(BASE) == 0
        assert capsys.readouterr().out == "08/09/2011\n"

    def test_options(self, capsys):
        """Test options are given as one argument."""
        assert main(BASE + ["2012y +1d"]) == 0
        assert capsys.readouterr().out == "09/09/2012\n"

    def test_dash_options(self, capsys):
        """Test options starting with '-' after '--'."""
        assert main(BASE + ["--widget", "yesterday", "--", "-t"]) == 0
        assert capsys.readouterr().out == "07/09/2011 09:54\n"

    def test_locale(self, capsys):
        """Test --locale changes month names."""
        assert main(BASE + ["--locale", "fr_FR", "--", '-f"d MMMM"']) == 0
        assert capsys.readouterr().out == "8 septembre\n"

    def test_invalid_options(self, capsys):
        """Test invalid options exit with status 1."""
        assert main(BASE + ["1x"]) == 1

    def test_invalid_base(self):
        """Test an invalid --base is rejected by the parser."""
        with pytest.raises(SystemExit):
            main(["--base", "yesterday"])


class TestExpandCommand:
    """Tests for rendering every widget of a file."""

    def test_expand_file(self, tmp_path, capsys):
        """Test widgets in a file are rendered."""
        page = tmp_path / "page.txt"
        page.write_text("Due !tomorrow(-fyyyy-MM-dd), created !now.\n", encoding="utf-8")
        assert main(BASE + ["--expand", str(page)]) == 0
        assert capsys.readouterr().out == "Due 2011-09-09, created 08/09/2011.\n"

    def test_expand_stdin(self, monkeypatch, capsys):
        """Test widgets are read from standard input."""
        monkeypatch.setattr("sys.stdin", io.StringIO("!yesterday(-t)"))
        assert main(BASE + ["--expand"]) == 0
        assert capsys.readouterr().out == "07/09/2011 09:54\n"

    def test_expand_strict(self, monkeypatch):
        """Test --strict fails on an invalid widget."""
        monkeypatch.setattr("sys.stdin", io.StringIO("!now(1x)"))
        assert main(BASE + ["--expand", "--strict"]) == 1

    def test_expand_lenient(self, monkeypatch, capsys):
        """Test invalid widgets are marked without --strict."""
        monkeypatch.setattr("sys.stdin", io.StringIO("!now(1x) !now"))
        assert main(BASE + ["--expand"]) == 0
        assert capsys.readouterr().out.endswith(" 08/09/2011\n")

    def test_expand_with_options(self):
        """Test options cannot be combined with --expand."""
        with pytest.raises(SystemExit):
            main(BASE + ["--expand", "-", "+1d"])
