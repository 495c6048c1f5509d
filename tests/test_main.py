"""Tests for the command line entry point."""

import pytest

from main import main
from painter_remap.errors import DateParseError

JAN_07 = "Mon Jan 07 2019 00:00:00 GMT-0500 (EST)"
MAPPED_JAN_07 = "Mon Apr 20 2026 12:00:00 GMT+0000 (UTC)"


@pytest.fixture
def template(tmp_path):
    path = tmp_path / "template.sh"
    path.write_text(
        "git init\n"
        f"echo '{JAN_07}' >> foobar.txt\n"
        f"git commit --date='{JAN_07}' -m '{JAN_07}'\n",
        encoding="utf-8",
    )
    return path


class TestMain:
    """Tests for main function."""

    def test_writes_script_to_stdout(self, template, capsys):
        """Test that the remapped script is the only thing on stdout."""
        main([str(template), "--today", "2026-10-19"])

        out = capsys.readouterr().out
        assert out == (
            f"echo '{MAPPED_JAN_07}' >> foobar.txt\n"
            f"git commit --date='{MAPPED_JAN_07}' -m '{MAPPED_JAN_07}'\n"
        )

    def test_output_file(self, template, tmp_path, capsys):
        """Test writing the result to --output instead of stdout."""
        out_file = tmp_path / "out" / "paint.sh"
        main([str(template), "--today", "2026-10-19", "--output", str(out_file)])

        assert capsys.readouterr().out == ""
        assert MAPPED_JAN_07 in out_file.read_text(encoding="utf-8")

    def test_align_option(self, template, capsys):
        """Test that --align selects the placement."""
        main([str(template), "--today", "2026-10-19", "--align", "right"])
        assert "Mon Oct 19 2026 12:00:00 GMT+0000 (UTC)" in capsys.readouterr().out

    def test_missing_argument(self, capsys):
        """Test that a missing template path is a usage error."""
        with pytest.raises(SystemExit) as exc_info:
            main([])

        assert exc_info.value.code == 2
        assert "usage" in capsys.readouterr().err

    def test_bad_today(self, template):
        """Test that a malformed --today is a usage error."""
        with pytest.raises(SystemExit) as exc_info:
            main([str(template), "--today", "19/10/2026"])
        assert exc_info.value.code == 2

    def test_bad_weeks(self, template):
        """Test that a zero-week window is a usage error."""
        with pytest.raises(SystemExit) as exc_info:
            main([str(template), "--weeks", "0"])
        assert exc_info.value.code == 2

    def test_missing_file(self, tmp_path):
        """Test that a missing template raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError, match="File not found"):
            main([str(tmp_path / "nope.sh")])

    def test_bad_date_writes_nothing(self, tmp_path, capsys):
        """Test that an impossible anchor date aborts with no output at all."""
        bad = "Sat Feb 30 2019 00:00:00 GMT-0500 (EST)"
        path = tmp_path / "bad.sh"
        path.write_text(
            f"git commit --date='{JAN_07}' -m '{JAN_07}'\n"
            f"git commit --date='{bad}' -m '{bad}'\n",
            encoding="utf-8",
        )
        out_file = tmp_path / "paint.sh"

        with pytest.raises(DateParseError):
            main([str(path), "--today", "2026-10-19"])
        assert capsys.readouterr().out == ""

        with pytest.raises(DateParseError):
            main([str(path), "--today", "2026-10-19", "--output", str(out_file)])
        assert not out_file.exists()

    def test_weeks_from_environment(self, template, monkeypatch, capsys):
        """Test that PAINTER_REMAP_WEEKS sets the default window width."""
        monkeypatch.setenv("PAINTER_REMAP_WEEKS", "3")
        main([str(template), "--today", "2026-10-19"])

        # one column centered in a three-week window is the previous week
        assert "Mon Oct 12 2026 12:00:00 GMT+0000 (UTC)" in capsys.readouterr().out

    def test_bad_weeks_from_environment(self, template, monkeypatch, capsys):
        """Test that a non-numeric PAINTER_REMAP_WEEKS is a usage error."""
        monkeypatch.setenv("PAINTER_REMAP_WEEKS", "many")
        with pytest.raises(SystemExit) as exc_info:
            main([str(template), "--today", "2026-10-19"])

        assert exc_info.value.code == 2
        assert "--weeks" in capsys.readouterr().err

    def test_bad_align_from_environment(self, template, monkeypatch, capsys):
        """Test that an unknown PAINTER_REMAP_ALIGN is a usage error."""
        monkeypatch.setenv("PAINTER_REMAP_ALIGN", "diagonal")
        with pytest.raises(SystemExit) as exc_info:
            main([str(template), "--today", "2026-10-19"])

        assert exc_info.value.code == 2
        assert "Unknown alignment" in capsys.readouterr().err

    def test_bad_log_level_from_environment(self, template, monkeypatch, capsys):
        """Test that an unknown PAINTER_REMAP_LOG_LEVEL is a usage error."""
        monkeypatch.setenv("PAINTER_REMAP_LOG_LEVEL", "chatty")
        with pytest.raises(SystemExit) as exc_info:
            main([str(template), "--today", "2026-10-19"])

        assert exc_info.value.code == 2
        assert "PAINTER_REMAP_LOG_LEVEL" in capsys.readouterr().err
