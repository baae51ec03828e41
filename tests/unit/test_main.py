"""End-to-end tests for the holidaycal command line."""

import json
from unittest.mock import AsyncMock, patch

import pytest

from holidaycal.__main__ import _create_parser, main

pytestmark = pytest.mark.integration


@pytest.fixture
def state_file(tmp_path, sample_state):
    path = tmp_path / "state.json"
    path.write_text(json.dumps(sample_state), encoding="utf-8")
    return path


def _run(argv):
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


class TestParser:
    """Argument parsing."""

    def test_defaults(self):
        args = _create_parser().parse_args([])
        assert args.view == "grid"
        assert args.format is None
        assert args.interactive is False

    def test_month_must_be_valid(self):
        with pytest.raises(SystemExit):
            _create_parser().parse_args(["--month", "13"])


class TestMain:
    """Full CLI runs."""

    def test_grid_output(self, state_file, capsys):
        assert _run(["--data", str(state_file), "--year", "2024", "--month", "12"]) == 0
        out = capsys.readouterr().out
        assert "December 2024" in out
        assert "25*" in out
        assert "Christmas" in out

    def test_list_output(self, state_file, capsys):
        assert _run(["--data", str(state_file), "--year", "2024", "--view", "list"]) == 0
        out = capsys.readouterr().out
        assert "• Republic Day" in out
        assert "• Christmas" in out
        assert "New Year" not in out

    def test_html_output(self, state_file, capsys):
        code = _run(["--data", str(state_file), "--year", "2024", "--month", "12", "--format", "html"])
        assert code == 0
        out = capsys.readouterr().out
        assert out.startswith("<!DOCTYPE html>")
        assert out.count('class="day holiday"') == 2

    def test_config_file(self, state_file, tmp_path, capsys):
        config = tmp_path / "holidaycal.yaml"
        config.write_text(f"data_file: {state_file}\nrenderer: html\n", encoding="utf-8")
        assert _run(["--config", str(config), "--year", "2024", "--month", "1"]) == 0
        assert 'data-date="2024-01-26"' in capsys.readouterr().out

    def test_missing_data_file_shows_empty_calendar(self, tmp_path, capsys):
        code = _run(["--data", str(tmp_path / "absent.json"), "--year", "2024", "--view", "list"])
        assert code == 0
        assert "No holidays found for this year." in capsys.readouterr().out

    def test_invalid_data_file_exits_with_error(self, tmp_path):
        path = tmp_path / "state.json"
        path.write_text("{broken", encoding="utf-8")
        assert _run(["--data", str(path)]) == 1

    def test_impossible_yaml_date_degrades(self, tmp_path, capsys):
        path = tmp_path / "state.yaml"
        path.write_text(
            "academicCalendar:\n"
            "  data:\n"
            "    - name: Typo\n"
            "      start_date: 2023-02-29\n"
            "      end_date: 2023-03-01\n"
            "    - name: Christmas\n"
            "      start_date: 2024-12-25\n"
            "      end_date: 2024-12-26\n",
            encoding="utf-8",
        )
        assert _run(["--data", str(path), "--year", "2023", "--view", "list"]) == 0
        out = capsys.readouterr().out
        assert "Typo" not in out
        assert "No holidays found for this year." in out

    def test_non_utf8_data_file_exits_with_error(self, tmp_path):
        path = tmp_path / "state.json"
        path.write_bytes(b'{"academicCalendar": "\xff"}')
        assert _run(["--data", str(path)]) == 1

    def test_year_zero_is_clamped_not_ignored(self, tmp_path, capsys):
        code = _run(["--data", str(tmp_path / "absent.json"), "--year", "0", "--month", "12"])
        assert code == 0
        assert "📅 HOLIDAY CALENDAR - December 1" in capsys.readouterr().out.splitlines()

    def test_invalid_config_exits_with_error(self, tmp_path):
        config = tmp_path / "holidaycal.yaml"
        config.write_text("renderer: pdf\n", encoding="utf-8")
        assert _run(["--config", str(config)]) == 1

    def test_keyboard_interrupt(self, capsys):
        with patch("holidaycal.__main__.run", side_effect=KeyboardInterrupt):
            assert _run([]) == 130
        assert "cancelled" in capsys.readouterr().out

    def test_interactive_mode_starts_controller(self, state_file):
        with patch(
            "holidaycal.ui.interactive.InteractiveController.start", new=AsyncMock()
        ) as start:
            assert _run(["--data", str(state_file), "--interactive"]) == 0
        start.assert_awaited_once()
