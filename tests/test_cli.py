"""Tests for the streak-client command line."""

import json
from unittest.mock import MagicMock, patch

import pytest

from streak_client import cli
from streak_client.api.client import StreakApiClient, StreakApiError
from streak_client.api.models import OverallStatistics, TimeResponse


@pytest.fixture
def api():
    """Patch the client class; yields the instance the CLI will use."""
    instance = MagicMock(spec=StreakApiClient)
    with patch.object(cli, "StreakApiClient") as client_cls:
        client_cls.return_value.__enter__.return_value = instance
        yield instance


class TestCli:
    def test_status(self, api, capsys):
        api.get_time.return_value = TimeResponse("2024-05-01T09:00:00Z", 3, 36)

        code = cli.main(["status"])

        assert code == 0
        assert json.loads(capsys.readouterr().out) == {
            "current_time": "2024-05-01T09:00:00Z",
            "streak": 3,
            "total_points": 36,
        }

    def test_status_failure(self, api, capsys):
        api.get_time.side_effect = StreakApiError("refused")

        code = cli.main(["status"])

        assert code == 1
        assert "refused" in capsys.readouterr().err

    def test_status_time_matching_error_text_is_success(self, api, capsys):
        api.get_time.return_value = TimeResponse("Error fetching time", 1, 1)

        code = cli.main(["status"])

        assert code == 0
        assert json.loads(capsys.readouterr().out)["streak"] == 1

    def test_log(self, api, capsys):
        api.log_session.return_value = TimeResponse("2024-05-02", 4, 48)

        code = cli.main(["log", "--date", "2024-05-02", "--session-type", "2-hours"])

        assert code == 0
        api.log_session.assert_called_once_with("2024-05-02", "2-hours")
        assert json.loads(capsys.readouterr().out)["streak"] == 4

    def test_log_rejected(self, api, capsys):
        api.log_session.side_effect = StreakApiError("400 Invalid session type")

        assert cli.main(["log", "--date", "2024-05-02", "--session-type", "4-hours"]) == 1
        assert "Invalid session type" in capsys.readouterr().err

    def test_stats(self, api, capsys):
        api.get_overall_statistics.return_value = OverallStatistics(
            current_date="2023-10-03", streak=3, total_points=36
        )

        code = cli.main(["stats"])

        out = json.loads(capsys.readouterr().out)
        assert code == 0
        assert out["total_points"] == 36
        assert out["weekly_trend"] == []

    def test_stats_failure(self, api, capsys):
        api.get_overall_statistics.side_effect = StreakApiError("down")

        assert cli.main(["stats"]) == 1
        assert "down" in capsys.readouterr().err

    def test_base_url_passed_to_client(self):
        with patch.object(cli, "StreakApiClient") as client_cls:
            client_cls.return_value.__enter__.return_value.get_time.return_value = TimeResponse(
                "now", 0, 0
            )
            cli.main(["--base-url", "http://h:9000", "status"])

        settings = client_cls.call_args.kwargs["settings"]
        assert settings.api_base_url == "http://h:9000"

    def test_command_required(self):
        with pytest.raises(SystemExit):
            cli.main([])

    @pytest.mark.parametrize(
        "argv",
        [
            ["status", "--timeout", "3", "--base-url", "http://h:9000"],
            ["--timeout", "3", "status", "--base-url", "http://h:9000"],
            ["log", "--date", "2024-05-02", "--session-type", "1-hour", "--timeout", "3",
             "--base-url", "http://h:9000"],
        ],
    )
    def test_global_flags_before_or_after_command(self, argv):
        args = cli.parse_cli(argv)

        assert args.settings.api_timeout_sec == 3.0
        assert args.settings.api_base_url == "http://h:9000"
