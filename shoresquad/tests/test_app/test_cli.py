"""Tests for CLI commands."""

import json
from pathlib import Path

import httpx
import respx
import yaml

from shoresquad.cli import main
from shoresquad.config.loader import config_hash, load_config

FORECAST_URL = "https://api.data.gov.sg/v1/environment/24-hour-weather-forecast"


def _write_config(tmp_path: Path, data: dict | None = None) -> Path:
    path = tmp_path / "test.yaml"
    base = {"events": {"fetch_delay_ms": 0}, "weather": {"max_retries": 0}}
    base.update(data or {})
    with open(path, "w") as f:
        yaml.dump(base, f)
    return path


class TestCLI:
    def test_no_command_returns_1(self, capsys):
        assert main([]) == 1

    def test_config_show(self, tmp_path: Path, capsys):
        path = _write_config(tmp_path)
        result = main(["--config", str(path), "config", "show"])
        assert result == 0
        out = capsys.readouterr().out
        assert '"primary_region": "east"' in out
        assert f"# config hash: {config_hash(load_config(path))}" in out

    def test_config_get_and_set(self, tmp_path: Path, capsys):
        path = _write_config(tmp_path)
        assert main(["--config", str(path), "config", "set", "weather.primary_region=west"]) == 0
        capsys.readouterr()
        assert main(["--config", str(path), "config", "get", "weather.primary_region"]) == 0
        assert capsys.readouterr().out.strip() == "west"

    def test_config_set_requires_key_value(self, tmp_path: Path, capsys):
        path = _write_config(tmp_path)
        assert main(["--config", str(path), "config", "set", "oops"]) == 1

    def test_events_filter(self, tmp_path: Path, capsys):
        path = _write_config(tmp_path)
        assert main(["--config", str(path), "events", "--filter", "weekend", "--more", "1"]) == 0
        out = capsys.readouterr().out
        assert "Pasir Ris Beach Cleanup" in out
        assert "Marina Bay Sunrise Cleanup" in out
        assert "East Coast Park" not in out
        assert "Next Cleanup" in out
        assert "Filters: all, weekend, today, nearby" in out

    def test_join_twice(self, tmp_path: Path, capsys):
        path = _write_config(tmp_path)
        assert main(["--config", str(path), "join", "2", "--times", "2"]) == 0
        assert "👥 10 squad members joining" in capsys.readouterr().out

    def test_join_unknown(self, tmp_path: Path, capsys):
        path = _write_config(tmp_path)
        assert main(["--config", str(path), "join", "99"]) == 1

    def test_signup(self, tmp_path: Path, capsys):
        path = _write_config(tmp_path)
        assert main(["--config", str(path), "signup", "nobody"]) == 1
        assert "valid email" in capsys.readouterr().out

    @respx.mock
    def test_forecast_json(self, tmp_path: Path, capsys, thundery_payload: dict):
        respx.get(FORECAST_URL).mock(
            return_value=httpx.Response(200, json=thundery_payload)
        )
        path = _write_config(tmp_path)
        assert main(["--config", str(path), "forecast", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["condition_icon"] == "stormy"

    @respx.mock
    def test_forecast_unavailable(self, tmp_path: Path, capsys):
        respx.get(FORECAST_URL).mock(return_value=httpx.Response(500))
        path = _write_config(tmp_path)
        assert main(["--config", str(path), "forecast"]) == 1
        assert "Weather unavailable" in capsys.readouterr().out

    @respx.mock
    def test_status_with_weather_down(self, tmp_path: Path, capsys):
        respx.get(FORECAST_URL).mock(return_value=httpx.Response(503))
        path = _write_config(tmp_path)
        assert main(["--config", str(path), "status"]) == 1
        out = capsys.readouterr().out
        assert "Weather: error | Events: ready" in out
        assert "Changi Beach Environmental Action" in out

    @respx.mock
    def test_status_all_ready(self, tmp_path: Path, capsys, thundery_payload: dict):
        respx.get(FORECAST_URL).mock(
            return_value=httpx.Response(200, json=thundery_payload)
        )
        path = _write_config(tmp_path)
        assert main(["--config", str(path), "status"]) == 0
        out = capsys.readouterr().out
        assert "Weather: ready | Events: ready" in out
        assert "Filters: all, weekend, today, nearby" in out
