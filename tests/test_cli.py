"""
Tests for the creature-ranker command line and settings.
"""

import pytest

from creature_ranker import __version__
from creature_ranker.cli.main import app, build_parser
from creature_ranker.settings import CreatureRankerSettings


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("CREATURE_RANKER_API_BASE_URL", raising=False)
        cfg = CreatureRankerSettings()
        assert cfg.api_base_url == "https://www.api.com"
        assert cfg.creatures_path == "/creatures/list"
        assert cfg.log_level == "INFO"

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("CREATURE_RANKER_API_BASE_URL", "https://bestiary.example")
        monkeypatch.setenv("CREATURE_RANKER_READ_TIMEOUT", "5")
        cfg = CreatureRankerSettings()
        assert cfg.api_base_url == "https://bestiary.example"
        assert cfg.read_timeout == 5.0


class TestCli:
    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc:
            app(["version"])
        assert exc.value.code == 0
        assert capsys.readouterr().out.strip() == __version__

    @pytest.mark.parametrize("ranking, code", [(object(), 0), (None, 1)])
    def test_run_exit_code(self, monkeypatch, ranking, code):
        from creature_ranker import pipeline

        async def fake_run_once(cfg=None, **kwargs):
            return ranking

        monkeypatch.setattr(pipeline, "run_once", fake_run_once)
        with pytest.raises(SystemExit) as exc:
            app(["run"])
        assert exc.value.code == code

    def test_run_reports_fetch_error_once(self, monkeypatch, caplog, capsys):
        import httpx

        from creature_ranker import pipeline

        real_client = pipeline.CreatureApiClient

        def client_factory(base_url=None, path=None):
            return real_client(
                base_url="https://api.test",
                path="/creatures/list",
                transport=httpx.MockTransport(lambda request: httpx.Response(503)),
            )

        monkeypatch.setattr(pipeline, "CreatureApiClient", client_factory)

        with caplog.at_level("ERROR"):
            with pytest.raises(SystemExit) as exc:
                app(["run"])

        message = "Error when trying to fetch creatures ::: Service Unavailable"
        captured = capsys.readouterr()
        logged = [r.getMessage() for r in caplog.records]
        total = captured.err.count(message) + sum(m.count(message) for m in logged)
        assert exc.value.code == 1
        assert total == 1
        assert captured.out == ""
