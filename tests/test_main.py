import pytest

from spotmenu import main as main_module
from spotmenu.core.config import Config
from spotmenu.core.errors import ConfigurationError, FatalSessionError, SetupCancelled
from spotmenu.main import build_parser, load_or_setup


@pytest.fixture(autouse=True)
def no_log_file(monkeypatch):
    monkeypatch.setattr(main_module, "setup_logging", lambda level: None)


class TestParser:
    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.command is None
        assert args.theme == ""

    def test_theme(self):
        assert build_parser().parse_args(["--theme", "x.rasi"]).theme == "x.rasi"

    def test_setup_options(self):
        args = build_parser().parse_args(["setup", "--port", "9000"])
        assert args.command == "setup"
        assert args.host == "localhost"
        assert args.port == 9000


class TestLoadOrSetup:
    def test_missing_config_runs_setup(self, config_manager, monkeypatch, config):
        calls = []

        def fake_setup(manager, host, port):
            calls.append((host, port))
            return config

        monkeypatch.setattr(main_module, "run_setup", fake_setup)

        assert load_or_setup(config_manager, "localhost", 8080) is config
        assert calls == [("localhost", 8080)]

    def test_incomplete_config_runs_setup(self, config_manager, monkeypatch, config):
        config_manager.save(Config())
        monkeypatch.setattr(main_module, "run_setup", lambda manager, host, port: config)

        assert load_or_setup(config_manager, "localhost", 8080) is config

    def test_complete_config(self, config_manager, monkeypatch, config):
        config_manager.save(config)
        monkeypatch.setattr(main_module, "run_setup", pytest.fail)

        assert load_or_setup(config_manager, "localhost", 8080) == config


class TestExitStatus:
    def fail_with(self, monkeypatch, error):
        def start(args, config_manager):
            raise error

        monkeypatch.setattr(main_module, "start", start)

    def test_success(self, monkeypatch):
        monkeypatch.setattr(main_module, "start", lambda args, config_manager: None)
        assert main_module.main([]) == 0

    @pytest.mark.parametrize(
        "error",
        [FatalSessionError("player"), ConfigurationError("broken")],
    )
    def test_fatal_errors(self, monkeypatch, error):
        self.fail_with(monkeypatch, error)
        assert main_module.main([]) == 1

    def test_setup_cancelled(self, monkeypatch, capsys):
        self.fail_with(monkeypatch, SetupCancelled())
        assert main_module.main(["setup"]) == 0
        assert "Setup cancelled." in capsys.readouterr().out
