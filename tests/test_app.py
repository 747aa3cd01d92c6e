import json
import logging

from tally_counter import app
from tally_counter.config import CONFIG_ENV_VAR


class FakeApplication:
    def __init__(self, argv):
        self.argv = argv

    def setStyle(self, style):
        pass

    def setApplicationName(self, name):
        pass

    def exec(self):
        return 0


class FakeWindow:
    def __init__(self, config):
        self.config = config

    def show(self):
        pass


def test_main_configures_logging_once_with_config_level(tmp_path, monkeypatch):
    path = tmp_path / "tally_config.json"
    path.write_text(json.dumps({"log_level": "debug"}))
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

    levels = []

    def fake_configure(level=logging.INFO):
        levels.append(level)
        return logging.getLogger("tally_counter")

    monkeypatch.setattr(app, "configure_logging", fake_configure)
    monkeypatch.setattr(app, "QApplication", FakeApplication)
    monkeypatch.setattr(app, "CounterWindow", FakeWindow)

    assert app.main([]) == 0
    assert levels == ["DEBUG"]
