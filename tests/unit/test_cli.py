"""
Tests for the bindery CLI.
"""
import json

import pytest

from bindery import __version__
from bindery.cli import describe, main
from bindery.features import FEATURE_MODULES
from bindery.registry.api_registry import APIRegistry
from bindery.utils.settings import Settings


@pytest.fixture
def settings_file(tmp_path):
    def write(**values):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps(values))
        return str(path)
    return write


class TestDescribe:

    def test_summary(self):
        summary = describe(Settings.defaults(), registry=APIRegistry("describe"))

        assert summary["module"] == "bindery_api"
        assert summary["version"] == __version__
        assert summary["conflictPolicy"] == "last_write_wins"
        assert [c["name"] for c in summary["callbacks"]] == list(FEATURE_MODULES)
        assert summary["callbacks"][0]["source"] == "bindery.features.info"
        assert "digest" in summary["entries"]
        assert summary["entries"] == sorted(summary["entries"])


class TestMain:

    def test_describe_prints_json(self, settings_file, capsys):
        code = main(["--settings", settings_file(module_name="host"), "describe"])

        assert code == 0
        output = json.loads(capsys.readouterr().out)
        assert output["module"] == "host"
        assert len(output["callbacks"]) == len(FEATURE_MODULES)

    def test_describe_respects_disabled_features(self, settings_file, capsys):
        main(["--settings", settings_file(disabled_features=["hashing"]), "describe"])

        output = json.loads(capsys.readouterr().out)
        assert "hashing" not in [c["name"] for c in output["callbacks"]]
        assert "digest" not in output["entries"]

    def test_invalid_settings_exit_code(self, settings_file, capsys):
        code = main(["--settings", settings_file(disabled_features=["teleport"]), "describe"])

        assert code == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "teleport" in captured.err

    def test_command_required(self):
        with pytest.raises(SystemExit):
            main([])
