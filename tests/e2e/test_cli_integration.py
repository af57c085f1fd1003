"""End-to-end tests for the command line interface."""

import json
import logging

import pytest
import yaml

from pattern_catalog.cli.main import main


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    level = root.level
    handlers = root.handlers[:]
    yield
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def run_cli(capsys, *argv):
    main(list(argv))
    return capsys.readouterr()


class TestRunCommand:
    """Test running demos from the CLI."""

    def test_default_runs_everything_in_order(self, capsys):
        out = run_cli(capsys).out

        assert out.startswith("== Chain Of Responsibility ==\n")
        assert out.index("== Visitor ==") < out.index("== Abstract Factory ==")
        assert out.index("== Singleton ==") < out.index("== Adapter ==")
        assert out.rstrip().endswith("Running project https://github.com/zsergey/realProject ...")

    def test_run_selected(self, capsys):
        out = run_cli(capsys, "run", "interpreter").out

        assert out == "== Interpreter ==\nIs Developer an Apple Developer true\nDoes developer knows Java EE true\n"

    def test_run_without_headers(self, capsys):
        out = run_cli(capsys, "--no-headers", "run", "interpreter").out

        assert out == "Is Developer an Apple Developer true\nDoes developer knows Java EE true\n"

    def test_run_category(self, capsys):
        out = run_cli(capsys, "run", "--category", "creational").out

        headers = [line for line in out.splitlines() if line.startswith("== ")]
        assert headers == [
            "== Abstract Factory ==",
            "== Builder ==",
            "== Factory Method ==",
            "== Prototype ==",
            "== Singleton ==",
        ]

    def test_run_json(self, capsys):
        data = json.loads(run_cli(capsys, "--format", "json", "run", "proxy").out)

        assert data[0]["name"] == "proxy"
        assert data[0]["category"] == "structural"

    def test_unknown_demo_fails(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["run", "nonexistent"])

        captured = capsys.readouterr()
        assert exc_info.value.code == 1
        assert "nonexistent" in captured.err
        assert captured.out == ""


class TestListAndShow:
    """Test catalog inspection commands."""

    def test_list(self, capsys):
        lines = run_cli(capsys, "list").out.splitlines()

        assert len(lines) == 23
        assert lines[0].split() == ["chain-of-responsibility", "behavioral"]

    def test_list_yaml(self, capsys):
        data = yaml.safe_load(run_cli(capsys, "--format", "yaml", "list").out)

        assert len(data) == 23
        assert data[-1]["name"] == "proxy"

    def test_show(self, capsys):
        out = run_cli(capsys, "show", "decorator").out

        assert out.startswith("== Decorator ==\nCategory: Structural\n")


class TestConfiguration:
    """Test configuration handling from the CLI."""

    def test_config_file_limits_categories(self, capsys, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("catalog:\n  categories: [structural]\n  show_headers: false\n")

        lines = run_cli(capsys, "--config", str(config_file), "list").out.splitlines()

        assert len(lines) == 7
        assert all(line.split()[1] == "structural" for line in lines)

    def test_missing_config_file_fails(self, capsys, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            main(["--config", str(tmp_path / "absent.yaml")])

        assert exc_info.value.code == 1
        assert "not found" in capsys.readouterr().err

    def test_undecodable_config_file_fails(self, capsys, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_bytes(b"catalog:\n  show_headers: \xff\xfe\n")

        with pytest.raises(SystemExit) as exc_info:
            main(["--config", str(config_file), "list"])

        captured = capsys.readouterr()
        assert exc_info.value.code == 1
        assert captured.err.startswith("Error: Cannot parse configuration file")
        assert captured.out == ""
