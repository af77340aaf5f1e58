"""Tests for the command-line interface."""

import json
import logging

import pytest

from chaincode_builder.logging_config import PACKAGE_LOGGER, configure_logging
from chaincode_builder.main import create_parser, main


@pytest.fixture
def project_file(tmp_path):
    path = tmp_path / "project.json"
    assert main(["init-project", str(path), "--name", "Tracker"]) == 0
    return path


def test_init_project_writes_starter(project_file):
    data = json.loads(project_file.read_text(encoding="utf-8"))

    assert data["chaincodeName"] == "Tracker"
    assert data["chaincodeVersion"] == "1.0"
    assert [b["blockId"] for b in data["canvas"]] == [
        "init",
        "createAsset",
        "readAsset",
        "updateAsset",
        "deleteAsset",
        "query",
    ]


def test_init_project_refuses_overwrite(project_file, capsys):
    assert main(["init-project", str(project_file)]) == 1
    assert "already" in capsys.readouterr().out
    assert main(["init-project", str(project_file), "--force"]) == 0


def test_generate_to_file(project_file, tmp_path):
    output = tmp_path / "chaincode.go"

    assert main(["generate", str(project_file), "-o", str(output)]) == 0

    code = output.read_text(encoding="utf-8")
    assert code.startswith("// Generated Chaincode: Tracker v1.0\n")
    assert "func (s *SmartContract) QueryAssets(" in code


def test_generate_overrides(project_file, tmp_path):
    output = tmp_path / "chaincode.go"
    args = ["generate", str(project_file), "-o", str(output), "--name", "Other", "--version", "2.0"]

    assert main(args) == 0
    assert output.read_text(encoding="utf-8").startswith("// Generated Chaincode: Other v2.0\n")


def test_generate_with_config_file(tmp_path):
    project = tmp_path / "project.json"
    project.write_text(
        json.dumps({"canvas": [{"instanceId": "r1", "blockId": "readAsset"}]}),
        encoding="utf-8",
    )
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"default_asset_type": "Deed"}), encoding="utf-8")
    output = tmp_path / "out.go"

    assert main(["generate", str(project), "--config", str(config), "-o", str(output)]) == 0
    assert "func (s *SmartContract) ReadDeed(" in output.read_text(encoding="utf-8")


def test_generate_to_stdout_with_metadata(project_file, capsys):
    assert main(["generate", str(project_file), "--verbose"]) == 0

    captured = capsys.readouterr()
    assert "InitLedger" in captured.out
    assert "Generation Metadata" in captured.err
    assert "Generation Metadata" not in captured.out


def test_piped_stdout_is_exact_source(tmp_path, capsys):
    project = tmp_path / "project.json"
    assert main(["init-project", str(project), "--name", "CC"]) == 0
    capsys.readouterr()

    assert main(["generate", str(project)]) == 0
    out = capsys.readouterr().out

    signature = (
        "func (s *SmartContract) CreateAsset(ctx contractapi.TransactionContextInterface, "
        "id string, description string, owner string, value int) error {"
    )
    assert len(signature) == 144
    assert signature in out.splitlines()
    assert out.startswith("// Generated Chaincode: CC v1.0\n")
    assert "═" not in out

    written = tmp_path / "chaincode.go"
    assert main(["generate", str(project), "-o", str(written)]) == 0
    assert written.read_text(encoding="utf-8") == out


def test_generate_prints_warnings(tmp_path, capsys):
    project = tmp_path / "project.json"
    project.write_text(
        json.dumps({"canvas": [{"instanceId": "e1", "blockId": "emitEvent"}]}),
        encoding="utf-8",
    )
    assert main(["generate", str(project), "-o", str(tmp_path / "out.go")]) == 0
    assert "Warnings" in capsys.readouterr().out


def test_generate_missing_project(tmp_path, capsys):
    assert main(["generate", str(tmp_path / "absent.json")]) == 1
    assert "Failed to load project" in capsys.readouterr().out


def test_generate_bad_config(project_file, tmp_path, capsys):
    assert main(["generate", str(project_file), "--config", str(tmp_path / "nope.json")]) == 1
    assert "Configuration error" in capsys.readouterr().out


def test_generate_unsupported_language(project_file, capsys):
    assert main(["generate", str(project_file), "--language", "cobol"]) == 1
    assert "Unsupported language" in capsys.readouterr().out


def test_generate_requires_input():
    with pytest.raises(SystemExit):
        main(["generate"])


def test_blocks_lists_palette(capsys):
    assert main(["blocks"]) == 0
    out = capsys.readouterr().out
    assert "createAsset" in out
    assert "emitEvent" in out


def test_list_languages(capsys):
    assert main(["--list-languages"]) == 0
    assert "golang" in capsys.readouterr().out


def test_language_info(capsys):
    assert main(["--language-info", "go"]) == 0
    assert main(["--language-info", "cobol"]) == 1


def test_no_command_prints_help(capsys):
    assert main([]) == 1
    assert "usage:" in capsys.readouterr().out


def test_log_level_is_case_insensitive():
    args = create_parser().parse_args(["--log-level", "debug", "blocks"])
    assert args.log_level == "DEBUG"


@pytest.fixture
def logging_reset():
    yield logging.getLogger(PACKAGE_LOGGER)
    configure_logging("WARNING")


def test_config_file_sets_log_level(project_file, tmp_path, logging_reset):
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"log_level": "DEBUG"}), encoding="utf-8")
    output = str(tmp_path / "out.go")

    assert main(["generate", str(project_file), "--config", str(config), "-o", output]) == 0
    assert logging_reset.level == logging.DEBUG


def test_log_level_flag_beats_config_file(project_file, tmp_path, logging_reset):
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"log_level": "DEBUG"}), encoding="utf-8")
    output = str(tmp_path / "out.go")
    args = ["--log-level", "error", "generate", str(project_file), "--config", str(config), "-o", output]

    assert main(args) == 0
    assert logging_reset.level == logging.ERROR


def test_configure_logging_replaces_handler():
    configure_logging("INFO")
    configure_logging("DEBUG")

    logger = logging.getLogger(PACKAGE_LOGGER)
    tagged = [h for h in logger.handlers if getattr(h, "_chaincode_builder", False)]
    assert len(tagged) == 1
    assert logger.level == logging.DEBUG

    configure_logging("WARNING")
