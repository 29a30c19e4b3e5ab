"""
Tests for the mizan command line.
"""

import json

import pytest

from mizan_morphology.cli import main


@pytest.fixture(autouse=True)
def no_env_data_dir(monkeypatch):
    monkeypatch.delenv("MIZAN_DATA_DIR", raising=False)
    monkeypatch.delenv("MIZAN_LOG_LEVEL", raising=False)


def test_generate(capsys):
    assert main(["generate", "كتب", "فاعل"]) == 0
    assert capsys.readouterr().out.strip() == "كاتب"


def test_generate_unknown_root(capsys):
    assert main(["generate", "xyz", "فاعل"]) == 1
    assert "Unknown root: xyz" in capsys.readouterr().err


def test_generate_all(capsys):
    assert main(["generate-all", "رمي"]) == 0
    words = capsys.readouterr().out.split()
    assert len(words) == 8
    assert "رامٍ" in words


def test_validate(capsys):
    assert main(["validate", "كتب", "مكتوب"]) == 0
    assert json.loads(capsys.readouterr().out) == {
        "valid": True, "root": "كتب", "scheme": "مفعول"}


def test_classify(capsys):
    assert main(["classify", "وقي"]) == 0
    assert capsys.readouterr().out.strip() == "LAFIF (لفيف)"
    assert main(["classify", "كت"]) == 1


def test_listings(capsys):
    assert main(["roots"]) == 0
    roots = capsys.readouterr().out.split()
    assert roots == sorted(roots)

    assert main(["schemes"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert "فاعل={1}ا{2}{3}" in lines
    assert lines == sorted(lines, key=lambda line: line.split("=")[0])


def test_missing_group(capsys):
    assert main(["group", "nothing_here"]) == 1
    assert main(["delete-group", "nothing_here"]) == 1


def test_stats_and_debug(capsys):
    assert main(["stats"]) == 0
    assert json.loads(capsys.readouterr().out)["totalRoots"] == 21

    assert main(["debug-hash"]) == 0
    assert len(json.loads(capsys.readouterr().out)) == 16

    assert main(["debug-tree"]) == 0
    assert "root" in json.loads(capsys.readouterr().out)


def test_init_and_administration(tmp_path, capsys):
    data_dir = str(tmp_path / "data")
    assert main(["init"]) == 1
    assert main(["--data-dir", data_dir, "init"]) == 0
    assert (tmp_path / "data" / "racines.txt").exists()
    assert main(["--data-dir", data_dir, "init"]) == 1
    assert main(["--data-dir", data_dir, "init", "--force"]) == 0

    assert main(["--data-dir", data_dir, "add-scheme", "مفعال", "م{1}{2}ا{3}"]) == 0
    assert main(["--data-dir", data_dir, "save-group", "exception_كتب_مفعال",
                 "replace=ا>ى", "--comment", "test"]) == 0
    capsys.readouterr()

    assert main(["--data-dir", data_dir, "generate", "كتب", "مفعال"]) == 0
    assert capsys.readouterr().out.strip() == "مكتىب"

    assert main(["--data-dir", data_dir, "group", "exception_كتب_مفعال"]) == 0
    group = json.loads(capsys.readouterr().out)
    assert group["comment"] == "test"
    assert group["rules"] == [{"type": "replace", "to": "ى", "order": 0, "from": "ا"}]

    assert main(["--data-dir", data_dir, "update-scheme", "مفعال", "م{1}{2}{3}"]) == 0
    assert main(["--data-dir", data_dir, "delete-group", "exception_كتب_مفعال"]) == 0
    assert main(["--data-dir", data_dir, "delete-scheme", "مفعال"]) == 0
    assert main(["--data-dir", data_dir, "delete-scheme", "مفعال"]) == 1
    capsys.readouterr()

    assert main(["--data-dir", data_dir, "groups"]) == 0
    assert "exception_كتب_مفعال" not in capsys.readouterr().out
