from __future__ import annotations

import json
from pathlib import Path

import pytest

from kygeo import cli


def test_detect_command_writes_json_output(tmp_path: Path) -> None:
    article_path = tmp_path / "article.json"
    article_path.write_text(
        json.dumps(
            {
                "title": "Police in Corbin responded to a call",
                "body": "Officers said nobody was hurt.",
            }
        ),
        encoding="utf-8",
    )
    output_path = tmp_path / "out" / "result.json"

    args = cli._parse_args(
        ["detect", str(article_path), "--output", str(output_path), "--pretty"]
    )
    assert args.command == "detect"
    assert cli._run_detect(args) == 0

    payload = json.loads(output_path.read_text(encoding="utf-8"))
    assert payload["counties"] == ["Whitley", "Knox", "Laurel"]
    assert payload["county"] == "Whitley"
    assert payload["city"] == "corbin"


def test_detect_command_accepts_inline_text(capsys) -> None:
    args = cli._parse_args(["detect", "--text", "An event in Fayette County"])
    assert cli._run_detect(args) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload["counties"] == ["Fayette"]
    assert payload["city"] is None


def test_detect_command_uses_custom_gazetteer(tmp_path: Path, capsys) -> None:
    gazetteer_path = tmp_path / "gazetteer.json"
    gazetteer_path.write_text(
        json.dumps({"counties": ["Fayette"], "cities": {"lexington": ["Fayette"]}}),
        encoding="utf-8",
    )
    args = cli._parse_args(
        ["detect", "--text", "Crews in Lexington", "--gazetteer", str(gazetteer_path)]
    )
    assert cli._run_detect(args) == 0

    payload = json.loads(capsys.readouterr().out)
    assert payload == {
        "counties": ["Fayette"],
        "county": "Fayette",
        "city": "lexington",
        "kentucky_context": False,
        "is_kentucky": True,
    }


def test_main_exits_with_error_for_invalid_gazetteer(tmp_path: Path) -> None:
    gazetteer_path = tmp_path / "gazetteer.json"
    gazetteer_path.write_text(
        json.dumps({"counties": ["Knox"], "cities": {"corbin": ["Laurel"]}}),
        encoding="utf-8",
    )
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["detect", "--text", "x", "--gazetteer", str(gazetteer_path)])
    assert excinfo.value.code == 1


def test_main_exits_with_error_for_badly_shaped_gazetteer(tmp_path: Path) -> None:
    gazetteer_path = tmp_path / "gazetteer.json"
    gazetteer_path.write_text(
        json.dumps({"counties": ["Knox"], "cities": {"corbin": 5}}),
        encoding="utf-8",
    )
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["detect", "--text", "x", "--gazetteer", str(gazetteer_path)])
    assert excinfo.value.code == 1


def test_main_exits_with_error_when_gazetteer_is_a_directory(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["detect", "--text", "x", "--gazetteer", str(tmp_path)])
    assert excinfo.value.code == 1


def test_main_exits_with_error_for_missing_article(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["detect", str(tmp_path / "missing.json")])
    assert excinfo.value.code == 1


def test_gazetteer_command_prints_summary(capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["gazetteer"])
    assert excinfo.value.code == 0
    assert "Counties" in capsys.readouterr().out
