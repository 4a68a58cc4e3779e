import io
import json
from pathlib import Path

import pytest

from form_tree.__main__ import main


_RECORD = {
    "identification_type": {"selection": "passport"},
    "identification_type>passport>id_for_passport": {"content": "Q123456789"},
}


def test_cli_builds_single_record_from_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = tmp_path / "record.json"
    _ = source.write_text(json.dumps(_RECORD), encoding="utf-8")

    main([str(source)])

    assert json.loads(capsys.readouterr().out) == [
        {
            "fieldId": "identification_type",
            "content": "",
            "selected": [
                {
                    "fieldId": "passport",
                    "content": "",
                    "selected": [{"fieldId": "id_for_passport", "content": "Q123456789", "selected": []}],
                }
            ],
        }
    ]


def test_cli_builds_record_list_from_stdin(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    payload = [{"a/b": {"content": "1"}}, {"c": {"selection": ["x", "y"]}}]
    monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps(payload)))

    main(["--sep", "/", "--indent", "0"])

    trees = json.loads(capsys.readouterr().out)
    assert len(trees) == 2
    assert trees[0][0]["selected"][0] == {"fieldId": "b", "content": "1", "selected": []}
    assert [child["fieldId"] for child in trees[1][0]["selected"]] == ["x", "y"]


def test_cli_reports_malformed_key(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = tmp_path / "bad.json"
    _ = source.write_text(json.dumps({"a>>b": {"content": "x"}}), encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main([str(source)])

    assert excinfo.value.code == 1
    assert "error: record 0 failed at key 'a>>b': empty segment" in capsys.readouterr().err


def test_cli_rejects_non_object_input(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = tmp_path / "scalar.json"
    _ = source.write_text("[1, 2]", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main([str(source)])

    assert excinfo.value.code == 1
    assert "input must be a JSON object" in capsys.readouterr().err


def test_cli_reports_unreadable_input(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main([str(tmp_path / "missing.json")])

    assert excinfo.value.code == 1
    assert "error: cannot read" in capsys.readouterr().err


def test_cli_reports_input_that_is_not_utf8(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = tmp_path / "latin1.json"
    _ = source.write_bytes(b"\xff")

    with pytest.raises(SystemExit) as excinfo:
        main([str(source)])

    assert excinfo.value.code == 1
    assert "error: cannot read" in capsys.readouterr().err
