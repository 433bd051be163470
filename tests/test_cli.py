import io

from combiparse.cli import SAMPLE_DOCUMENT, main


def test_builtin_sample_agrees():
    assert main([]) == 0


def test_file_argument(tmp_path):
    path = tmp_path / "doc.json"
    path.write_text(SAMPLE_DOCUMENT, encoding="utf-8")
    assert main([str(path)]) == 0


def test_unparsable_file_fails_alike_in_both(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("[1,", encoding="utf-8")
    assert main([str(path)]) == 0


def test_standard_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO('{"a": [true, null]}'))
    assert main(["-"]) == 0


def test_missing_file(tmp_path, capsys):
    missing = tmp_path / "absent.json"
    assert main([str(missing)]) == 2
    assert "absent.json" in capsys.readouterr().err