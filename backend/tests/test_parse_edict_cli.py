import json

from edict.tools.parse_edict import main

LINES = [
    "日 [ひ] /(n) sun/(P)/EntL1360890X/",
    "嗉嚢;そ嚢 [そのう] /(n) bird's crop/bird's craw/EntL2542030/",
]


def _write(tmp_path, lines, encoding="utf-8"):
    path = tmp_path / "edict2"
    path.write_text("\n".join(lines) + "\n", encoding=encoding)
    return path


def test_exports_json(tmp_path, capsys):
    source = _write(tmp_path, LINES)
    output = tmp_path / "out" / "records.json"
    exit_code = main(["--input", str(source), "--output", str(output), "--show", "1"])
    assert exit_code == 0
    payload = json.loads(output.read_text(encoding="utf-8"))
    assert [item["sequence"] for item in payload] == ["EntL1360890", "EntL2542030"]
    assert "Parsed records: 2" in capsys.readouterr().out


def test_reads_euc_jp(tmp_path):
    lines = ["日 [ひ] /(n) sun/(P)/EntL1360890X/", "水 [みず] /(n) water/(P)/EntL1513070X/"]
    source = _write(tmp_path, lines, encoding="euc-jp")
    assert main(["--input", str(source), "--encoding", "euc-jp", "--show", "0"]) == 0


def test_halting_error_exits_non_zero(tmp_path, capsys):
    source = _write(tmp_path, [LINES[0], "bad line", LINES[1]])
    assert main(["--input", str(source), "--no-skip"]) == 1
    assert "line 2: " in capsys.readouterr().err


def test_skip_line_option(tmp_path):
    source = _write(tmp_path, [LINES[0], "bad line", LINES[1]])
    assert main(["--input", str(source), "--skip-line", "2"]) == 0


def test_missing_file(tmp_path, capsys):
    assert main(["--input", str(tmp_path / "missing")]) == 1
    assert "Cannot read" in capsys.readouterr().err
