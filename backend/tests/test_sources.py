from edict.sources import iter_file_lines


def test_strips_line_terminators(tmp_path):
    path = tmp_path / "edict2"
    path.write_bytes("日 [ひ] /(n) sun/EntL1/\r\n水 [みず] /(n) water/EntL2/\n".encode("utf-8"))
    assert list(iter_file_lines(path)) == [
        "日 [ひ] /(n) sun/EntL1/",
        "水 [みず] /(n) water/EntL2/",
    ]


def test_keeps_line_without_final_newline(tmp_path):
    path = tmp_path / "edict2"
    path.write_text("A /x/EntL1/", encoding="utf-8")
    assert list(iter_file_lines(path)) == ["A /x/EntL1/"]
