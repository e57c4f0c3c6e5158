from docsum.cli import main

TEXT = "The cat sat on the mat. Dogs bark loudly at night. The cat likes the mat."


def _write(tmp_path, name, content):
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return path


def test_summarize_to_stdout(tmp_path, capsys):
    src = _write(tmp_path, "doc.txt", TEXT)
    assert main(["summarize", "--input", str(src), "--percentage", "67"]) == 0
    assert capsys.readouterr().out.strip() == "The cat sat on the mat. The cat likes the mat."


def test_summarize_to_file(tmp_path):
    src = _write(tmp_path, "doc.txt", TEXT)
    out = tmp_path / "out" / "summary.txt"
    assert main(["summarize", "--input", str(src), "--percentage", "34", "--output", str(out)]) == 0
    assert out.read_text(encoding="utf-8") == "The cat sat on the mat. "


def test_existing_output_needs_force(tmp_path):
    src = _write(tmp_path, "doc.txt", TEXT)
    out = _write(tmp_path, "summary.txt", "old")
    assert main(["summarize", "--input", str(src), "--output", str(out)]) == 2
    assert out.read_text(encoding="utf-8") == "old"
    assert main(["summarize", "--input", str(src), "--output", str(out), "--force"]) == 0
    assert out.read_text(encoding="utf-8") != "old"


def test_missing_input(tmp_path, capsys):
    assert main(["keywords", "--input", str(tmp_path / "nope.txt")]) == 2
    assert "ERROR: input not found" in capsys.readouterr().err


def test_non_utf8_input(tmp_path):
    src = tmp_path / "latin1.txt"
    src.write_bytes("caf\xe9 au lait.".encode("latin-1"))
    assert main(["summarize", "--input", str(src)]) == 2


def test_keywords_with_custom_stopwords(tmp_path, capsys):
    src = _write(tmp_path, "doc.txt", "The alpha beta. The alpha gamma.")
    stop = _write(tmp_path, "stop.txt", "the\n")
    assert main(["--stopwords", str(stop), "keywords", "--input", str(src), "--limit", "2"]) == 0
    assert capsys.readouterr().out.strip() == "alpha, beta"


def test_negative_limit_rejected(tmp_path):
    src = _write(tmp_path, "doc.txt", TEXT)
    assert main(["keywords", "--input", str(src), "--limit", "-3"]) == 2


def test_directory_as_input(tmp_path, capsys):
    assert main(["summarize", "--input", str(tmp_path)]) == 2
    assert "ERROR: cannot read input" in capsys.readouterr().err


def test_directory_as_output(tmp_path, capsys):
    src = _write(tmp_path, "doc.txt", TEXT)
    assert main(["summarize", "--input", str(src), "--output", str(tmp_path), "--force"]) == 2
    assert "ERROR: cannot write output" in capsys.readouterr().err


def test_malformed_percentage_in_environment(tmp_path, capsys, monkeypatch):
    monkeypatch.setenv("DOCSUM_PERCENTAGE", "half")
    src = _write(tmp_path, "doc.txt", TEXT)
    assert main(["summarize", "--input", str(src)]) == 2
    assert "ERROR: invalid configuration" in capsys.readouterr().err


def test_rejected_keyword_limit_in_environment(tmp_path, capsys, monkeypatch):
    monkeypatch.setenv("DOCSUM_KEYWORD_LIMIT", "-4")
    src = _write(tmp_path, "doc.txt", TEXT)
    assert main(["keywords", "--input", str(src)]) == 2
    assert "ERROR: invalid configuration" in capsys.readouterr().err
