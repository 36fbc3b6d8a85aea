from scripts import generate_registrations


def test_yaml_to_file(tmp_path):
    src = tmp_path / "demo.ru.yaml"
    src.write_text('"Hello {name}!": "Привет {name}!"\n', encoding="utf-8")
    out = tmp_path / "translations_ru.py"
    assert generate_registrations.main([str(src), "--locale", "ru", "-o", str(out)]) == 0
    text = out.read_text(encoding="utf-8")
    assert "i18nx.register('Hello {name}!', 'ru', 'Привет {name}!')" in text
    assert "# Source: demo.ru.yaml" in text


def test_json_to_stdout(tmp_path, capsys):
    src = tmp_path / "demo.json"
    src.write_text('{"Hello": {"de": "Hallo"}}', encoding="utf-8")
    assert generate_registrations.main([str(src)]) == 0
    assert "i18nx.register('Hello', 'de', 'Hallo')" in capsys.readouterr().out


def test_json_suffix_uses_json_parser(tmp_path, capsys):
    # valid YAML but not valid JSON
    src = tmp_path / "demo.json"
    src.write_text("Hello: Hallo\n", encoding="utf-8")
    assert generate_registrations.main([str(src)]) == 1
    assert "invalid JSON" in capsys.readouterr().err


def test_bad_document_exit_code(tmp_path, capsys):
    src = tmp_path / "bad.yaml"
    src.write_text("Hello:\n  - not\n  - allowed\n", encoding="utf-8")
    out = tmp_path / "out.py"
    assert generate_registrations.main([str(src), "-o", str(out)]) == 1
    assert not out.exists()
    assert "bad.yaml" in capsys.readouterr().err
