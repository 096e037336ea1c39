import json

from click.testing import CliRunner

from jtd_derive.jtd_derive import jtd_derive

MODELS = "jtd_derive.tests.models"


def invoke(*args):
    return CliRunner().invoke(jtd_derive, list(args))


def test_json_to_stdout():
    result = invoke(f"{MODELS}:Shape")
    assert result.exit_code == 0, result.output
    schema = json.loads(result.output)
    assert schema["discriminator"] == "kind"
    assert list(schema["mapping"]) == ["Circle", "Square"]


def test_output_file(tmp_path):
    out = tmp_path / "line.json"
    result = invoke(f"{MODELS}:Line", str(out))
    assert result.exit_code == 0, result.output
    schema = json.loads(out.read_text())
    assert schema["properties"]["start"] == {"ref": "Point"}
    assert result.output == ""


def test_compact_output():
    result = invoke(f"{MODELS}:Color", "--indent", "0")
    assert result.output == '{"enum": ["RED", "GREEN", "BLUE"]}\n'


def test_naming_and_inline_flags():
    result = invoke(f"{MODELS}:Line", "--naming", "long")
    assert json.loads(result.output)["properties"]["end"] == {"ref": f"{MODELS}.Point"}

    result = invoke(f"{MODELS}:Line", "--prefer-inline")
    assert "definitions" not in json.loads(result.output)


def test_config_file(tmp_path):
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"naming": "long", "int_type": "uint8"}))
    result = invoke(f"{MODELS}:Tree", "--config", str(config))
    assert result.exit_code == 0, result.output
    schema = json.loads(result.output)
    tree = schema["definitions"][f"{MODELS}.Tree"]
    assert tree["properties"]["value"] == {"type": "uint8"}


def test_markdown():
    result = invoke(f"{MODELS}:Line", "--format", "markdown")
    assert result.exit_code == 0, result.output
    assert f"jtd_derive {MODELS}:Line --format markdown -->" in result.output
    assert "# Line" in result.output


def test_markdown_without_generation_comment(tmp_path):
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"add_generation_comment": False}))
    result = invoke(f"{MODELS}:Line", "-f", "markdown", "-c", str(config))
    assert "Generated by" not in result.output


def test_derivation_error():
    result = invoke(f"{MODELS}:UntaggedShape")
    assert result.exit_code == 1
    assert "require a tag" in result.output


def test_mixed_variants_error_lists_notes():
    result = invoke(f"{MODELS}:Mixed")
    assert result.exit_code == 1
    assert "here's a unit variant of `Mixed`" in result.output
    assert "here's a struct variant of `Mixed`" in result.output


def test_bad_target():
    result = invoke("jtd_derive.tests.nowhere:Shape")
    assert result.exit_code == 2
    assert "cannot import module" in result.output
