from pathlib import Path

import pytest
from pydantic import ValidationError

from progopts.config import OptionConfig, ProgramConfig, loader
from progopts.exceptions import DuplicateOptionError
from progopts.readers import OneOfReader, RangeReader
from progopts.value_type import ValueType

YAML_CONFIG = """
program: sample
footer: "filename ..."
options:
  - name: host
    short: h
    description: host name
    type: str
    required: true
  - name: port
    short: p
    description: port number
    type: int
    required: false
    default: 80
    range: [1, 65535]
  - name: type
    short: t
    description: protocol type
    type: str
    required: false
    default: http
    one_of: [http, https, ssh, ftp]
  - name: gzip
    description: gzip when transfer
"""

TOML_CONFIG = """
program = "sample"

[[options]]
name = "ratio"
short = "r"
type = "float"
default = 0.5
range = [0, 1]

[[options]]
name = "verbose"
short = "v"
"""


def test_loader_yaml(tmp_path):
    path = tmp_path / "options.yaml"
    path.write_text(YAML_CONFIG)
    options = loader(path)

    assert options.program_name == "sample"
    assert options.footer == "filename ..."
    assert [option.name for option in options.registry] == ["host", "port", "type", "gzip"]
    assert isinstance(options.registry.get("port").reader, RangeReader)
    assert isinstance(options.registry.get("type").reader, OneOfReader)

    assert options.parse("sample -h example.com -t ssh --gzip")
    assert options.get("host", str) == "example.com"
    assert options.get("port", int) == 80
    assert options.get("type", str) == "ssh"
    assert options.exists("gzip")

    assert not options.parse("sample -h example.com -p 70000")


def test_loader_toml(tmp_path):
    path = tmp_path / "options.toml"
    path.write_text(TOML_CONFIG)
    options = loader(str(path))

    ratio = options.registry.get("ratio")
    assert ratio.value_type is ValueType.FLOATING_POINT
    assert ratio.default == 0.5
    assert options.parse(["sample", "-vr", "0.25"])
    assert options.get("ratio", float) == 0.25
    assert options.exists("verbose")
    assert not options.parse(["sample", "-r", "1.5"])


def test_loader_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        loader(tmp_path / "missing.yaml")


def test_loader_unsupported_format(tmp_path):
    path = tmp_path / "options.json"
    path.write_text("{}")
    with pytest.raises(ValueError, match="Unsupported config format"):
        loader(path)


def test_loader_requires_mapping(tmp_path):
    path = tmp_path / "options.yaml"
    path.write_text("- just\n- a list\n")
    with pytest.raises(ValueError, match="dictionary"):
        loader(path)


def test_loader_rejects_bad_path_type():
    with pytest.raises(TypeError):
        loader(42)


def test_loader_duplicate_option(tmp_path):
    path = tmp_path / "options.yaml"
    path.write_text("options:\n  - name: a\n  - name: a\n")
    with pytest.raises(DuplicateOptionError):
        loader(path)


@pytest.mark.parametrize(
    "entry",
    [
        {"name": "flag", "required": True},
        {"name": "flag", "default": 1},
        {"name": "flag", "range": [1, 2]},
        {"name": "x", "type": "int", "range": [1, 2], "one_of": [1]},
        {"name": "x", "type": "str", "range": [1, 2]},
        {"name": "x", "short": "xy"},
        {"name": "x", "type": "list"},
        {"name": "x", "type": "int", "range": [0.5, 10]},
        {"name": "x", "type": "int", "one_of": [1.5, 2]},
        {"name": "x", "type": "int", "default": 2.5},
        {"name": "x", "type": "int", "one_of": ["a", 2]},
        {"name": "x", "type": "float", "range": ["low", 1.0]},
        {"name": "x", "type": "float", "default": "half"},
    ],
)
def test_option_config_validation(entry):
    with pytest.raises(ValidationError):
        OptionConfig.model_validate(entry)


def test_program_config_defaults():
    config = ProgramConfig.model_validate({})
    options = config.to_program_options()
    assert options.program_name == ""
    assert len(options.registry) == 0


def test_option_config_accepts_whole_floats_for_int():
    config = OptionConfig.model_validate(
        {"name": "n", "type": "int", "default": 2.0, "one_of": [1, 2.0]}
    )
    assert config.converted_default() == 2
    assert config.build_reader() == OneOfReader(1, 2)


def test_valued_entries_are_required_by_default():
    config = ProgramConfig.model_validate(
        {
            "options": [
                {"name": "host", "type": "str"},
                {"name": "port", "type": "int", "required": False, "default": 80},
                {"name": "verbose"},
            ]
        }
    )
    options = config.to_program_options()
    assert options.registry.get("host").is_required
    assert not options.registry.get("port").is_required
    assert not options.registry.get("verbose").is_required
    assert not options.parse(["sample"])
    assert options.errors == ["missing required option: --host"]


def test_loader_example_file():
    options = loader(Path(__file__).parents[1] / "examples" / "sample.yaml")
    assert options.parse(["sample", "-h", "example.com"])
    assert options.get("port", int) == 80
    assert options.get("type", str) == "http"
