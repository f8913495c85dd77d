# progopts — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Builds a `ProgramOptions` parser from option definitions in YAML or TOML."""
from __future__ import annotations

from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from progopts.logger import logger
from progopts.parser import ProgramOptions
from progopts.readers import Reader, one_of, range_reader
from progopts.value_type import ValueType


class OptionConfig(BaseModel):
    """One option entry. Entries without a `type` are flags."""

    name: str
    short: str | None = None
    description: str = ""
    type: ValueType | None = None
    required: bool | None = None
    default: int | float | str | None = None
    range: tuple[int | float, int | float] | None = None
    one_of: list[int | float | str] | None = None

    @field_validator("type", mode="before")
    @classmethod
    def validate_type(cls, value: Any) -> Any:
        if value is None or isinstance(value, ValueType):
            return value
        return ValueType(value)

    @field_validator("short")
    @classmethod
    def validate_short(cls, value: str | None) -> str | None:
        if value is not None and len(value) != 1:
            raise ValueError("short must be a single character")
        return value

    @model_validator(mode="after")
    def validate_reader_settings(self) -> OptionConfig:
        if self.type is None:
            if self.required or self.default is not None:
                raise ValueError(f"flag '{self.name}' cannot be required or have a default")
            if self.range is not None or self.one_of is not None:
                raise ValueError(f"flag '{self.name}' cannot have range or one_of")
        if self.range is not None and self.one_of is not None:
            raise ValueError(f"option '{self.name}' cannot have both range and one_of")
        if self.type is ValueType.STRING and self.range is not None:
            raise ValueError(f"option '{self.name}' is a string and cannot have a range")
        if self.type in (ValueType.INTEGRAL, ValueType.FLOATING_POINT):
            for value in self._declared_values():
                if isinstance(value, str):
                    raise ValueError(
                        f"option '{self.name}' is {self.type} and cannot use {value!r}"
                    )
                if (
                    self.type is ValueType.INTEGRAL
                    and isinstance(value, float)
                    and not value.is_integer()
                ):
                    raise ValueError(
                        f"option '{self.name}' is Integral and cannot use {value!r}"
                    )
        return self

    def _declared_values(self) -> list[Any]:
        values: list[Any] = [*(self.range or ()), *(self.one_of or ())]
        if self.default is not None:
            values.append(self.default)
        return values

    def build_reader(self) -> Reader | None:
        assert self.type is not None, "flags have no reader"
        if self.range is not None:
            begin, end = self.range
            if self.type is ValueType.INTEGRAL:
                return range_reader(int(begin), int(end))
            return range_reader(float(begin), float(end))
        if self.one_of is not None:
            return one_of(*(self._convert(value) for value in self.one_of))
        return None

    def converted_default(self) -> Any:
        if self.default is None:
            return None
        return self._convert(self.default)

    def _convert(self, value: Any) -> Any:
        assert self.type is not None, "flags have no values"
        return self.type.python_type(value)


class ProgramConfig(BaseModel):
    """Top-level option file model."""

    program: str = ""
    footer: str = ""
    allow_short_collisions: bool = False
    options: list[OptionConfig] = Field(default_factory=list)

    def to_program_options(self) -> ProgramOptions:
        program_options = ProgramOptions(
            program_name=self.program,
            footer=self.footer,
            allow_short_collisions=self.allow_short_collisions,
        )
        for option in self.options:
            if option.type is None:
                program_options.add_flag(option.name, option.short, option.description)
            else:
                program_options.add(
                    option.name,
                    option.short,
                    option.description,
                    option.type,
                    required=option.required is not False,
                    default=option.converted_default(),
                    reader=option.build_reader(),
                )
        return program_options


def loader(file_path: Path | str) -> ProgramOptions:
    """
    Load option definitions from a YAML or TOML file.

    Example (YAML):
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
            type: int
            required: false
            default: 80
            range: [1, 65535]
          - name: gzip
            description: gzip when transfer

    Valued entries are required unless they set `required: false`, the same
    as `ProgramOptions.add`. Numeric entries reject `range`, `one_of` and
    `default` values outside their category, e.g. `1.5` for an `int` option.

    Args:
        file_path (Path | str): Path to a `.yaml`, `.yml` or `.toml` file.

    Returns:
        ProgramOptions: A parser with every option declared.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the format is unsupported or the content is invalid.
        OptionDefinitionError: If the declared options conflict.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            raw_config = yaml.safe_load(config_file)
        elif suffix == ".toml":
            raw_config = toml.load(config_file)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    if not isinstance(raw_config, dict):
        raise ValueError(
            "Configuration file must contain a dictionary with a list of options.\n"
            "Example:\n"
            "program: 'sample'\n"
            "options:\n"
            "  - name: 'host'\n"
            "    type: 'str'"
        )

    config = ProgramConfig.model_validate(raw_config)
    logger.debug("Loaded %d option(s) from %s", len(config.options), path)
    return config.to_program_options()
