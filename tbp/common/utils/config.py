"""
Load configuration from `config.toml`.
"""

import re
from pathlib import Path
from pydantic import BaseModel, field_validator

THIS_DIR = Path(__file__).parent.resolve()

CONFIG_FILE_PATH = THIS_DIR / "config.toml"


class Config(BaseModel):
    duration_placeholder: str
    mask_placeholder: str
    duration_patterns: list[str]  # alternatives, joined into one word-bounded pattern
    blank_line_pattern: str
    diff_context_lines: int

    @field_validator("duration_patterns")
    def patterns_compile(cls, value: list[str]) -> list[str]:
        for pattern in value:
            try:
                re.compile(pattern)
            except re.error as e:
                raise ValueError(f"Invalid duration pattern {pattern!r}: {e}") from e
        return value

    @field_validator("blank_line_pattern")
    def pattern_compiles(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as e:
            raise ValueError(f"Invalid blank line pattern {value!r}: {e}") from e
        return value

    @field_validator("diff_context_lines")
    def non_negative(cls, value: int) -> int:
        if value < 0:
            raise ValueError("Value must not be negative.")
        return value


def load_config(path: Path = CONFIG_FILE_PATH) -> Config:
    import tomli

    with open(path, "rb") as f:
        data = tomli.load(f)

    config_data = {k.lower(): v for k, v in data.items()}
    return Config(**config_data)


config = load_config()


def set_config(new_config: Config) -> None:
    global config
    config = new_config


def get_config() -> Config:
    """Current configuration, including any replacement made with `set_config`."""
    return config


__all__ = ["config", "set_config", "get_config", "load_config", "Config"]

if __name__ == "__main__":
    print(config)
