"""
Assembler configuration.

Settings can be loaded from a YAML file, for example:

    output_path: "build/program.txt"
    record_tag: "$P"
    annotate: true
    verbose: false
"""

from dataclasses import dataclass, fields

import yaml

from .errors import ConfigError
from .output import DEFAULT_TAG

DEFAULT_OUTPUT = "build.txt"


@dataclass
class AssemblerConfig:
    """
    Assembler settings.

    Attributes:
        output_path: Object file written by assemble_file
        record_tag: Marker at the start of each output record
        annotate: Append the source line to an instruction's first record
        verbose: Print per-line encoding details
    """

    output_path: str = DEFAULT_OUTPUT
    record_tag: str = DEFAULT_TAG
    annotate: bool = True
    verbose: bool = False


# Expected type for each config key
CONFIG_TYPES = {f.name: type(f.default) for f in fields(AssemblerConfig)}


def parse_config(yaml_content: str) -> AssemblerConfig:
    """
    Parse and validate a YAML configuration.

    Args:
        yaml_content: Raw YAML string content

    Returns:
        AssemblerConfig with defaults for any omitted keys

    Raises:
        ConfigError: If the configuration is invalid
    """
    try:
        data = yaml.safe_load(yaml_content)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML syntax: {e}")

    if data is None:
        return AssemblerConfig()
    if not isinstance(data, dict):
        raise ConfigError("Configuration must be a YAML mapping/dictionary")

    for key, value in data.items():
        if key not in CONFIG_TYPES:
            raise ConfigError(f"Unknown configuration key '{key}'")
        expected = CONFIG_TYPES[key]
        if not isinstance(value, expected):
            raise ConfigError(
                f"'{key}' must be of type {expected.__name__}, got {type(value).__name__}"
            )

    if "record_tag" in data and not data["record_tag"].strip():
        raise ConfigError("'record_tag' must not be empty")

    return AssemblerConfig(**data)


def load_config(path: str) -> AssemblerConfig:
    """Load a configuration file from disk."""
    try:
        with open(path, "r") as f:
            content = f.read()
    except OSError as e:
        raise ConfigError(f"Cannot open config file '{path}': {e.strerror}")
    return parse_config(content)
