"""
PTGen Configuration - Configuration Loading and Defaults Management

PURPOSE:
    Manages configuration loading from TOML files and provides sensible defaults
    for configuration generation: where the per-device files go, which packaged
    template renders them and which OSPF process id is emitted.

WHO READS ME:
    - main.py: Loads configuration via Config.load() during bootstrap
    - compiler.py: Uses Config for template name and OSPF process id
    - writer.py: output directory and file suffix (via main.py)

WHO I READ:
    - None (leaf module, no internal dependencies)

DEPENDENCIES:
    - serde: TOML serialization/deserialization (@deserialize, @serialize)
    - serde.toml: from_toml(), to_toml()
    - dataclasses: @dataclass decorator
    - logging: Configuration loading status messages

CONFIG PARAMETERS:
    - output_dir: directory for the generated files (default: output)
    - template: packaged Jinja2 template name (default: ios)
    - ospf_process: OSPF process id (default: 1)
    - suffix: file suffix of the generated files (default: .txt)

FILE FORMAT:
    config.toml example:
    ```toml
    output_dir = "output"
    template = "ios"
    ospf_process = 1
    suffix = ".txt"
    ```
"""

import logging
from dataclasses import dataclass

from serde import deserialize, serialize, SerdeError
from serde.toml import from_toml, to_toml

_LOGGER = logging.getLogger(__name__)


@deserialize
@serialize
@dataclass
class Config:
    """configuration generator settings"""

    output_dir: str = "output"
    template: str = "ios"
    ospf_process: int = 1
    suffix: str = ".txt"

    @classmethod
    def load(cls, filename: str) -> "Config":
        """load the configuration from the given file"""
        try:
            with open(filename, encoding="utf-8") as handle:
                cfg = from_toml(cls, handle.read())
            _LOGGER.info("Configuration loaded from file %s", filename)
        except (FileNotFoundError, TypeError, ValueError, SerdeError) as exc:
            if not isinstance(exc, FileNotFoundError):
                _LOGGER.error(exc)
            cfg = cls()
            _LOGGER.warning("using configuration defaults")
        return cfg

    def save(self, filename: str):
        """save the configuration to the given file"""
        with open(filename, "w+", encoding="utf-8") as handle:
            handle.write(to_toml(self))
