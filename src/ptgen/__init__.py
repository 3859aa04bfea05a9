"""
PTGen - Router Configuration Generator for Point-to-Point Topologies

PURPOSE:
    Turns a YAML description of routers joined by point-to-point links into
    one vendor-style CLI configuration per router. Host addresses and
    interface numbers are assigned automatically from each link's subnet.

Package Structure:
    - main.py: CLI entry point and argument parsing
    - models.py: Data models (handles, devices, links) and errors
    - addressing.py: host address allocation for a link's subnet
    - registry.py: device registry
    - links.py: link table and the oriented link view
    - compiler.py: per-device configuration compiler (Jinja2)
    - loader.py: YAML topology loader / saver
    - writer.py: output directory writer
    - layout.py: NetworkX topology graph and device placement
    - config.py: Configuration management
    - colorlog.py: Colored log output formatter
    - templates/: Jinja2 templates for router configurations

Entry Points:
    - ptgen: CLI command (calls main.main())
    - python -m ptgen: same as the CLI command

Public API Exports:
    - Config, DeviceRegistry, LinkTable, ConfigCompiler, compile_configs
    - load_topology, parse_topology, write_configs, main
    - __version__, __description__: Package metadata
"""

import importlib.metadata as importlib_metadata

from .config import Config
from .registry import DeviceRegistry
from .links import LinkTable
from .compiler import ConfigCompiler, compile_configs
from .loader import Topology, load_topology, parse_topology
from .writer import write_configs
from .main import main

try:
    _metadata = importlib_metadata.metadata("ptgen")
    __version__ = _metadata["Version"]
    __description__ = _metadata["Summary"]
except importlib_metadata.PackageNotFoundError:  # pragma: no cover - source checkout
    __version__ = "unknown"
    __description__ = "router configuration generator"


__all__ = [
    "Config",
    "ConfigCompiler",
    "DeviceRegistry",
    "LinkTable",
    "Topology",
    "compile_configs",
    "load_topology",
    "main",
    "parse_topology",
    "write_configs",
]
