"""shared fixtures"""

import pytest

from ptgen.links import LinkTable
from ptgen.registry import DeviceRegistry


@pytest.fixture
def registry():
    return DeviceRegistry()


@pytest.fixture
def links(registry):
    return LinkTable(registry)


@pytest.fixture
def r1(registry):
    return registry.add_device("R1")


@pytest.fixture
def r2(registry, r1):
    return registry.add_device("R2")


@pytest.fixture
def r3(registry, r2):
    return registry.add_device("R3")


SAMPLE_TOPOLOGY = """
devices:
  R1:
    x: 10
    y: 20.5
    redistributions: { ospf_to_rip: true }
  R2: {}
  R3:
links:
  - { r1: R1, r2: R2, ip: "10.0.0.0/30", ospf: 0 }
  - { r1: R3, r2: R2, ip: "10.0.0.4/30" }
rip: [R2, R3]
"""


@pytest.fixture
def topology_file(tmp_path):
    path = tmp_path / "topology.yaml"
    path.write_text(SAMPLE_TOPOLOGY, encoding="utf-8")
    return path
