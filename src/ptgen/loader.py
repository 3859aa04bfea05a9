"""
PTGen Topology Loader - YAML Topology Documents

PURPOSE:
    Reads the topology document (devices, links and the devices running RIP)
    into a DeviceRegistry and a LinkTable, and writes a topology back out so
    that device positions can be persisted.

DOCUMENT FORMAT:
    ```yaml
    devices:
      R1:
        x: 0
        y: 0
        redistributions: { ospf_to_rip: true }
      R2: {}
    links:
      - { r1: R1, r2: R2, ip: "10.0.0.0/30", ospf: 0 }
    rip: [R2]
    ```

WHO READS ME:
    - main.py: load_topology(), save_topology()

WHO I READ:
    - registry.py, links.py: the in-memory topology
    - models.py: TopologyError, UnknownNameError
    - writer.py: is_file_name() for device names

DEPENDENCIES:
    - yaml (PyYAML): safe_load() / safe_dump()
"""

import logging
from pathlib import Path
from typing import Any

import yaml

from ptgen.links import LinkTable
from ptgen.models import DeviceHandle, DeviceSpec, InvalidBlockError, TopologyError
from ptgen.registry import DeviceRegistry
from ptgen.writer import is_file_name

_LOGGER = logging.getLogger(__name__)


class Topology:
    """a loaded topology, ready to be compiled"""

    def __init__(self):
        self.registry = DeviceRegistry()
        self.links = LinkTable(self.registry)
        self.rip_enabled: set[DeviceHandle] = set()


def _mapping(value: Any, what: str) -> dict:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise TopologyError(f"{what} must be a mapping, got {type(value).__name__}")
    return value


def _sequence(value: Any, what: str) -> list:
    if value is None:
        return []
    if not isinstance(value, list):
        raise TopologyError(f"{what} must be a list, got {type(value).__name__}")
    return value


def _number(value: Any, what: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TopologyError(f"{what} must be a number, got {value!r}")
    return float(value)


def _device_spec(name: str, attrs: Any) -> DeviceSpec:
    attrs = _mapping(attrs, f"device {name}")
    redistributions = _mapping(
        attrs.get("redistributions"), f"device {name} redistributions"
    )
    ospf_to_rip = redistributions.get("ospf_to_rip", False)
    if not isinstance(ospf_to_rip, bool):
        raise TopologyError(f"device {name}: ospf_to_rip must be true or false")
    return DeviceSpec(
        name=name,
        x=_number(attrs.get("x", 0), f"device {name} x"),
        y=_number(attrs.get("y", 0), f"device {name} y"),
        redistribute_ospf_to_rip=ospf_to_rip,
    )


def _area(value: Any, where: str) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise TopologyError(f"{where}: ospf area must be a non-negative integer")
    return value


def build_topology(doc: Any) -> Topology:
    """build a topology from an already parsed document"""
    doc = _mapping(doc, "topology")
    topo = Topology()
    registry = topo.registry

    names: set[str] = set()
    for key, attrs in _mapping(doc.get("devices"), "devices").items():
        name = str(key)
        if not is_file_name(name):
            raise TopologyError(f"invalid device name: {name!r}")
        if name in names:
            raise TopologyError(f"duplicate device name: {name}")
        names.add(name)
        registry.register(_device_spec(name, attrs))

    for number, entry in enumerate(_sequence(doc.get("links"), "links"), start=1):
        where = f"link {number}"
        entry = _mapping(entry, where)
        missing = [k for k in ("r1", "r2", "ip") if entry.get(k) is None]
        if missing:
            raise TopologyError(f"{where}: missing {', '.join(missing)}")
        r1 = registry.lookup_by_name(str(entry["r1"]))
        r2 = registry.lookup_by_name(str(entry["r2"]))
        area = _area(entry.get("ospf"), where)
        try:
            topo.links.link(r1, r2, str(entry["ip"]), area)
        except InvalidBlockError as exc:
            raise InvalidBlockError(f"{where}: {exc}") from exc

    for name in _sequence(doc.get("rip"), "rip"):
        topo.rip_enabled.add(registry.lookup_by_name(str(name)))

    _LOGGER.info(
        "topology has %d devices and %d links", len(registry), len(topo.links)
    )
    return topo


def parse_topology(text: str) -> Topology:
    """parse a YAML topology document"""
    try:
        doc = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise TopologyError(f"invalid YAML: {exc}") from exc
    return build_topology(doc)


def load_topology(path: str | Path) -> Topology:
    """load the YAML topology document at path"""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise TopologyError(f"cannot read topology {path}: {exc}") from exc
    _LOGGER.info("Topology loaded from file %s", path)
    return parse_topology(text)


def dump_topology(topo: Topology) -> str:
    """the YAML document describing topo"""
    registry = topo.registry
    devices: dict[str, Any] = {}
    for _, device in registry.items():
        attrs: dict[str, Any] = {"x": device.position.x, "y": device.position.y}
        if device.redistribute_ospf_to_rip:
            attrs["redistributions"] = {"ospf_to_rip": True}
        devices[device.name] = attrs

    links = []
    for key, link in topo.links.items():
        entry: dict[str, Any] = {
            "r1": registry.get(key.low).name,
            "r2": registry.get(key.high).name,
            "ip": str(link.address_low.network),
        }
        if link.area is not None:
            entry["ospf"] = link.area
        links.append(entry)

    doc: dict[str, Any] = {"devices": devices, "links": links}
    rip = sorted(topo.rip_enabled)
    if rip:
        doc["rip"] = [registry.get(handle).name for handle in rip]
    return yaml.safe_dump(doc, sort_keys=False)


def save_topology(topo: Topology, path: str | Path):
    """write the YAML document describing topo to path"""
    Path(path).write_text(dump_topology(topo), encoding="utf-8")
    _LOGGER.info("Topology saved to %s", path)
