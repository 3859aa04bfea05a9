"""
PTGen Data Models - Core Data Structures for Configuration Generation

PURPOSE:
    Defines the data models shared by the registry, the link table and the
    compiler (device handles, devices, links and their oriented view) as well
    as the error hierarchy raised throughout ptgen.

WHO READS ME:
    - registry.py: DeviceHandle, DeviceSpec, Device
    - links.py: LinkKey, Link, DirectedLink
    - compiler.py: DirectedLink, Device
    - loader.py, main.py: error classes

WHO I READ:
    - None (leaf module, no internal dependencies)

DEPENDENCIES:
    - dataclasses: @dataclass decorator
    - ipaddress: IPv4Interface / IPv6Interface for link addresses

KEY EXPORTS:
    - PtgenError: Base exception class for all ptgen errors
    - InvalidBlockError, DuplicateEndpointError, UnknownNameError,
      UnknownHandleError, TopologyError
    - Point: 2D coordinate (x, y), cosmetic only
    - DeviceHandle: opaque, ordered reference to a registered device
    - DeviceSpec: immutable description used to register a device
    - Device: registered device record
    - LinkKey: canonical (low, high) pair of handles
    - Link: stored point-to-point link
    - DirectedLink: a link seen from one of its endpoints

DATA MODELS:

    Device:
        - name: str (external identity key)
        - position: Point (never interpreted by the generator)
        - redistribute_ospf_to_rip: bool
        - next_interface_index: int (monotonically increasing)

    Link:
        - address_low / address_high: interface addresses of the low / high end
        - iface_low / iface_high: interface indices of the low / high end
        - area: OSPF area or None
"""

from dataclasses import dataclass, field
from ipaddress import IPv4Interface, IPv6Interface
from typing import Union

IPInterface = Union[IPv4Interface, IPv6Interface]


class PtgenError(Exception):
    """Base class for all errors raised by ptgen"""


class InvalidBlockError(PtgenError, ValueError):
    """an address block does not hold two usable host addresses"""


class DuplicateEndpointError(PtgenError, ValueError):
    """both ends of a link refer to the same device"""

    def __init__(self, handle: "DeviceHandle"):
        super().__init__(f"link endpoints must differ, got {handle} twice")
        self.handle = handle


class UnknownNameError(PtgenError, LookupError):
    """a device name was never registered"""

    def __init__(self, name: str):
        super().__init__(f"unknown device: {name}")
        self.name = name


class UnknownHandleError(PtgenError, LookupError):
    """a handle was not issued by the registry or is stale"""


class TopologyError(PtgenError):
    """the topology document is malformed"""


@dataclass
class Point:
    """a point in a carthesian coordinate system"""

    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True, order=True)
class DeviceHandle:
    """slot index plus generation, ordered by creation sequence"""

    index: int
    generation: int = 0

    def __str__(self) -> str:
        return f"#{self.index}.{self.generation}"


@dataclass(frozen=True)
class DeviceSpec:
    """everything needed to register a device"""

    name: str
    x: float = 0.0
    y: float = 0.0
    redistribute_ospf_to_rip: bool = False


@dataclass
class Device:
    """a registered device"""

    name: str
    position: Point = field(default_factory=Point)
    redistribute_ospf_to_rip: bool = False
    next_interface_index: int = 0

    @classmethod
    def from_spec(cls, spec: DeviceSpec) -> "Device":
        return cls(
            name=spec.name,
            position=Point(spec.x, spec.y),
            redistribute_ospf_to_rip=spec.redistribute_ospf_to_rip,
        )

    def take_interface(self) -> int:
        """hand out the next interface index"""
        index = self.next_interface_index
        self.next_interface_index += 1
        return index


@dataclass(frozen=True)
class LinkKey:
    """an unordered pair of handles, stored as (low, high)"""

    low: DeviceHandle
    high: DeviceHandle

    @classmethod
    def of(cls, a: DeviceHandle, b: DeviceHandle) -> "LinkKey":
        if a == b:
            raise DuplicateEndpointError(a)
        return cls(a, b) if a < b else cls(b, a)

    def other(self, handle: DeviceHandle) -> DeviceHandle:
        return self.high if handle == self.low else self.low

    def __contains__(self, handle: object) -> bool:
        return handle in (self.low, self.high)


@dataclass
class Link:
    """a point-to-point link between the two devices of a LinkKey"""

    address_low: IPInterface
    address_high: IPInterface
    iface_low: int
    iface_high: int
    area: int | None = None


@dataclass(frozen=True)
class DirectedLink:
    """a link seen from its "close" end"""

    close: DeviceHandle
    far: DeviceHandle
    close_address: IPInterface
    far_address: IPInterface
    close_iface: int
    area: int | None = None
