"""
PTGen Link Table - Point-to-Point Links Between Devices

PURPOSE:
    Stores one record per linked device pair. Records are keyed by the
    canonical (low, high) ordering of the two handles, so linking (a, b) and
    (b, a) address the same record. Creating a link allocates the two host
    addresses of the given block (low end gets the first one) and an
    interface index on each device.

WHO READS ME:
    - compiler.py: directed_links() for every device
    - loader.py: applies the links of the topology document
    - layout.py: builds the networkx graph

WHO I READ:
    - addressing.py: allocate(), parse_block()
    - registry.py: DeviceRegistry for the interface counters
    - models.py: LinkKey, Link, DirectedLink

INTERFACE NUMBERS:
    Interface indices are taken from each device's counter when a pair is
    linked for the first time. Linking an already linked pair again replaces
    addresses and area but keeps both interface indices. Counters are never
    decremented, not even by unlink().
"""

import logging
from typing import Iterator, Tuple, Union

from ptgen.addressing import IPNetwork, allocate, parse_block
from ptgen.models import DeviceHandle, DirectedLink, Link, LinkKey
from ptgen.registry import DeviceRegistry

_LOGGER = logging.getLogger(__name__)


class LinkTable:
    """all links of a topology, keyed by canonical handle pairs"""

    def __init__(self, registry: DeviceRegistry):
        self.registry = registry
        self._links: dict[LinkKey, Link] = {}

    def link(
        self,
        a: DeviceHandle,
        b: DeviceHandle,
        block: Union[IPNetwork, str],
        area: int | None = None,
    ) -> Link:
        """create or overwrite the link between a and b"""
        key = LinkKey.of(a, b)
        low = self.registry.get(key.low)
        high = self.registry.get(key.high)
        if isinstance(block, str):
            block = parse_block(block)
        address_low, address_high = allocate(block)

        previous = self._links.get(key)
        if previous is None:
            iface_low = low.take_interface()
            iface_high = high.take_interface()
        else:
            iface_low, iface_high = previous.iface_low, previous.iface_high

        link = Link(
            address_low=address_low,
            address_high=address_high,
            iface_low=iface_low,
            iface_high=iface_high,
            area=area,
        )
        self._links[key] = link
        _LOGGER.debug(
            "%s link %s if%d %s <-> %s if%d %s (area %s)",
            "updated" if previous is not None else "created",
            low.name,
            iface_low,
            address_low,
            high.name,
            iface_high,
            address_high,
            area,
        )
        return link

    def unlink(self, a: DeviceHandle, b: DeviceHandle) -> None:
        """remove the link between a and b, if there is one"""
        key = LinkKey.of(a, b)
        if self._links.pop(key, None) is not None:
            _LOGGER.debug("removed link %s <-> %s", key.low, key.high)

    def get(self, a: DeviceHandle, b: DeviceHandle) -> Link | None:
        """the stored record for the pair, regardless of orientation"""
        return self._links.get(LinkKey.of(a, b))

    def lookup_oriented(
        self, close: DeviceHandle, far: DeviceHandle
    ) -> DirectedLink | None:
        """the link between close and far as seen from close"""
        key = LinkKey.of(close, far)
        link = self._links.get(key)
        if link is None:
            return None
        return self._orient(key, link, close)

    @staticmethod
    def _orient(key: LinkKey, link: Link, close: DeviceHandle) -> DirectedLink:
        far = key.other(close)
        if close == key.low:
            close_address, far_address = link.address_low, link.address_high
            close_iface = link.iface_low
        else:
            close_address, far_address = link.address_high, link.address_low
            close_iface = link.iface_high
        return DirectedLink(
            close=close,
            far=far,
            close_address=close_address,
            far_address=far_address,
            close_iface=close_iface,
            area=link.area,
        )

    def neighbors_of(self, handle: DeviceHandle) -> set[DeviceHandle]:
        """all devices directly linked to handle"""
        return {key.other(handle) for key in self._links if handle in key}

    def directed_links(self, handle: DeviceHandle) -> list[DirectedLink]:
        """every link of handle, oriented towards it and sorted by interface"""
        directed = [
            self._orient(key, link, handle)
            for key, link in self._links.items()
            if handle in key
        ]
        directed.sort(key=lambda d: d.close_iface)
        return directed

    def items(self) -> Iterator[Tuple[LinkKey, Link]]:
        return iter(self._links.items())

    def __iter__(self) -> Iterator[LinkKey]:
        return iter(self._links)

    def __len__(self) -> int:
        return len(self._links)
