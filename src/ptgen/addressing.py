"""point-to-point address allocation"""

import logging
from ipaddress import IPv4Network, IPv6Network, ip_interface, ip_network
from itertools import islice
from typing import Tuple, Union

from ptgen.models import InvalidBlockError, IPInterface

_LOGGER = logging.getLogger(__name__)

IPNetwork = Union[IPv4Network, IPv6Network]


def parse_block(text: str) -> IPNetwork:
    """parse a CIDR string into a network, host bits are masked off"""
    try:
        block = ip_network(str(text).strip(), strict=False)
    except ValueError as exc:
        raise InvalidBlockError(f"invalid address block {text!r}: {exc}") from None
    if str(block) != str(text).strip():
        _LOGGER.info("address block %s normalized to %s", text, block)
    return block


def allocate(block: IPNetwork) -> Tuple[IPInterface, IPInterface]:
    """return the first two usable host addresses of the block, both with
    the prefix length of the block.

    The usable hosts are the ones `hosts()` yields, so IPv4 blocks lose their
    network and broadcast address (except /31) and IPv6 blocks lose the
    subnet-router anycast address (except /127).
    """
    hosts = list(islice(block.hosts(), 2))
    if len(hosts) < 2:
        raise InvalidBlockError(
            f"address block {block} does not have two usable host addresses"
        )
    first, second = (ip_interface(f"{host}/{block.prefixlen}") for host in hosts)
    _LOGGER.debug("block %s: allocated %s and %s", block, first, second)
    return first, second


def network_of(address: IPInterface):
    """the network address of an interface address (address AND mask)"""
    return address.network.network_address


def wildcard_of(address: IPInterface):
    """the inverted mask as used by OSPF network statements"""
    return address.network.hostmask
