"""topology graph and automatic device placement"""

import logging
import math

import networkx as nx

from ptgen.links import LinkTable
from ptgen.models import Point
from ptgen.registry import DeviceRegistry

_LOGGER = logging.getLogger(__name__)


def topology_graph(registry: DeviceRegistry, links: LinkTable) -> nx.Graph:
    """a NetworkX graph of the topology, nodes are device names"""
    graph = nx.Graph()
    for _, device in registry.items():
        graph.add_node(device.name, device=device)
    for key, link in links.items():
        low = registry.get(key.low).name
        high = registry.get(key.high).name
        graph.add_edge(
            low,
            high,
            prefix=link.address_low.network,
            order={low: link.iface_low, high: link.iface_high},
            area=link.area,
        )
    return graph


def auto_layout(
    registry: DeviceRegistry, links: LinkTable, distance: int = 200
) -> dict[str, Point]:
    """place all devices with a Kamada-Kawai layout, the positions are
    stored in the devices and returned by name"""
    graph = topology_graph(registry, links)
    if graph.number_of_nodes() == 0:
        return {}
    if not nx.is_connected(graph):
        _LOGGER.warning(
            "topology has %d disconnected parts",
            nx.number_connected_components(graph),
        )
    dimensions = int(math.sqrt(graph.number_of_nodes()) * distance)
    pos = nx.kamada_kawai_layout(graph, scale=dimensions)

    placed: dict[str, Point] = {}
    for name, value in pos.items():
        point = Point(round(float(value[0]), 2), round(float(value[1]), 2))
        graph.nodes[name]["device"].position = point
        placed[name] = point
    _LOGGER.info("placed %d devices", len(placed))
    return placed
