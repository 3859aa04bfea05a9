"""device configuration compiler"""

import importlib.resources as pkg_resources
import logging
from typing import Iterable

from jinja2 import (
    Environment,
    PackageLoader,
    Template,
    TemplateNotFound,
    select_autoescape,
)

from ptgen import templates
from ptgen.addressing import network_of, wildcard_of
from ptgen.config import Config
from ptgen.links import LinkTable
from ptgen.models import DeviceHandle, DirectedLink, PtgenError
from ptgen.registry import DeviceRegistry

_LOGGER = logging.getLogger(__name__)

J2SUFFIX = ".jinja2"


def get_templates() -> list[str]:
    """get all available templates in the package"""
    return sorted(
        t.name[: -len(J2SUFFIX)]
        for t in pkg_resources.files(templates).iterdir()
        if t.name.endswith(J2SUFFIX)
    )


def rip_networks(directed: Iterable[DirectedLink], rip_enabled: set[DeviceHandle]):
    """network addresses of the links whose far end runs RIP"""
    return [network_of(d.far_address) for d in directed if d.far in rip_enabled]


def ospf_networks(directed: Iterable[DirectedLink]):
    """(network, wildcard, area) of the links that belong to an OSPF area"""
    return [
        (network_of(d.far_address), wildcard_of(d.far_address), d.area)
        for d in directed
        if d.area is not None
    ]


class ConfigCompiler:
    """renders one configuration per device with a packaged template"""

    def __init__(self, cfg: Config | None = None):
        self.config = cfg if cfg is not None else Config()
        self.template = self.load_template()

    def load_template(self) -> Template:
        """load the template"""
        name = self.config.template
        env = Environment(
            loader=PackageLoader("ptgen"),
            autoescape=select_autoescape(),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        try:
            return env.get_template(f"{name}{J2SUFFIX}")
        except TemplateNotFound as exc:
            raise PtgenError(f"template does not exist: {name}") from exc

    def render_device(
        self,
        registry: DeviceRegistry,
        links: LinkTable,
        handle: DeviceHandle,
        rip_enabled: set[DeviceHandle],
    ) -> str:
        """render the configuration of a single device"""
        device = registry.get(handle)
        directed = links.directed_links(handle)
        return self.template.render(
            config=self.config,
            device=device,
            links=directed,
            rip_networks=rip_networks(directed, rip_enabled),
            ospf_networks=ospf_networks(directed),
        )

    def compile(
        self,
        registry: DeviceRegistry,
        links: LinkTable,
        rip_enabled: Iterable[DeviceHandle] = (),
    ) -> dict[str, str]:
        """compile every device, the result maps device names to text"""
        rip = set(rip_enabled)
        configs: dict[str, str] = {}
        for handle, device in registry.items():
            if device.name in configs:
                raise PtgenError(f"duplicate device name: {device.name}")
            configs[device.name] = self.render_device(registry, links, handle, rip)
            _LOGGER.info("Config compiled for %s", device.name)
        return configs


def compile_configs(
    registry: DeviceRegistry,
    links: LinkTable,
    rip_enabled: Iterable[DeviceHandle] = (),
    cfg: Config | None = None,
) -> dict[str, str]:
    """compile all configurations with a one-off compiler"""
    return ConfigCompiler(cfg).compile(registry, links, rip_enabled)
