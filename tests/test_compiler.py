"""Tests for the configuration compiler."""

import pytest

from ptgen.compiler import ConfigCompiler, compile_configs, get_templates
from ptgen.config import Config
from ptgen.models import PtgenError

R1_EXPECTED = """enable
configure terminal

interface GigabitEthernet0/0
   ip address 10.0.0.1 255.255.255.252
   no shutdown
exit

router rip
   version 2
   network 10.0.0.0
exit

router ospf 1
   redistribute rip subnets
   network 10.0.0.0 0.0.0.3 area 0
exit

exit
disable
"""

EMPTY_EXPECTED = """enable
configure terminal

router rip
   version 2
exit

router ospf 1
exit

exit
disable
"""


class TestConfigCompiler:
    def test_full_device(self, registry, links):
        r1 = registry.add_device("R1", redistribute_ospf_to_rip=True)
        r2 = registry.add_device("R2")
        links.link(r1, r2, "10.0.0.0/30", area=0)
        configs = compile_configs(registry, links, {r2})
        assert configs["R1"] == R1_EXPECTED

    def test_keyed_by_name(self, registry, links, r1, r2):
        links.link(r1, r2, "10.0.0.0/30")
        configs = compile_configs(registry, links)
        assert list(configs) == ["R1", "R2"]

    def test_unlinked_device(self, registry, links, r1):
        assert compile_configs(registry, links)["R1"] == EMPTY_EXPECTED

    def test_rip_uses_far_network(self, registry, links, r1, r2):
        links.link(r1, r2, "10.0.0.0/30")
        links.link(r2, r1, "10.0.0.4/30")
        assert "   network 10.0.0.4\n" in compile_configs(registry, links, {r2})["R1"]
        assert "   network 10.0.0.4\n" not in compile_configs(registry, links, set())["R1"]

    def test_rip_only_for_rip_neighbors(self, registry, links, r1, r2, r3):
        links.link(r1, r2, "10.0.0.0/30")
        links.link(r1, r3, "10.0.0.4/30")
        text = compile_configs(registry, links, [r3])["R1"]
        assert "   network 10.0.0.4\n" in text
        assert "   network 10.0.0.0\n" not in text

    def test_ospf_area(self, registry, links, r1, r2):
        links.link(r1, r2, "10.0.0.0/30", area=0)
        assert "   network 10.0.0.0 0.0.0.3 area 0\n" in compile_configs(registry, links)["R1"]

    def test_ospf_without_area(self, registry, links, r1, r2):
        links.link(r1, r2, "10.0.0.0/30")
        assert "area" not in compile_configs(registry, links)["R1"]

    def test_no_redistribution_by_default(self, registry, links, r1, r2):
        links.link(r1, r2, "10.0.0.0/30", area=0)
        assert "redistribute" not in compile_configs(registry, links)["R2"]

    def test_interfaces_in_index_order(self, registry, links, r1, r2, r3):
        links.link(r1, r3, "10.0.0.4/30")
        links.link(r1, r2, "10.0.0.0/30")
        links.unlink(r1, r3)
        links.link(r1, r3, "10.0.0.8/30")
        text = compile_configs(registry, links)["R1"]
        first = text.index("interface GigabitEthernet1/0")
        second = text.index("interface GigabitEthernet2/0")
        assert first < second
        assert "GigabitEthernet0/0" not in text
        assert "   ip address 10.0.0.9 255.255.255.252\n" in text

    def test_far_side_interface(self, registry, links, r1, r2):
        links.link(r1, r2, "10.0.0.0/30")
        text = compile_configs(registry, links)["R2"]
        assert "interface GigabitEthernet0/0\n   ip address 10.0.0.2 255.255.255.252\n" in text

    def test_ospf_process_from_config(self, registry, links, r1):
        configs = compile_configs(registry, links, cfg=Config(ospf_process=42))
        assert "router ospf 42\n" in configs["R1"]

    def test_repeatable(self, registry, links, r1, r2, r3):
        links.link(r2, r3, "10.0.0.0/30", area=1)
        links.link(r1, r3, "10.0.0.4/30", area=1)
        compiler = ConfigCompiler()
        assert compiler.compile(registry, links, {r1}) == compiler.compile(registry, links, {r1})

    def test_duplicate_names(self, registry, links):
        registry.add_device("R1")
        registry.add_device("R1")
        with pytest.raises(PtgenError):
            compile_configs(registry, links)

    def test_unknown_template(self):
        with pytest.raises(PtgenError):
            ConfigCompiler(Config(template="does-not-exist"))

    def test_get_templates(self):
        assert "ios" in get_templates()
