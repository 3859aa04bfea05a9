"""Tests for the command line entry point."""

import logging

import pytest

from ptgen.main import get_log_level, main


@pytest.fixture
def no_config(tmp_path):
    return str(tmp_path / "absent.toml")


class TestMain:
    def test_generates_files(self, tmp_path, topology_file, no_config):
        outdir = tmp_path / "out"
        assert main(["-c", no_config, "-o", str(outdir), str(topology_file)]) == 0
        assert sorted(p.name for p in outdir.iterdir()) == ["R1.txt", "R2.txt", "R3.txt"]
        r1 = (outdir / "R1.txt").read_text(encoding="utf-8")
        assert "   redistribute rip subnets\n" in r1
        assert "   network 10.0.0.0 0.0.0.3 area 0\n" in r1

    def test_dry_run(self, tmp_path, topology_file, no_config, capsys):
        outdir = tmp_path / "out"
        assert main(["-c", no_config, "-o", str(outdir), "--dry-run", str(topology_file)]) == 0
        assert not outdir.exists()
        out = capsys.readouterr().out
        assert "! ===== R2 =====" in out
        assert out.count("\ndisable\n") == 3

    def test_unknown_name_writes_nothing(self, tmp_path, no_config):
        topo = tmp_path / "bad.yaml"
        topo.write_text(
            "devices: {R1: {}}\nlinks:\n  - { r1: R1, r2: R9, ip: 10.0.0.0/30 }\n",
            encoding="utf-8",
        )
        outdir = tmp_path / "out"
        assert main(["-c", no_config, "-o", str(outdir), str(topo)]) == 1
        assert not outdir.exists()

    def test_missing_topology(self, tmp_path, no_config):
        assert main(["-c", no_config, str(tmp_path / "nothing.yaml")]) == 1

    def test_unknown_template(self, tmp_path, topology_file, no_config):
        outdir = tmp_path / "out"
        assert main(["-c", no_config, "-o", str(outdir), "-T", "nope", str(topology_file)]) == 1
        assert not outdir.exists()

    def test_layout(self, tmp_path, topology_file, no_config):
        placed = tmp_path / "placed.yaml"
        outdir = tmp_path / "out"
        assert main(["-c", no_config, "-o", str(outdir), "--layout", str(placed), str(topology_file)]) == 0
        assert placed.exists()
        assert "devices:" in placed.read_text(encoding="utf-8")

    def test_write_config(self, tmp_path):
        cfgfile = tmp_path / "config.toml"
        assert main(["-c", str(cfgfile), "-w"]) == 0
        assert "output_dir" in cfgfile.read_text(encoding="utf-8")

    def test_config_output_dir(self, tmp_path, topology_file):
        cfgfile = tmp_path / "config.toml"
        outdir = tmp_path / "from-config"
        cfgfile.write_text(f'output_dir = "{outdir.as_posix()}"\nsuffix = ".cfg"\n', encoding="utf-8")
        assert main(["-c", str(cfgfile), str(topology_file)]) == 0
        assert (outdir / "R1.cfg").exists()

    def test_list_templates(self, no_config, capsys):
        assert main(["-c", no_config, "--list-templates"]) == 0
        assert "ios" in capsys.readouterr().out


class TestLogLevel:
    @pytest.mark.parametrize(
        "name, level",
        [("debug", logging.DEBUG), ("WARN", logging.WARNING), ("error", logging.ERROR)],
    )
    def test_known(self, name, level):
        assert get_log_level(name) == (level, False)

    def test_unknown(self):
        assert get_log_level("chatty") == (logging.WARNING, True)


class TestAllOrNothing:
    @pytest.mark.parametrize("name", ["core/R2", "../escaped", ".."])
    def test_unusable_device_name_writes_nothing(self, tmp_path, no_config, name):
        topo = tmp_path / "names.yaml"
        topo.write_text(
            f'devices:\n  R1: {{}}\n  "{name}": {{}}\n'
            f'links:\n  - {{ r1: R1, r2: "{name}", ip: 10.0.0.0/30 }}\n',
            encoding="utf-8",
        )
        outdir = tmp_path / "out"
        assert main(["-c", no_config, "-o", str(outdir), str(topo)]) == 1
        assert not outdir.exists()
        assert not (tmp_path / "escaped.txt").exists()
        assert sorted(p.name for p in tmp_path.iterdir()) == ["names.yaml"]
