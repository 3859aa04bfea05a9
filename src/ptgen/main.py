# File Chain:
# - Called by: the `ptgen` console script, `python -m ptgen`
# - Reads from: config.toml, the topology YAML document
# - Writes to: <output_dir>/<device>.txt, optionally a laid out topology YAML
#
"""
PTGen Main Entry Point - CLI Argument Parsing and Application Bootstrap

PURPOSE:
    Entry point for the ptgen CLI tool. Handles argument parsing, configuration
    loading and runs the pipeline: load topology, compile every device, write
    the files. Nothing is written unless every device compiled.

WHO I READ:
    - config.py: Configuration loading and defaults
    - loader.py: topology document
    - compiler.py: ConfigCompiler, get_templates()
    - layout.py: auto_layout() for --layout
    - writer.py: write_configs()
    - colorlog.py: Custom log formatting

KEY EXPORTS:
    - main(): Application entry point
    - create_argparser(): Creates and configures the argument parser
"""

import argparse
import logging
import os
import sys

import ptgen
from ptgen.colorlog import CustomFormatter
from ptgen.compiler import ConfigCompiler, get_templates
from ptgen.layout import auto_layout
from ptgen.loader import load_topology, save_topology
from ptgen.models import PtgenError
from ptgen.writer import write_configs

_LOGGER = logging.getLogger(__name__)


def positive_int(value):
    ivalue = int(value)
    if ivalue < 1:
        raise argparse.ArgumentTypeError(
            f"invalid value {value}. Must be a positive integer."
        )
    return ivalue


def create_argparser(parser_class=argparse.ArgumentParser):
    """create the argparser for ptgen"""
    parser = parser_class(prog=ptgen.__name__, description=ptgen.__description__)
    config_settings = parser.add_argument_group("configuration")

    config_settings.add_argument(
        "-c",
        "--config",
        dest="configfile",
        help="Use the configuration from this file, defaults to %(default)s",
        default="config.toml",
    )
    config_settings.add_argument(
        "-w",
        "--write",
        dest="writeconfig",
        action="store_true",
        help="Write the default configuration to a file and exit",
        default=False,
    )
    config_settings.add_argument(
        "-v", "--version", action="version", version=f"%(prog)s {ptgen.__version__}"
    )
    config_settings.add_argument(
        "-l",
        "--loglevel",
        type=str,
        default=os.environ.get("LOG_LEVEL", "WARN"),
        help="DEBUG, INFO, WARN, ERROR, CRITICAL, defaults to %(default)s",
    )
    config_settings.add_argument(
        "-p",
        "--progress",
        action="store_true",
        help="show a progress bar",
    )

    parser.add_argument(
        "-T",
        "--template",
        type=str,
        default=None,
        help="Template name to use, overrides the configuration file",
    )
    parser.add_argument(
        "--list-templates",
        dest="listtemplates",
        action="store_true",
        help="List all available templates",
    )
    parser.add_argument(
        "-o",
        "--output",
        dest="output_dir",
        type=str,
        default=None,
        help="Output directory, overrides the configuration file",
    )
    parser.add_argument(
        "--dry-run",
        dest="dry_run",
        action="store_true",
        default=False,
        help="Print the configurations instead of writing files",
    )
    parser.add_argument(
        "--layout",
        dest="layout",
        metavar="FILE",
        type=str,
        default=None,
        help="Place all devices automatically and save the topology to FILE",
    )
    parser.add_argument(
        "-d",
        "--distance",
        type=positive_int,
        default=200,
        help="Device distance for --layout, default %(default)d",
    )
    parser.add_argument(
        "topology",
        nargs="?",
        default="topology.yaml",
        help="Topology document to read, defaults to %(default)s",
    )
    return parser


def get_log_level(level_name: str) -> tuple[int, bool]:
    log_levels = {
        "CRITICAL": logging.CRITICAL,
        "ERROR": logging.ERROR,
        "WARN": logging.WARNING,
        "WARNING": logging.WARNING,
        "INFO": logging.INFO,
        "DEBUG": logging.DEBUG,
        "NOTSET": logging.NOTSET,
    }
    level_name = level_name.upper()
    if level_name in log_levels:
        return log_levels[level_name], False
    else:
        return logging.WARNING, True


def setup_logging(loglevel: str):
    """sets up the logging, takes the given loglevel and uses the custom,
    colorful log formatter
    """
    logging.basicConfig(level=logging.WARN)
    level, unknown_loglevel = get_log_level(loglevel)
    logging.root.setLevel(level)
    color = sys.stderr.isatty() and "NO_COLOR" not in os.environ
    custom_formatter = CustomFormatter(color=color)
    for handler in logging.root.handlers:
        handler.setFormatter(custom_formatter)
    if unknown_loglevel:
        _LOGGER.warning("Unknown log level: %s", loglevel.upper())


def main(argv: list[str] | None = None):
    """main function, returns 0 on success, 1 otherwise"""
    parser = create_argparser()
    args = parser.parse_args(argv)
    setup_logging(args.loglevel)

    cfg = ptgen.Config.load(args.configfile)
    if args.writeconfig:
        cfg.save(args.configfile)
        return 0

    if args.listtemplates:
        print("Available templates: ", ", ".join(get_templates()))
        return 0

    if args.template:
        cfg.template = args.template
    if args.output_dir:
        cfg.output_dir = args.output_dir

    try:
        topo = load_topology(args.topology)

        compiler = ConfigCompiler(cfg)
        configs = compiler.compile(topo.registry, topo.links, topo.rip_enabled)
        _LOGGER.warning("Compiled %d configurations", len(configs))

        if args.layout:
            auto_layout(topo.registry, topo.links, distance=args.distance)
            try:
                save_topology(topo, args.layout)
            except OSError as exc:
                raise PtgenError(f"cannot write {args.layout}: {exc}") from exc
            _LOGGER.warning("Laid out topology written to %s", args.layout)

        if args.dry_run:
            for name, text in configs.items():
                print(f"! ===== {name} =====")
                print(text, end="")
            return 0

        write_configs(
            configs, cfg.output_dir, suffix=cfg.suffix, progress=args.progress
        )
        retval = 0
    except PtgenError as exc:
        _LOGGER.error(exc)
        retval = 1
    return retval


if __name__ == "__main__":
    sys.exit(main())
