"""writes the compiled configurations, one file per device"""

import logging
import os
from pathlib import Path

import enlighten

from ptgen.models import PtgenError

_LOGGER = logging.getLogger(__name__)


def is_file_name(name: str) -> bool:
    """true if name can be used as a file name inside the output directory"""
    if name in ("", ".", ".."):
        return False
    separators = {"/", os.sep} | ({os.altsep} if os.altsep else set())
    return not any(sep in name for sep in separators) and "\0" not in name


def write_configs(
    configs: dict[str, str],
    output_dir: str | Path = "output",
    suffix: str = ".txt",
    progress: bool = False,
) -> list[Path]:
    """write every configuration to <output_dir>/<device name><suffix>"""
    bad = [name for name in configs if not is_file_name(name)]
    if bad:
        raise PtgenError(
            "device names not usable as file names: "
            + ", ".join(repr(name) for name in bad)
        )
    outdir = Path(output_dir)
    try:
        outdir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise PtgenError(f"cannot create output directory {outdir}: {exc}") from exc

    manager = None
    if progress:
        manager = enlighten.get_manager()
        cprog = manager.counter(
            total=len(configs),
            desc="configs ",
            unit=" configs",
            leave=False,
            color="cyan",
        )

    written: list[Path] = []
    try:
        for name, text in configs.items():
            outfile = outdir / f"{name}{suffix}"
            try:
                outfile.write_text(text, encoding="utf-8")
            except OSError as exc:
                raise PtgenError(f"cannot write {outfile}: {exc}") from exc
            _LOGGER.info("Config written to %s", outfile)
            written.append(outfile)
            if progress:
                cprog.update()  # type: ignore
    finally:
        if manager is not None:
            cprog.close()  # type: ignore
            manager.stop()

    _LOGGER.warning("%d configurations written to %s", len(written), outdir)
    return written
