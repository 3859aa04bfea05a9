"""
PTGen Device Registry - Arena of Device Records

PURPOSE:
    Owns every device of a topology. Devices live in an arena of slots and are
    referred to by DeviceHandle values (slot index + generation), so handles
    stay valid while other devices are added and can be ordered to
    canonicalize links. Devices are never removed.

WHO READS ME:
    - links.py: advances the interface counter of link endpoints
    - compiler.py: iterates devices and resolves handles to names
    - loader.py: registers devices and resolves document names
    - layout.py: writes cosmetic positions

KEY EXPORTS:
    - DeviceRegistry
"""

import logging
from dataclasses import dataclass
from typing import Iterator, Tuple

from ptgen.models import (
    Device,
    DeviceHandle,
    DeviceSpec,
    UnknownHandleError,
    UnknownNameError,
)

_LOGGER = logging.getLogger(__name__)


@dataclass
class _Slot:
    generation: int
    device: Device


class DeviceRegistry:
    """registry of all devices, in insertion order"""

    def __init__(self):
        self._slots: list[_Slot] = []

    def register(self, spec: DeviceSpec) -> DeviceHandle:
        """add the device described by spec and return its handle"""
        if any(slot.device.name == spec.name for slot in self._slots):
            _LOGGER.warning("device name %s registered more than once", spec.name)
        slot = _Slot(generation=0, device=Device.from_spec(spec))
        self._slots.append(slot)
        handle = DeviceHandle(len(self._slots) - 1, slot.generation)
        _LOGGER.info("device %s registered as %s", spec.name, handle)
        return handle

    def add_device(
        self,
        name: str,
        x: float = 0.0,
        y: float = 0.0,
        redistribute_ospf_to_rip: bool = False,
    ) -> DeviceHandle:
        return self.register(DeviceSpec(name, x, y, redistribute_ospf_to_rip))

    def get(self, handle: DeviceHandle) -> Device:
        """the device record of the handle"""
        if not 0 <= handle.index < len(self._slots):
            raise UnknownHandleError(f"no device for handle {handle}")
        slot = self._slots[handle.index]
        if slot.generation != handle.generation:
            raise UnknownHandleError(f"stale device handle {handle}")
        return slot.device

    def lookup_by_name(self, name: str) -> DeviceHandle:
        """the handle of the first device registered with this name"""
        for handle, device in self.items():
            if device.name == name:
                return handle
        raise UnknownNameError(name)

    def items(self) -> Iterator[Tuple[DeviceHandle, Device]]:
        for index, slot in enumerate(self._slots):
            yield DeviceHandle(index, slot.generation), slot.device

    def __iter__(self) -> Iterator[DeviceHandle]:
        for handle, _ in self.items():
            yield handle

    def __contains__(self, handle: object) -> bool:
        if not isinstance(handle, DeviceHandle):
            return False
        try:
            self.get(handle)
        except UnknownHandleError:
            return False
        return True

    def __len__(self) -> int:
        return len(self._slots)
