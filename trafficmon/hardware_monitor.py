"""Temperatures and GPU load read from a tree of hardware sensors."""

from __future__ import annotations

import dataclasses
import enum
from collections.abc import Callable, Iterable

_UNSET = -1.0


class HardwareType(enum.Enum):
    MAINBOARD = enum.auto()
    SUPER_IO = enum.auto()
    CPU = enum.auto()
    RAM = enum.auto()
    GPU_NVIDIA = enum.auto()
    GPU_ATI = enum.auto()
    TBALANCER = enum.auto()
    HEATMASTER = enum.auto()
    HDD = enum.auto()


class SensorType(enum.Enum):
    VOLTAGE = enum.auto()
    CLOCK = enum.auto()
    TEMPERATURE = enum.auto()
    LOAD = enum.auto()
    FAN = enum.auto()
    FLOW = enum.auto()
    CONTROL = enum.auto()
    LEVEL = enum.auto()
    FACTOR = enum.auto()
    POWER = enum.auto()
    DATA = enum.auto()
    SMALL_DATA = enum.auto()


@dataclasses.dataclass
class Sensor:
    """A single reading; ``value`` is None when the sensor has no reading."""

    name: str
    sensor_type: SensorType
    value: float | None = None


@dataclasses.dataclass
class Hardware:
    """A piece of hardware with its sensors and any sub-hardware."""

    name: str
    hardware_type: HardwareType
    sensors: list[Sensor] = dataclasses.field(default_factory=list)
    sub_hardware: list[Hardware] = dataclasses.field(default_factory=list)
    updater: Callable[[Hardware], None] | None = None

    def update(self) -> None:
        """Refresh the sensor readings through the updater, if one is set."""
        if self.updater is not None:
            self.updater(self)


def visit_hardware(hardware: Hardware) -> None:
    """Update a piece of hardware and, recursively, all its sub-hardware."""
    hardware.update()
    for sub in hardware.sub_hardware:
        visit_hardware(sub)


def _sensor_value(sensor: Sensor) -> float:
    return 0.0 if sensor.value is None else float(sensor.value)


def hardware_temperature(hardware: Hardware) -> float | None:
    """Mean of the temperature sensors, searching sub-hardware if there are none.

    Returns None when no temperature sensor is found anywhere.
    """
    temperatures = [
        _sensor_value(s) for s in hardware.sensors if s.sensor_type is SensorType.TEMPERATURE
    ]
    if temperatures:
        return sum(temperatures) / len(temperatures)
    for sub in hardware.sub_hardware:
        temperature = hardware_temperature(sub)
        if temperature is not None:
            return temperature
    return None


def gpu_core_usage(hardware: Hardware) -> float | None:
    """Value of the "GPU Core" load sensor, or None."""
    for sensor in hardware.sensors:
        if sensor.sensor_type is SensorType.LOAD and sensor.name == "GPU Core":
            return _sensor_value(sensor)
    return None


class HardwareMonitor:
    """Collects CPU, GPU, disk and mainboard temperatures and GPU load; -1 means unknown."""

    def __init__(self, hardware: Iterable[Hardware] = ()):
        self.hardware = list(hardware)
        for item in self.hardware:
            visit_hardware(item)
        self._reset()

    def _reset(self) -> None:
        self._cpu_temperature = _UNSET
        self._gpu_nvidia_temperature = _UNSET
        self._gpu_ati_temperature = _UNSET
        self._hdd_temperature = _UNSET
        self._mainboard_temperature = _UNSET
        self._gpu_nvidia_usage = _UNSET
        self._gpu_ati_usage = _UNSET

    @staticmethod
    def _temperature(hardware: Hardware) -> float:
        temperature = hardware_temperature(hardware)
        return _UNSET if temperature is None else temperature

    def get_hardware_info(self) -> None:
        """Update every sensor and read the values from the first hardware of each kind."""
        self._reset()
        for item in self.hardware:
            visit_hardware(item)
        for item in self.hardware:
            kind = item.hardware_type
            if kind is HardwareType.CPU:
                if self._cpu_temperature < 0:
                    self._cpu_temperature = self._temperature(item)
            elif kind is HardwareType.GPU_NVIDIA:
                if self._gpu_nvidia_temperature < 0:
                    self._gpu_nvidia_temperature = self._temperature(item)
                if self._gpu_nvidia_usage < 0:
                    usage = gpu_core_usage(item)
                    if usage is not None:
                        self._gpu_nvidia_usage = usage
            elif kind is HardwareType.GPU_ATI:
                if self._gpu_ati_temperature < 0:
                    self._gpu_ati_temperature = self._temperature(item)
                if self._gpu_ati_usage < 0:
                    usage = gpu_core_usage(item)
                    if usage is not None:
                        self._gpu_ati_usage = usage
            elif kind is HardwareType.HDD:
                if self._hdd_temperature < 0:
                    self._hdd_temperature = self._temperature(item)
            elif kind is HardwareType.MAINBOARD:
                if self._mainboard_temperature < 0:
                    self._mainboard_temperature = self._temperature(item)

    def cpu_temperature(self) -> float:
        return self._cpu_temperature

    def gpu_temperature(self) -> float:
        """The NVIDIA reading unless it is exactly zero, then the ATI reading."""
        if self._gpu_nvidia_temperature != 0:
            return self._gpu_nvidia_temperature
        return self._gpu_ati_temperature

    def hdd_temperature(self) -> float:
        return self._hdd_temperature

    def mainboard_temperature(self) -> float:
        return self._mainboard_temperature

    def gpu_usage(self) -> float:
        """The NVIDIA load when known, otherwise the ATI load."""
        if self._gpu_nvidia_usage >= 0:
            return self._gpu_nvidia_usage
        return self._gpu_ati_usage