"""Turning byte counts, temperatures, usages and times into display text."""

from __future__ import annotations

import dataclasses
import datetime
import enum
import struct

_UINT64_MASK = 0xFFFFFFFFFFFFFFFF


class SpeedUnit(enum.Enum):
    AUTO = 0
    KBPS = 1
    MBPS = 2


@dataclasses.dataclass
class PublicSettings:
    """Display options shared by the main and taskbar windows."""

    unit_byte: bool = True
    speed_unit: SpeedUnit = SpeedUnit.AUTO
    speed_short_mode: bool = False
    hide_unit: bool = False
    hide_percent: bool = False
    separate_value_unit_with_space: bool = True


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def _scaled(size: int, steps: int) -> float:
    value = _f32(float(size))
    for _ in range(steps):
        value = _f32(value / 1024.0)
    return value


def data_size_to_string(size: int, settings: PublicSettings) -> str:
    """Format a per-second data amount using the speed display settings."""
    if not settings.unit_byte:
        size = (size * 8) & _UINT64_MASK
    value_str = ""
    unit_str = ""
    short = settings.speed_short_mode
    if settings.speed_unit is SpeedUnit.AUTO:
        if size < 1024 * 10:
            value_str = ("%.1f" if short else "%.2f") % _scaled(size, 1)
            unit_str = "K" if short else "KB"
        elif size < 1024 * 1000:
            value_str = ("%.0f" if short else "%.1f") % _scaled(size, 1)
            unit_str = "K" if short else "KB"
        elif size < 1024 * 1024 * 1000:
            value_str = ("%.1f" if short else "%.2f") % _scaled(size, 2)
            unit_str = "M" if short else "MB"
        else:
            value_str = "%.2f" % _scaled(size, 3)
            unit_str = "G" if short else "GB"
    elif settings.speed_unit is SpeedUnit.KBPS:
        if size < 1024 * 10:
            value_str = ("%.1f" if short else "%.2f") % _scaled(size, 1)
        else:
            value_str = ("%.0f" if short else "%.1f") % _scaled(size, 1)
        if not settings.hide_unit:
            unit_str = "K" if short else "KB"
    elif settings.speed_unit is SpeedUnit.MBPS:
        value_str = ("%.1f" if short else "%.2f") % _scaled(size, 2)
        if not settings.hide_unit:
            unit_str = "M" if short else "MB"

    if settings.separate_value_unit_with_space and not settings.hide_unit:
        text = f"{value_str} {unit_str}"
    else:
        text = value_str + unit_str
    if not settings.unit_byte:
        if short and not settings.hide_unit:
            text += "b"
        else:
            text = text.replace("B", "b")
    return text


def data_size_to_plain_string(size: int) -> str:
    """Format a byte count in KB, MB, GB or TB."""
    if size < 1024 * 10:
        return "%.2f KB" % (size / 1024.0)
    if size < 1024 * 1024:
        return "%.1f KB" % (size / 1024.0)
    if size < 1024 * 1024 * 1024:
        return "%.2f MB" % (size / 1024.0 / 1024.0)
    if size < 1024 ** 4:
        return "%.2f GB" % (size / 1024.0 / 1024.0 / 1024.0)
    return "%.2f TB" % (size / 1024.0 / 1024.0 / 1024.0 / 1024.0)


def kbytes_to_string(kb_size: int) -> str:
    """Format a kilobyte count in KB, MB, GB or TB."""
    if kb_size < 1024:
        return "%d KB" % kb_size
    if kb_size < 1024 * 1024:
        return "%.2f MB" % (kb_size / 1024.0)
    if kb_size < 1024 * 1024 * 1024:
        return "%.2f GB" % (kb_size / 1024.0 / 1024.0)
    return "%.2f TB" % (kb_size / 1024.0 / 1024.0 / 1024.0)


def temperature_to_string(temperature: float, settings: PublicSettings) -> str:
    """Whole degrees Celsius, or '--' when the reading is not positive."""
    text = "--" if temperature <= 0 else "%d" % int(temperature)
    if settings.separate_value_unit_with_space:
        text += " "
    return text + "℃"


def usage_to_string(usage: int, settings: PublicSettings) -> str:
    """A percentage, or '--' when the usage is negative."""
    text = "--" if usage < 0 else "%d" % usage
    if not settings.hide_percent:
        if settings.separate_value_unit_with_space:
            text += " "
        text += "%"
    return text


def compare_system_time(a, b) -> datetime.time:
    """The time of day ``a - b``, keeping hours, minutes and seconds and wrapping past midnight."""
    hour = a.hour - b.hour
    minute = a.minute - b.minute
    second = a.second - b.second
    if second < 0:
        second += 60
        minute -= 1
    if minute < 0:
        minute += 60
        hour -= 1
    if hour < 0:
        hour += 24
    return datetime.time(hour, minute, second)


def filetime_difference(time1: int, time2: int) -> int:
    """``time2 - time1`` for two 64-bit tick counts."""
    return time2 - time1