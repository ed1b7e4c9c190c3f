import datetime

import pytest

from trafficmon.formatting import (
    PublicSettings,
    SpeedUnit,
    compare_system_time,
    data_size_to_plain_string,
    data_size_to_string,
    filetime_difference,
    kbytes_to_string,
    temperature_to_string,
    usage_to_string,
)


@pytest.mark.parametrize(
    "size, expected",
    [
        (10 * 1024 - 1, "10.00 KB"),
        (10 * 1024, "10.0 KB"),
        (1024 * 1024, "1.00 MB"),
        (1024 ** 3, "1.00 GB"),
        (1024 ** 4, "1.00 TB"),
    ],
)
def test_plain_size_units(size, expected):
    assert data_size_to_plain_string(size) == expected


def test_plain_size_value_close_to_megabytes():
    text = data_size_to_plain_string(3 * 1024 * 1024)
    assert float(text.split()[0]) == pytest.approx(3.0)


def test_kbytes_small_value_kept_whole():
    assert kbytes_to_string(512) == "512 KB"


@pytest.mark.parametrize(
    "kb, unit",
    [(1024, "MB"), (1024 * 1024, "GB"), (1024 ** 3, "TB")],
)
def test_kbytes_units(kb, unit):
    assert kbytes_to_string(kb).endswith(" " + unit)


def test_auto_speed_default_settings():
    text = data_size_to_string(2048, PublicSettings())
    assert text.endswith(" KB")
    assert float(text.split()[0]) == pytest.approx(2.0)


def test_auto_speed_large_uses_megabytes():
    assert data_size_to_string(5 * 1024 * 1024, PublicSettings()).endswith(" MB")


def test_auto_speed_short_mode():
    settings = PublicSettings(speed_short_mode=True, separate_value_unit_with_space=False)
    assert data_size_to_string(2048, settings) == "2.0K"


def test_bits_replace_byte_unit():
    text = data_size_to_string(2048, PublicSettings(unit_byte=False))
    assert text.endswith("Kb")
    assert float(text.split()[0]) == pytest.approx(16.0)


def test_bits_short_mode_appends_b():
    settings = PublicSettings(unit_byte=False, speed_short_mode=True)
    assert data_size_to_string(2048, settings).endswith(" Kb")


def test_kbps_hidden_unit_is_number_only():
    settings = PublicSettings(speed_unit=SpeedUnit.KBPS, hide_unit=True)
    assert data_size_to_string(100 * 1024, settings) == "100.0"


def test_mbps_unit():
    settings = PublicSettings(speed_unit=SpeedUnit.MBPS, speed_short_mode=True)
    assert data_size_to_string(1024 * 1024, settings).endswith(" M")


def test_temperature_invalid_shows_dashes():
    assert temperature_to_string(0, PublicSettings(separate_value_unit_with_space=False)) == "--℃"


def test_temperature_truncates():
    text = temperature_to_string(45.9, PublicSettings())
    assert text.startswith("45 ")
    assert text.endswith("℃")


def test_usage_strings():
    assert usage_to_string(-1, PublicSettings(hide_percent=True)) == "--"
    assert usage_to_string(37, PublicSettings()).endswith(" %")
    assert usage_to_string(37, PublicSettings(separate_value_unit_with_space=False)).startswith("37%")


def test_compare_system_time_borrows():
    a = datetime.time(10, 0, 0)
    b = datetime.time(9, 30, 30)
    assert compare_system_time(a, b) == datetime.time(0, 29, 30)


@pytest.mark.parametrize(
    "a, b",
    [
        (datetime.time(1, 2, 3), datetime.time(23, 59, 59)),
        (datetime.time(12, 0, 0), datetime.time(12, 0, 0)),
        (datetime.time(5, 40, 10), datetime.time(3, 50, 20)),
    ],
)
def test_compare_system_time_inverts_addition(a, b):
    diff = compare_system_time(a, b)

    def seconds(t):
        return t.hour * 3600 + t.minute * 60 + t.second

    assert (seconds(diff) + seconds(b)) % 86400 == seconds(a)


def test_filetime_difference_antisymmetric():
    t1, t2 = 132_000_000_000_000_000, 132_000_000_050_000_000
    assert filetime_difference(t1, t2) == -filetime_difference(t2, t1)
    assert t1 + filetime_difference(t1, t2) == t2