# trafficmon

A library of helpers for watching a machine's network traffic, CPU load and
hardware temperatures. It can also browse a per-day history of traffic totals
as a month calendar.

## Installation

```
pip install .
```

## Modules

- `trafficmon.formatting` turns numbers into display text.
  - `data_size_to_string(size, settings)` formats a per-second amount. It
    follows a `PublicSettings` value: `unit_byte`, `speed_unit` (a
    `SpeedUnit`: `AUTO`, `KBPS`, `MBPS`), `speed_short_mode`, `hide_unit`,
    `hide_percent` and `separate_value_unit_with_space`.
  - `data_size_to_plain_string` formats a byte count. `kbytes_to_string`
    formats a kilobyte count.
  - `temperature_to_string` and `usage_to_string` format readings. A
    temperature that is not positive, or a negative usage, is shown as `--`.
  - `compare_system_time` gives the time-of-day difference between two
    times. `filetime_difference` subtracts two tick counts.
- `trafficmon.adapters` deals with network connections.
  - `get_adapter_info()` lists the interfaces that have an IPv4 address, with
    their address and mask. If there are none, it returns a single
    `"<No connection>"` placeholder. The default gateway is always left as
    `-.-.-.-`.
  - `refresh_ip_address` updates a list of `NetworkConnection` records in
    place.
  - `find_connection_in_if_table` and `find_connection_in_if_table_fuzzy`
    match a description against a sequence of `IfTableEntry` rows. The fuzzy
    match tries substring matching first, then Levenshtein similarity.
  - `get_if_table_info` fills in each connection's index and byte counters.
  - `get_all_if_table_info` builds one connection per table row.
- `trafficmon.cpu_usage`: `CpuUsage().get_cpu_usage()` returns the CPU load
  in percent since the previous call. `set_use_cpu_times(False)` switches to
  the counter method, whose first reading is 0.
- `trafficmon.hardware_monitor` works on a tree of sensors.
  - `HardwareMonitor` takes `Hardware` objects, each with `Sensor` readings,
    sub-hardware and an optional `updater` callback.
  - `get_hardware_info()` updates every sensor. Afterwards
    `cpu_temperature()`, `gpu_temperature()`, `hdd_temperature()`,
    `mainboard_temperature()` and `gpu_usage()` return the readings, with
    `-1` meaning unknown.
  - The helper functions `visit_hardware`, `hardware_temperature` and
    `gpu_core_usage` are public as well.
- `trafficmon.calendar_helper` has `is_leap_year`, `calculate_week_day` (0 is
  Sunday), `days_in_month`, and `get_calendar`. `get_calendar` returns a 6×7
  grid of `DayTraffic` cells, starting weeks on Sunday or on Monday.
- `trafficmon.traffic_calendar` has `TrafficCalendar`, which lays a list of
  `HistoryTraffic` records (in kilobytes) out month by month.
  - Navigation: `select`, `previous_month`, `next_month`, `jump_to_today` and
    `set_sunday_first`.
  - Totals: `month_total_upload`, `month_total_download` and `month_total`.
  - `is_weekend` and `weekday_index` describe the calendar columns.
  - `day_tip` gives tooltip text for a day.
  - `traffic_level` maps a kilobyte amount to a `TrafficLevel` colour band.
- Small helpers:
  - `trafficmon.text_utils` has string splitting and trimming, Levenshtein
    similarity, `<%n%>` placeholder formatting, bit and colour helpers, and
    font-name weight parsing.
  - `trafficmon.variant` has `Variant`, the value type used by
    `string_format`.
  - `trafficmon.file_path` has `FilePathHelper` for path parts and
    extensions.
  - `trafficmon.fileops` has log writing, file reading, directory listing and
    file moving.

## Example

```python
from trafficmon.formatting import PublicSettings, SpeedUnit, data_size_to_string
from trafficmon.traffic_calendar import HistoryTraffic, TrafficCalendar

settings = PublicSettings(speed_unit=SpeedUnit.AUTO)
print(data_size_to_string(2048, settings))   # 2.00 KB

history = [
    HistoryTraffic(year=2024, month=3, day=2, up_kbytes=500, down_kbytes=4000),
    HistoryTraffic(year=2024, month=3, day=1, up_kbytes=100, down_kbytes=900),
]
calendar = TrafficCalendar(history, sunday_first=True)
print(calendar.day_tip(2))
```

## What this package does not do

- It is a library only. It has no command-line program, no windows and no
  taskbar display.
- It does not save or load the traffic history. You pass `HistoryTraffic`
  records to `TrafficCalendar` yourself.
- It does not read hardware sensors from the system. `HardwareMonitor` only
  reports what the `Hardware` and `Sensor` objects you give it hold. Use an
  `updater` callback to refresh them.
- It does not look up the external IP address, and it does not check for
  updates.

## Running the tests

```
pip install .[test]
pytest
```