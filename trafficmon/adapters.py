"""Network connections and matching them against the interface counter table."""

from __future__ import annotations

import dataclasses
import socket
from collections.abc import Iterable, Sequence

import psutil

from trafficmon.text_utils import string_similar_degree

UNKNOWN_ADDRESS = "-.-.-.-"
NO_CONNECTION_DESCRIPTION = "<No connection>"


@dataclasses.dataclass
class NetworkConnection:
    """One network connection and its counters at the time it was found."""

    index: int = 0
    description: str = ""
    description_2: str = ""
    in_bytes: int = 0
    out_bytes: int = 0
    ip_address: str = UNKNOWN_ADDRESS
    subnet_mask: str = UNKNOWN_ADDRESS
    default_gateway: str = UNKNOWN_ADDRESS


@dataclasses.dataclass
class IfTableEntry:
    """One row of the interface table: its description and byte counters."""

    description: str
    in_octets: int = 0
    out_octets: int = 0


def get_adapter_info() -> list[NetworkConnection]:
    """Connections that carry an IPv4 address, with their address and mask.

    When there is none, a single placeholder connection is returned.
    """
    adapters: list[NetworkConnection] = []
    for name, addresses in psutil.net_if_addrs().items():
        ipv4 = next((a for a in addresses if a.family == socket.AF_INET), None)
        if ipv4 is None:
            continue
        adapters.append(
            NetworkConnection(
                description=name,
                ip_address=ipv4.address,
                subnet_mask=ipv4.netmask or "0.0.0.0",
            )
        )
    if not adapters:
        adapters.append(NetworkConnection(description=NO_CONNECTION_DESCRIPTION))
    return adapters


def refresh_ip_address(adapters: Iterable[NetworkConnection]) -> None:
    """Update the address, mask and gateway of connections in place."""
    adapters = list(adapters)
    for fresh in get_adapter_info():
        for adapter in adapters:
            if adapter.description == fresh.description:
                adapter.ip_address = fresh.ip_address
                adapter.subnet_mask = fresh.subnet_mask
                adapter.default_gateway = fresh.default_gateway


def find_connection_in_if_table(connection: str, if_table: Sequence[IfTableEntry]) -> int:
    """Index of the entry whose description equals ``connection``, or -1."""
    return next(
        (i for i, entry in enumerate(if_table) if entry.description == connection),
        -1,
    )


def find_connection_in_if_table_fuzzy(connection: str, if_table: Sequence[IfTableEntry]) -> int:
    """Index of the entry that best matches ``connection``.

    An entry whose description contains, or is contained in, the connection
    wins first; otherwise the most similar description is chosen (0 if none
    is similar at all).
    """
    for i, entry in enumerate(if_table):
        descr = entry.description
        if len(descr) >= len(connection):
            found = connection in descr
        else:
            found = descr in connection
        if found:
            return i
    max_degree = 0.0
    best_index = 0
    for i, entry in enumerate(if_table):
        degree = string_similar_degree(entry.description, connection)
        if degree > max_degree:
            max_degree = degree
            best_index = i
    return best_index


def get_if_table_info(adapters: Iterable[NetworkConnection], if_table: Sequence[IfTableEntry]) -> None:
    """Fill in each connection's table index, counters and table description in place."""
    for adapter in adapters:
        if not adapter.description:
            continue
        if not if_table:
            raise ValueError("the interface table is empty")
        index = find_connection_in_if_table(adapter.description, if_table)
        if index == -1:
            index = find_connection_in_if_table_fuzzy(adapter.description, if_table)
        entry = if_table[index]
        adapter.index = index
        adapter.in_bytes = entry.in_octets
        adapter.out_bytes = entry.out_octets
        adapter.description_2 = entry.description


def get_all_if_table_info(
    if_table: Sequence[IfTableEntry],
    adapter_info: Sequence[NetworkConnection] | None = None,
) -> list[NetworkConnection]:
    """One connection per table entry, with addresses taken from the adapter list."""
    if adapter_info is None:
        adapter_info = get_adapter_info()
    connections = []
    for i, entry in enumerate(if_table):
        connection = NetworkConnection(
            index=i,
            description=entry.description,
            description_2=entry.description,
            in_bytes=entry.in_octets,
            out_bytes=entry.out_octets,
        )
        for info in adapter_info:
            if info.description in connection.description:
                connection.ip_address = info.ip_address
                connection.subnet_mask = info.subnet_mask
                connection.default_gateway = info.default_gateway
                break
        connections.append(connection)
    return connections