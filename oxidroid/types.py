"""Snapshots of system metrics shared between the collector and the UI."""

from __future__ import annotations

import copy
import threading
from dataclasses import dataclass, field


@dataclass
class CpuData:
    """Overall and per-core processor load plus static CPU facts."""

    percent: float = 0.0
    per_core: list[float] = field(default_factory=list)
    count: int = 0
    model: str = ""
    freq_mhz: list[int] = field(default_factory=list)


@dataclass
class MemData:
    """RAM and swap usage in bytes and percent."""

    total: int = 0
    used: int = 0
    available: int = 0
    percent: float = 0.0
    swap_total: int = 0
    swap_used: int = 0
    swap_percent: float = 0.0


@dataclass
class StorageData:
    """Summed disk space over all mounted disks."""

    total: int = 0
    used: int = 0
    free: int = 0
    percent: float = 0.0


@dataclass
class BatteryData:
    """Battery charge and state as reported by the platform."""

    percentage: int = 0
    status: str = ""
    health: str = ""
    temperature: float = 0.0
    plugged: str = ""
    current_ua: int = 0
    time_remaining: str = ""


@dataclass
class NetData:
    """Network address, byte totals and current transfer speed."""

    ip: str = ""
    bytes_sent: int = 0
    bytes_recv: int = 0
    speed_up: float = 0.0
    speed_down: float = 0.0


@dataclass
class ProcessInfo:
    """One row of the process table."""

    pid: int = 0
    name: str = ""
    cpu: float = 0.0
    mem: float = 0.0
    status: str = ""


@dataclass
class DeviceInfo:
    """Static facts about the device and operating system."""

    model: str = ""
    android: str = ""
    arch: str = ""
    manufacturer: str = ""
    kernel: str = ""


@dataclass
class SystemData:
    """Everything the dashboard shows, gathered in one sample."""

    cpu: CpuData = field(default_factory=CpuData)
    memory: MemData = field(default_factory=MemData)
    storage: StorageData = field(default_factory=StorageData)
    battery: BatteryData = field(default_factory=BatteryData)
    network: NetData = field(default_factory=NetData)
    processes: list[ProcessInfo] = field(default_factory=list)
    device: DeviceInfo = field(default_factory=DeviceInfo)
    uptime_secs: int = 0


class SharedState:
    """Thread-safe holder of the latest SystemData."""

    def __init__(self, data: SystemData | None = None) -> None:
        self._lock = threading.Lock()
        self._data = data if data is not None else SystemData()

    def snapshot(self) -> SystemData:
        """Return an independent copy of the current data."""
        with self._lock:
            return copy.deepcopy(self._data)

    def store(self, data: SystemData) -> None:
        """Replace the current data with a copy of ``data``."""
        fresh = copy.deepcopy(data)
        with self._lock:
            self._data = fresh