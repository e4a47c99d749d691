"""Background sampling of system metrics, with fallbacks for restricted platforms."""

from __future__ import annotations

import ipaddress
import platform
import socket
import subprocess
import sys
import threading
import time
from pathlib import Path

import psutil

from oxidroid.types import (
    BatteryData,
    CpuData,
    DeviceInfo,
    MemData,
    NetData,
    ProcessInfo,
    SharedState,
    StorageData,
    SystemData,
)

CPU_ROOT = "/sys/devices/system/cpu"
PROC_NET_DEV = "/proc/net/dev"
LINUX_BATTERY = "/sys/class/power_supply/BAT0"
FALLBACK_CPU_MODEL = "ARM CPU (Hardware Fallback)"
MAX_PROCESSES = 20
DEFAULT_INTERVAL = 0.5
_COMMAND_TIMEOUT = 5.0
_U64_MAX = 2**64 - 1
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1

_WMIC_STATUS = {
    "1": "Discharging",
    "2": "AC/Plugged In",
    "3": "Fully Charged",
    "4": "Low/Critical",
    "5": "Low/Critical",
    "6": "Charging",
    "7": "Charging",
    "8": "Charging",
    "9": "Charging",
}

_PROCESS_STATUS = {
    "running": "Run",
    "sleeping": "Sleep",
    "disk-sleep": "UninterruptibleDiskSleep",
    "stopped": "Stop",
    "tracing-stop": "Tracing",
    "zombie": "Zombie",
    "dead": "Dead",
    "wake-kill": "Wakekill",
    "waking": "Waking",
    "parked": "Parked",
    "idle": "Idle",
    "locked": "LockBlocked",
    "waiting": "Waiting",
}


# ── number parsing ──────────────────────────────────────────────────────────


def _parse_uint(text: str, maximum: int = _U64_MAX) -> int | None:
    digits = text[1:] if text.startswith("+") else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        return None
    value = int(digits)
    return value if value <= maximum else None


def _parse_int(text: str) -> int | None:
    digits = text[1:] if text[:1] in ("+", "-") else text
    if not digits or not (digits.isascii() and digits.isdigit()):
        return None
    value = int(text)
    return value if _I64_MIN <= value <= _I64_MAX else None


def _parse_float(text: str) -> float | None:
    if not text or text != text.strip() or "_" in text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def _u64(text: str) -> int:
    value = _parse_uint(text)
    return 0 if value is None else value


# ── external commands ───────────────────────────────────────────────────────


def _run(args: list[str], require_success: bool = False) -> str | None:
    """Run a command and return its stdout as UTF-8 text, or None on any failure."""
    try:
        result = subprocess.run(
            args, capture_output=True, timeout=_COMMAND_TIMEOUT, check=False
        )
    except (OSError, subprocess.SubprocessError):
        return None
    if require_success and result.returncode != 0:
        return None
    try:
        return result.stdout.decode("utf-8")
    except UnicodeDecodeError:
        return None


def _run_lossy(args: list[str]) -> str | None:
    try:
        result = subprocess.run(
            args, capture_output=True, timeout=_COMMAND_TIMEOUT, check=False
        )
    except (OSError, subprocess.SubprocessError):
        return None
    return result.stdout.decode("utf-8", errors="replace")


# ── CPU ─────────────────────────────────────────────────────────────────────


def _read_khz_as_mhz(path: Path) -> int | None:
    """Return the MHz value of a kHz file; None when the file cannot be read."""
    try:
        contents = path.read_text()
    except (OSError, UnicodeDecodeError):
        return None
    khz = _parse_uint(contents.strip())
    return khz // 1000 if khz is not None else 0


def read_cpu_frequencies(root: str | Path = CPU_ROOT) -> tuple[int, list[int]]:
    """Count ``cpuN`` directories under ``root`` and read each one's frequency in MHz."""
    base = Path(root)
    freqs: list[int] = []
    index = 0
    while (cpu_dir := base / f"cpu{index}").exists():
        mhz = _read_khz_as_mhz(cpu_dir / "cpufreq" / "scaling_cur_freq")
        if mhz is None:
            mhz = _read_khz_as_mhz(cpu_dir / "cpufreq" / "cpuinfo_max_freq")
        freqs.append(mhz or 0)
        index += 1
    return index, freqs


def _cpu_model() -> str:
    try:
        with open("/proc/cpuinfo", encoding="utf-8", errors="replace") as fh:
            for line in fh:
                key, sep, value = line.partition(":")
                if sep and key.strip() in ("model name", "Hardware", "Processor"):
                    if value.strip():
                        return value.strip()
    except OSError:
        pass
    return platform.processor()


def _cpu_frequencies() -> list[int]:
    try:
        freqs = psutil.cpu_freq(percpu=True) or []
    except (OSError, NotImplementedError, AttributeError, RuntimeError):
        return []
    return [int(f.current) for f in freqs]


# ── network ─────────────────────────────────────────────────────────────────


def _totals_or_none(tx: int, rx: int) -> tuple[int, int] | None:
    return (tx, rx) if tx > 0 or rx > 0 else None


def parse_proc_net_dev(text: str) -> tuple[int, int] | None:
    """Sum transmitted and received bytes from ``/proc/net/dev`` text.

    Loopback, dummy and tunnel interfaces are ignored. Returns ``(tx, rx)``
    or None when both totals are zero.
    """
    total_rx = total_tx = 0
    for line in text.splitlines()[2:]:
        stripped = line.strip()
        if stripped.startswith(("lo:", "dummy", "tun")):
            continue
        pieces = line.split(":")
        data = pieces[1] if len(pieces) > 1 else ""
        fields = data.split()
        if len(fields) > 8:
            total_rx += _u64(fields[0])
            total_tx += _u64(fields[8])
    return _totals_or_none(total_tx, total_rx)


def parse_ip_link(text: str) -> tuple[int, int] | None:
    """Sum byte counters from ``ip -s link`` output; returns ``(tx, rx)`` or None."""
    total_rx = total_tx = 0
    lines = iter(text.splitlines())
    for line in lines:
        if "RX: " in line:
            following = next(lines, None)
            if following is not None and following.split():
                total_rx += _u64(following.split()[0])
        elif "TX: " in line:
            following = next(lines, None)
            if following is not None and following.split():
                total_tx += _u64(following.split()[0])
    return _totals_or_none(total_tx, total_rx)


def _ifconfig_counter(lower_line: str, marker: str) -> int:
    pieces = lower_line.split(marker)
    if len(pieces) < 2:
        return 0
    number = pieces[1].lstrip(":").lstrip()
    return _u64(number.split(" ", 1)[0])


def parse_ifconfig(text: str) -> tuple[int, int] | None:
    """Sum ``RX bytes``/``TX bytes`` counters from ``ifconfig`` output."""
    total_rx = total_tx = 0
    for line in text.splitlines():
        lower = line.lower()
        if "rx bytes" in lower:
            total_rx += _ifconfig_counter(lower, "rx bytes")
        if "tx bytes" in lower:
            total_tx += _ifconfig_counter(lower, "tx bytes")
    return _totals_or_none(total_tx, total_rx)


def read_net_io() -> tuple[int, int] | None:
    """Read total ``(tx, rx)`` bytes from /proc, ``ip`` or ``ifconfig``, in that order."""
    try:
        contents = Path(PROC_NET_DEV).read_text()
    except (OSError, UnicodeDecodeError):
        contents = None
    if contents is not None:
        totals = parse_proc_net_dev(contents)
        if totals is not None:
            return totals

    output = _run(["ip", "-s", "link"])
    if output is not None:
        totals = parse_ip_link(output)
        if totals is not None:
            return totals

    output = _run(["ifconfig"])
    if output is not None:
        return parse_ifconfig(output)
    return None


def parse_wifi_ip(text: str) -> str | None:
    """Extract the ``"ip"`` value from ``termux-wifi-connectioninfo`` JSON output."""
    key = '"ip": "'
    start = text.find(key)
    if start < 0:
        return None
    rest = text[start + len(key):]
    end = rest.find('"')
    if end < 0:
        return None
    return rest[:end]


def read_wifi_ip() -> str | None:
    """Ask the Termux API for the Wi-Fi address."""
    output = _run(["termux-wifi-connectioninfo"], require_success=True)
    return parse_wifi_ip(output) if output is not None else None


def _first_ipv4() -> str:
    try:
        interfaces = psutil.net_if_addrs()
    except OSError:
        return "N/A"
    for addresses in interfaces.values():
        for address in addresses:
            if address.family != socket.AF_INET:
                continue
            try:
                parsed = ipaddress.ip_address(address.address)
            except ValueError:
                continue
            if not parsed.is_loopback:
                return address.address
    return "N/A"


# ── battery ─────────────────────────────────────────────────────────────────


def _json_field(text: str, key: str) -> str | None:
    quoted = f'"{key}"'
    pos = text.find(quoted)
    if pos < 0:
        return None
    rest = text[pos + len(quoted):]
    colon = rest.find(":")
    if colon < 0:
        return None
    value = rest[colon + 1:].strip()
    if value.startswith('"'):
        end = value[1:].find('"')
        if end < 0:
            return None
        return value[1:end + 1]
    ends = [i for i in (value.find(","), value.find("}")) if i >= 0]
    end = min(ends) if ends else len(value)
    return value[:end].strip()


def _text_field(text: str, key: str) -> str:
    """A string field's value; a missing field reads Unknown, an empty one stays empty."""
    value = _json_field(text, key)
    return "Unknown" if value is None else value


def parse_termux_battery(text: str) -> BatteryData | None:
    """Read ``termux-battery-status`` JSON; None when it has no percentage."""
    if "percentage" not in text:
        return None

    def number(key: str, parse, default):
        raw = _json_field(text, key)
        value = parse(raw) if raw is not None else None
        return default if value is None else value

    return BatteryData(
        percentage=number("percentage", lambda v: _parse_uint(v, 255), 0),
        status=_text_field(text, "status"),
        health=_text_field(text, "health"),
        temperature=number("temperature", _parse_float, 0.0),
        plugged=_text_field(text, "plugged"),
        current_ua=number("current", _parse_int, 0),
        time_remaining="N/A",
    )


def parse_wmic_battery(text: str) -> BatteryData | None:
    """Read ``wmic path Win32_Battery`` list output; None when it has no charge field."""
    if "EstimatedChargeRemaining" not in text:
        return None
    percentage = 0
    status = "Unknown"
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if line.startswith("EstimatedChargeRemaining="):
            value = _parse_uint(line.split("=")[1], 255)
            percentage = value if value is not None else 0
        elif line.startswith("BatteryStatus="):
            status = _WMIC_STATUS.get(line.split("=")[1], "Unknown")
    plugged = "Plugged" if "Charging" in status or "AC" in status else "Unplugged"
    return BatteryData(
        percentage=percentage,
        status=status,
        health="N/A",
        temperature=0.0,
        plugged=plugged,
        current_ua=0,
        time_remaining="N/A",
    )


def _read_linux_battery(path: Path) -> BatteryData:
    try:
        capacity = (path / "capacity").read_text()
    except (OSError, UnicodeDecodeError):
        capacity = ""
    percentage = _parse_uint(capacity.strip(), 255) or 0
    try:
        status = (path / "status").read_text().strip()
    except (OSError, UnicodeDecodeError):
        status = "Unknown"
    return BatteryData(
        percentage=percentage,
        status=status,
        health="Good",
        temperature=0.0,
        plugged="Plugged" if status in ("Charging", "Full") else "Unplugged",
        current_ua=0,
        time_remaining="N/A",
    )


def read_battery() -> BatteryData:
    """Battery state from Termux, then Windows, then Linux; N/A when there is none."""
    output = _run(["termux-battery-status"])
    if output is not None:
        battery = parse_termux_battery(output)
        if battery is not None:
            return battery

    if sys.platform == "win32":
        output = _run_lossy(
            [
                "wmic",
                "path",
                "Win32_Battery",
                "get",
                "EstimatedChargeRemaining,BatteryStatus",
                "/format:list",
            ]
        )
        if output is not None:
            battery = parse_wmic_battery(output)
            if battery is not None:
                return battery

    if sys.platform.startswith("linux"):
        path = Path(LINUX_BATTERY)
        if path.exists():
            return _read_linux_battery(path)

    return BatteryData(
        percentage=0,
        status="N/A",
        health="N/A",
        temperature=0.0,
        plugged="N/A",
        current_ua=0,
        time_remaining="N/A",
    )


# ── device ──────────────────────────────────────────────────────────────────


def _getprop(key: str) -> str:
    return (_run(["getprop", key]) or "").strip()


def _os_name_and_version() -> tuple[str, str]:
    try:
        release = platform.freedesktop_os_release()
    except OSError:
        release = None
    if release is not None:
        return release.get("NAME", "Unknown"), release.get("VERSION_ID", "")
    if sys.platform == "darwin":
        return "Darwin", platform.mac_ver()[0]
    return platform.system() or "Unknown", platform.version()


def read_device_info() -> DeviceInfo:
    """Android properties when available, otherwise the host operating system."""
    manufacturer = _getprop("ro.product.manufacturer")
    model = _getprop("ro.product.model")
    if manufacturer or model:
        kernel = (_run(["uname", "-r"]) or "").strip()
        version = _getprop("ro.build.version.release")
        return DeviceInfo(
            model=model,
            android=f"Android {version}",
            arch=_getprop("ro.product.cpu.abi"),
            manufacturer=manufacturer,
            kernel=kernel,
        )

    os_name, os_version = _os_name_and_version()
    host = socket.gethostname() or "Localhost"
    return DeviceInfo(
        model="",
        android=f"{os_name} {os_version}".strip(),
        arch=platform.machine(),
        manufacturer=host,
        kernel=platform.release(),
    )


# ── uptime ──────────────────────────────────────────────────────────────────


def parse_uptime(text: str) -> int | None:
    """Seconds of uptime from ``uptime`` output, or None when nothing is found."""
    cleaned = text.replace(",", " ")
    if (idx := cleaned.find("up time:")) >= 0:
        start = idx + len("up time:")
    elif (idx := cleaned.find("up ")) >= 0:
        start = idx + len("up ")
    else:
        return None

    ends = [cleaned.find(marker) for marker in (" user", " idle", " load")]
    end = min((e for e in ends if e >= 0), default=len(cleaned))
    tokens = cleaned[start:end].strip().split()

    days = hours = mins = secs = 0
    previous = None
    for token in tokens:
        t = token.lower()
        prev_value = _u64(previous) if previous is not None else None
        if "day" in t or t == "d":
            if prev_value is not None:
                days = prev_value
        elif "hour" in t or "hr" in t or t == "h":
            if prev_value is not None:
                hours = prev_value
        elif "min" in t or t == "m":
            if prev_value is not None:
                mins = prev_value
        elif "sec" in t or t == "s":
            if prev_value is not None:
                secs = prev_value
        elif ":" in t:
            parts = t.split(":")
            if len(parts) >= 3:
                hours, mins, secs = _u64(parts[0]), _u64(parts[1]), _u64(parts[2])
            elif len(parts) == 2:
                hours, mins = _u64(parts[0]), _u64(parts[1])
        previous = token

    total = days * 86400 + hours * 3600 + mins * 60 + secs
    return total if total > 0 else None


def read_uptime() -> int | None:
    """Uptime in seconds from the ``uptime`` command."""
    output = _run(["uptime"])
    return parse_uptime(output) if output is not None else None


# ── sampling ────────────────────────────────────────────────────────────────


def _percent(part: int, whole: int) -> float:
    return part / whole * 100.0 if whole > 0 else 0.0


def _storage() -> StorageData:
    total = used = free = 0
    try:
        partitions = psutil.disk_partitions(all=False)
    except OSError:
        partitions = []
    for partition in partitions:
        try:
            usage = psutil.disk_usage(partition.mountpoint)
        except OSError:
            continue
        total += usage.total
        used += max(usage.total - usage.free, 0)
        free += usage.free
    return StorageData(total=total, used=used, free=free, percent=_percent(used, total))


def _processes(total_memory: int) -> list[ProcessInfo]:
    rows = []
    attrs = ["pid", "name", "status", "cpu_percent", "memory_info"]
    for proc in psutil.process_iter(attrs):
        info = proc.info
        memory = info.get("memory_info")
        rss = memory.rss if memory is not None else 0
        status = info.get("status") or ""
        rows.append(
            ProcessInfo(
                pid=info.get("pid") or 0,
                name=info.get("name") or "",
                cpu=float(info.get("cpu_percent") or 0.0),
                mem=rss / total_memory * 100.0 if total_memory > 0 else 0.0,
                status=_PROCESS_STATUS.get(status, status.capitalize()),
            )
        )
    rows.sort(key=lambda p: p.cpu, reverse=True)
    return rows[:MAX_PROCESSES]


def _system_uptime() -> int:
    try:
        return max(int(time.time() - psutil.boot_time()), 0)
    except (OSError, RuntimeError):
        return 0


class Collector:
    """Takes successive samples, keeping the counters needed for transfer speeds."""

    def __init__(self) -> None:
        self._last_sent = 0
        self._last_recv = 0
        self._last_time = time.monotonic()
        self._device: DeviceInfo | None = None
        psutil.cpu_percent(percpu=True)
        psutil.cpu_percent()

    def _cpu(self) -> CpuData:
        percent = psutil.cpu_percent()
        per_core = [float(p) for p in psutil.cpu_percent(percpu=True)]
        count = len(per_core)
        model = _cpu_model()
        freq_mhz = _cpu_frequencies()

        if count == 0 or all(f == 0 for f in freq_mhz):
            fallback_count, fallback_freqs = read_cpu_frequencies()
            if fallback_count > 0:
                count = fallback_count
                freq_mhz = fallback_freqs
                if not per_core:
                    per_core = [0.0] * count
                if not model:
                    model = FALLBACK_CPU_MODEL
        return CpuData(
            percent=float(percent),
            per_core=per_core,
            count=count,
            model=model,
            freq_mhz=freq_mhz,
        )

    def _network(self) -> NetData:
        try:
            counters = psutil.net_io_counters(pernic=True)
        except OSError:
            counters = {}
        sent = sum(c.bytes_sent for c in counters.values())
        recv = sum(c.bytes_recv for c in counters.values())
        if sent == 0 and recv == 0:
            fallback = read_net_io()
            if fallback is not None:
                sent, recv = fallback

        now = time.monotonic()
        elapsed = now - self._last_time
        if elapsed > 0:
            speed_up = max(sent - self._last_sent, 0) / elapsed
            speed_down = max(recv - self._last_recv, 0) / elapsed
        else:
            speed_up = speed_down = 0.0
        self._last_sent, self._last_recv, self._last_time = sent, recv, now

        ip = read_wifi_ip() or _first_ipv4()
        return NetData(
            ip=ip,
            bytes_sent=sent,
            bytes_recv=recv,
            speed_up=speed_up,
            speed_down=speed_down,
        )

    def _device_info(self) -> DeviceInfo:
        if self._device is None or not self._device.kernel:
            self._device = read_device_info()
        return self._device

    def sample(self) -> SystemData:
        """Gather one complete snapshot of the system."""
        cpu = self._cpu()

        vm = psutil.virtual_memory()
        used = max(vm.total - vm.available, 0)
        swap = psutil.swap_memory()
        memory = MemData(
            total=vm.total,
            used=used,
            available=vm.available,
            percent=_percent(used, vm.total),
            swap_total=swap.total,
            swap_used=swap.used,
            swap_percent=_percent(swap.used, swap.total),
        )

        network = self._network()
        processes = _processes(vm.total)

        uptime = _system_uptime()
        if uptime == 0:
            uptime = read_uptime() or 0

        return SystemData(
            cpu=cpu,
            memory=memory,
            storage=_storage(),
            battery=read_battery(),
            network=network,
            processes=processes,
            device=self._device_info(),
            uptime_secs=uptime,
        )

    def update(self, shared: SharedState) -> None:
        """Sample and store the result; device info already known is kept."""
        data = self.sample()
        current = shared.snapshot()
        if current.device.kernel:
            data.device = current.device
        shared.store(data)


def collect_loop(
    shared: SharedState,
    stop: threading.Event | None = None,
    interval: float = DEFAULT_INTERVAL,
) -> None:
    """Refresh ``shared`` every ``interval`` seconds until ``stop`` is set."""
    event = stop if stop is not None else threading.Event()
    collector = Collector()
    while not event.is_set():
        collector.update(shared)
        event.wait(interval)