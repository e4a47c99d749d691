import threading
import time

import pytest

from oxidroid.collector import (
    Collector,
    collect_loop,
    parse_ifconfig,
    parse_ip_link,
    parse_proc_net_dev,
    parse_termux_battery,
    parse_uptime,
    parse_wifi_ip,
    parse_wmic_battery,
    read_cpu_frequencies,
)
from oxidroid.types import DeviceInfo, SharedState, SystemData

PROC_HEADER = (
    "Inter-|   Receive                                                |  Transmit\n"
    " face |bytes    packets errs drop fifo frame compressed multicast|bytes"
    "    packets errs drop fifo colls carrier compressed\n"
)


def test_proc_net_dev_single_interface():
    text = PROC_HEADER + "  eth0: 5000 20 0 0 0 0 0 0 7000 30 0 0 0 0 0 0\n"
    assert parse_proc_net_dev(text) == (7000, 5000)


def test_proc_net_dev_skips_loopback_and_tunnels():
    text = (
        PROC_HEADER
        + "    lo: 1000 10 0 0 0 0 0 0 1000 10 0 0 0 0 0 0\n"
        + "  tun0: 300 3 0 0 0 0 0 0 400 4 0 0 0 0 0 0\n"
        + "dummy0: 300 3 0 0 0 0 0 0 400 4 0 0 0 0 0 0\n"
    )
    assert parse_proc_net_dev(text) is None


def test_proc_net_dev_sums_interfaces():
    text = (
        PROC_HEADER
        + "  eth0: 5000 20 0 0 0 0 0 0 7000 30 0 0 0 0 0 0\n"
        + " wlan0: 100 2 0 0 0 0 0 0 200 3 0 0 0 0 0 0\n"
    )
    tx, rx = parse_proc_net_dev(text)
    assert (tx, rx) == (7000 + 200, 5000 + 100)


def test_proc_net_dev_ignores_header_only():
    assert parse_proc_net_dev(PROC_HEADER) is None


def test_ip_link_output():
    text = (
        "2: eth0: <BROADCAST,MULTICAST,UP> mtu 1500\n"
        "    link/ether 00:00:00:00:00:00 brd ff:ff:ff:ff:ff:ff\n"
        "    RX: bytes  packets  errors  dropped missed  mcast\n"
        "    4096       10       0       0       0       0\n"
        "    TX: bytes  packets  errors  dropped carrier collsns\n"
        "    2048       8        0       0       0       0\n"
    )
    assert parse_ip_link(text) == (2048, 4096)


def test_ip_link_without_counters():
    assert parse_ip_link("1: lo: <LOOPBACK,UP>\n") is None


def test_ifconfig_old_format():
    text = (
        "eth0      Link encap:Ethernet\n"
        "          RX bytes:4096 (4.0 KiB)  TX bytes:2048 (2.0 KiB)\n"
    )
    assert parse_ifconfig(text) == (2048, 4096)


def test_ifconfig_without_byte_counters():
    assert parse_ifconfig("eth0: flags=4163<UP>  mtu 1500\n") is None


def test_wifi_ip_found():
    text = '{\n  "bssid": "placeholder",\n  "ip": "192.168.1.23",\n  "rssi": -50\n}'
    assert parse_wifi_ip(text) == "192.168.1.23"


def test_wifi_ip_missing():
    assert parse_wifi_ip('{"ssid": "home"}') is None


TERMUX_BATTERY = """{
  "health": "GOOD",
  "percentage": 87,
  "plugged": "UNPLUGGED",
  "status": "DISCHARGING",
  "temperature": 31.5,
  "current": -420000
}"""


def test_termux_battery_fields():
    battery = parse_termux_battery(TERMUX_BATTERY)
    assert battery.percentage == 87
    assert battery.health == "GOOD"
    assert battery.plugged == "UNPLUGGED"
    assert battery.status == "DISCHARGING"
    assert battery.temperature == pytest.approx(31.5)
    assert battery.current_ua == -420000
    assert battery.time_remaining == "N/A"


def test_termux_battery_missing_fields_are_unknown():
    battery = parse_termux_battery('{"percentage": 50}')
    assert battery.percentage == 50
    assert battery.status == "Unknown"
    assert battery.health == "Unknown"
    assert battery.temperature == 0.0
    assert battery.current_ua == 0


def test_termux_battery_without_percentage():
    assert parse_termux_battery('{"status": "FULL"}') is None


def test_wmic_battery_plugged_in():
    battery = parse_wmic_battery(
        "\r\n\r\nBatteryStatus=2\r\nEstimatedChargeRemaining=76\r\n\r\n"
    )
    assert battery.percentage == 76
    assert battery.status == "AC/Plugged In"
    assert battery.plugged == "Plugged"
    assert battery.health == "N/A"


def test_wmic_battery_discharging():
    battery = parse_wmic_battery("BatteryStatus=1\nEstimatedChargeRemaining=40\n")
    assert battery.status == "Discharging"
    assert battery.plugged == "Unplugged"


def test_wmic_battery_charging_and_unknown_code():
    charging = parse_wmic_battery("BatteryStatus=7\nEstimatedChargeRemaining=10\n")
    unknown = parse_wmic_battery("BatteryStatus=42\nEstimatedChargeRemaining=10\n")
    assert charging.status == "Charging"
    assert charging.plugged == "Plugged"
    assert unknown.status == "Unknown"


def test_wmic_battery_absent():
    assert parse_wmic_battery("No Instance(s) Available.\n") is None


def test_uptime_day_equals_twenty_four_hours():
    assert parse_uptime("up 1 day") == parse_uptime("up 24 hours")


def test_uptime_clock_form_matches_words():
    clock = parse_uptime(" 14:32:07 up  3:05,  2 users,  load average: 0.00, 0.01")
    words = parse_uptime("up 3 hours, 5 min")
    assert clock == words
    assert clock is not None and clock > 0


def test_uptime_days_add_to_clock():
    with_days = parse_uptime(" 10:00:00 up 2 days,  3:05,  1 user,  load average: 0.1")
    without_days = parse_uptime(" 10:00:00 up  3:05,  1 user,  load average: 0.1")
    one_day = parse_uptime("up 1 day")
    assert with_days == without_days + 2 * one_day


def test_uptime_busybox_form():
    assert parse_uptime("up time: 5 min") == parse_uptime("up 5 min")


def test_uptime_seconds_counted():
    assert parse_uptime("up 1 min 30 sec") > parse_uptime("up 1 min")


def test_uptime_unparseable():
    assert parse_uptime("no such thing") is None
    assert parse_uptime("up 0 min") is None


def test_cpu_frequencies(tmp_path):
    cur = tmp_path / "cpu0" / "cpufreq"
    cur.mkdir(parents=True)
    (cur / "scaling_cur_freq").write_text("1800000\n")
    fallback = tmp_path / "cpu1" / "cpufreq"
    fallback.mkdir(parents=True)
    (fallback / "cpuinfo_max_freq").write_text("2400000\n")
    (tmp_path / "cpu2").mkdir()
    assert read_cpu_frequencies(tmp_path) == (3, [1800, 2400, 0])


def test_cpu_frequencies_bad_current_does_not_fall_back(tmp_path):
    freq = tmp_path / "cpu0" / "cpufreq"
    freq.mkdir(parents=True)
    (freq / "scaling_cur_freq").write_text("garbage")
    (freq / "cpuinfo_max_freq").write_text("2400000")
    assert read_cpu_frequencies(tmp_path) == (1, [0])


def test_cpu_frequencies_empty_root(tmp_path):
    assert read_cpu_frequencies(tmp_path) == (0, [])


def test_sample_invariants():
    data = Collector().sample()
    assert data.memory.total > 0
    assert 0.0 <= data.memory.percent <= 100.0
    assert data.memory.used + data.memory.available >= data.memory.total - 1
    assert len(data.processes) <= 20
    cpus = [p.cpu for p in data.processes]
    assert cpus == sorted(cpus, reverse=True)
    assert data.network.ip
    assert data.storage.used + data.storage.free <= data.storage.total or data.storage.total == 0
    assert data.network.speed_up >= 0.0 and data.network.speed_down >= 0.0


def test_update_keeps_known_device():
    shared = SharedState(SystemData(device=DeviceInfo(kernel="custom-kernel", model="m")))
    Collector().update(shared)
    stored = shared.snapshot()
    assert stored.device.kernel == "custom-kernel"
    assert stored.device.model == "m"
    assert stored.memory.total > 0


def test_collect_loop_fills_state_and_stops():
    shared = SharedState()
    stop = threading.Event()
    worker = threading.Thread(target=collect_loop, args=(shared, stop, 0.01))
    worker.start()
    deadline = time.monotonic() + 30
    while shared.snapshot().memory.total == 0 and time.monotonic() < deadline:
        time.sleep(0.05)
    stop.set()
    worker.join(timeout=30)
    assert shared.snapshot().memory.total > 0
    assert not worker.is_alive()