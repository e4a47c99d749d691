# oxidroid

A full-screen terminal dashboard built on `curses`. It shows live figures for
CPU, memory, storage, battery, network and processes. It also includes a small
file browser. System figures come from `psutil`. When those are blocked or
read as zero, as they can be inside Termux on Android, the collector falls
back to `/sys/devices/system/cpu`, `/proc/net/dev`, `ip -s link`, `ifconfig`,
`uptime`, `getprop` and the `termux-battery-status` and
`termux-wifi-connectioninfo` commands.

## Install

```
pip install .
```

## Run

```
oxidroid
```

The command takes no options. It samples the system in a background thread
every half second, redraws the screen, and prints `⚡Oxidroid closed!` when you
quit.

## Screens

The header shows the date, a 12-hour clock, the uptime and the key hints. The
sidebar lists eight screens:

- **Overview** shows gauges for CPU, memory, disk and battery level, along with
  upload and download speed, the manufacturer and model, the OS and the
  architecture.
- **CPU** shows overall load, a bar for each of up to eight cores, the model,
  the core count, and the average and highest clock in MHz.
- **Memory** shows RAM and swap usage, with total, used and available bytes.
- **Storage** shows disk usage summed over all mounted disks. Press Enter to
  open the file explorer.
- **Battery** shows charge, status, health, temperature, plug state and current.
- **Network** shows upload and download speed, the IPv4 address, and the total
  bytes sent and received.
- **Processes** lists the twenty processes using the most CPU, with PID, name,
  CPU %, memory % and status.
- **Settings** holds the refresh rate and the battery capacity.

## Keys

| Key               | Action                                      |
|-------------------|---------------------------------------------|
| Tab / Down        | next screen                                 |
| Shift-Tab / Up    | previous screen                             |
| Enter             | focus the file explorer or the settings     |
| Esc               | leave focus                                 |
| q / Q             | quit                                        |

In the file explorer, Up and Down move the selection, and Enter opens a
directory. The parent entry `..` comes first, then folders, then files. Both
groups are sorted by name, ignoring case. The explorer starts in the Termux
home directory when it exists, and in `/tmp` otherwise.

In settings, Up and Down choose an entry, and Left and Right adjust it:

- The refresh rate moves in steps of 100 ms, from 100 to 2000 ms.
- The battery capacity moves in steps of 500 mAh, from 1000 to 10000 mAh.

Press `r` to reset both to their defaults, which are 500 ms and 4000 mAh.

## Using the pieces

The parts of the dashboard can be used without the terminal.

- `oxidroid.collector.Collector().sample()` returns one `SystemData` snapshot.
- `collect_loop(shared, stop, interval)` refreshes a `SharedState` until a
  `threading.Event` is set.
- The `parse_*` functions in `oxidroid.collector` read the text printed by the
  commands listed above.
- `oxidroid.ui.canvas.Canvas` is a character grid. Each screen's `render`
  function draws onto it, and `Canvas.text()` returns the result as plain text.

## Limits

- The settings are stored and can be edited, but nothing reads them. Samples
  are always taken every half second, and the battery capacity is not used in
  any figure.
- The terminal front end needs the standard `curses` module. Standard Python
  builds for Windows do not include it.
- The file explorer only browses. It does not open, copy, move or delete files.

## Tests

```
pip install .[test]
pytest
```