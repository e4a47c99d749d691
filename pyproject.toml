[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oxidroid"
version = "0.1.0"
description = "Terminal dashboard for CPU, memory, storage, battery, network and processes"
requires-python = ">=3.10"
dependencies = [
    "psutil",
]
keywords = ["monitoring", "dashboard", "terminal", "curses", "termux", "system"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX :: Linux",
    "Operating System :: Android",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
oxidroid = "oxidroid.main:main"

[tool.hatch.build.targets.wheel]
packages = ["oxidroid"]

[tool.pytest.ini_options]
addopts = "-ra"
