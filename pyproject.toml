[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sockdemo"
version = "0.1.0"
description = "Small socket programs: address lookup, a time server, TCP and UDP clients, upper-casing echo servers and interface listing"
requires-python = ">=3.10"
keywords = ["sockets", "tcp", "udp", "networking", "getaddrinfo", "echo", "interfaces"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]
dependencies = [
    "psutil",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
sockdemo-resolve = "sockdemo.addresses:main"
sockdemo-time = "sockdemo.timeinfo:main"
sockdemo-time-server = "sockdemo.time_server:main"
sockdemo-udp-recv = "sockdemo.udp_tools:recvfrom_main"
sockdemo-udp-send = "sockdemo.udp_tools:sendto_main"
sockdemo-tcp-client = "sockdemo.tcp_client:main"
sockdemo-toupper = "sockdemo.toupper_server:main"
sockdemo-interfaces = "sockdemo.interfaces:main"

[tool.hatch.build.targets.wheel]
packages = ["sockdemo"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
