[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ipcalculator"
version = "1.0.0"
description = "IPv4 subnet calculator: network, broadcast and host range from an address and a mask or CIDR prefix"
requires-python = ">=3.10"
dependencies = []
keywords = ["ipv4", "subnet", "cidr", "netmask", "calculator", "networking"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ipcalculator = "ipcalculator.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ipcalculator"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
