[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ppnet"
version = "0.1.0"
description = "A tiny UDP client and server pair that exchange single-byte numbers, with thin socket helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["udp", "tcp", "sockets", "select", "networking"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ppnet-client = "ppnet.client:main"
ppnet-server = "ppnet.server:main"

[tool.hatch.build.targets.wheel]
packages = ["ppnet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
