[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "metroroute"
version = "0.1.0"
description = "Metro network route finder: shortest distance and fewest line changes, with an HTTP API and map windows"
requires-python = ">=3.10"
keywords = ["metro", "transit", "routing", "dijkstra", "graph", "map"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Environment :: Web Environment",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
metroroute-server = "metroroute.server:main"
metroroute-viewer = "metroroute.viewer:main"
metroroute-app = "metroroute.appview:main"

[tool.hatch.build.targets.wheel]
packages = ["metroroute"]

[tool.pytest.ini_options]
addopts = "-ra"
