[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minresolv"
version = "0.1.0"
description = "A small stub DNS resolver with host, MX, NS, SOA and TXT lookups and a response cache"
requires-python = ">=3.10"
keywords = ["dns", "resolver", "mx", "ns", "soa", "txt", "ptr"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: Name Service (DNS)",
]
dependencies = [
    "dnspython",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["minresolv"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
