[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hidpp10"
version = "0.1.0"
description = "HID++ 1.0 constants, sensor resolution conversion, and macro, profile directory and profile formats for on-board mouse memory"
requires-python = ">=3.10"
dependencies = []
keywords = ["hid", "hidpp", "mouse", "profiles", "macros", "sensor"]
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
    "Topic :: System :: Hardware :: Universal Serial Bus (USB) :: Human Interface Device (HID)",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["hidpp10"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
