[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mxw"
version = "0.1.2"
description = "Command-line tool for configuring Glorious wireless and wired mice through Linux hidraw."
requires-python = ">=3.10"
dependencies = [
    "termcolor",
]
keywords = ["mouse", "hid", "hidraw", "usb", "glorious", "rgb", "dpi", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Hardware :: Universal Serial Bus (USB) :: Human Interface Device (HID)",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
mxw = "mxw.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["mxw"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]
