[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "smarthome"
version = "0.1.0"
description = "Smart home devices, house reports, a small framed TCP protocol and a networked smart socket"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "smart-home",
    "home-automation",
    "smart-socket",
    "thermometer",
    "tcp",
    "protocol",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Home Automation",
    "Topic :: System :: Networking",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
smarthome-report = "smarthome.report_demo:main"
smarthome-socket-server = "smarthome.tcp_socket:main"
smarthome-socket = "smarthome.tcp_socket:cli_main"
smarthome-notify = "smarthome.notify:main"
smarthome-fizzbuzz = "smarthome.fizzbuzz:main"

[tool.hatch.build.targets.wheel]
packages = ["smarthome"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
