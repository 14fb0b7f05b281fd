[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termpong"
version = "0.1.0"
description = "Pong in the terminal: play against the computer, with a friend, or watch two computers play."
requires-python = ">=3.10"
dependencies = []
keywords = ["pong", "terminal", "game", "curses", "arcade"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console :: Curses",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
termpong = "termpong.terminal:main"

[tool.hatch.build.targets.wheel]
packages = ["termpong"]

[tool.pytest.ini_options]
addopts = "-ra"
