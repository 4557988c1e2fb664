[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "brickbreaker"
version = "0.1.0"
description = "A brick breaker arcade game with power-ups, menus, audio settings and save games"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "breakout", "brick breaker", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
brickbreaker = "brickbreaker.game:main"

[tool.hatch.build.targets.wheel]
packages = ["brickbreaker"]

[tool.pytest.ini_options]
addopts = "-ra"
