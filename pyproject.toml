[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "asteroidfield"
version = "0.1.0"
description = "An Asteroids-style arcade game with splitting asteroids, a ship shield and a shield bonus"
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["asteroids", "arcade", "game", "pygame"]
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
test = ["pytest"]

[project.scripts]
asteroidfield = "asteroidfield.game:main"

[tool.hatch.build.targets.wheel]
packages = ["asteroidfield"]

[tool.pytest.ini_options]
addopts = "-ra"
