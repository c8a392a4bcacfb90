[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "invaders"
version = "0.1.0"
description = "A small text-mode space invaders game for the terminal"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "arcade", "terminal", "invaders", "shooter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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
invaders = "invaders.game:main"

[tool.hatch.build.targets.wheel]
packages = ["invaders"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
