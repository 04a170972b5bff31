[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scrobbie"
version = "0.1.0"
description = "Scrobble your Plex music playback history to Last.fm"
requires-python = ">=3.10"
keywords = ["plex", "lastfm", "scrobble", "music", "scrobbler"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio",
]
dependencies = [
    "requests>=2.28",
    "platformdirs>=3.0",
    "termcolor>=2.0",
]

[project.optional-dependencies]
test = [
    "pytest>=7.0",
    "responses>=0.23",
]

[project.scripts]
scrobbie = "scrobbie.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["scrobbie"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]
