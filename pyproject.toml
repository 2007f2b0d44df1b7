[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "plagueshooter"
version = "0.1.0"
description = "A terminal survival shooter: hold off the infected until the rescue arrives."
requires-python = ">=3.10"
keywords = ["game", "terminal", "curses", "shooter", "arcade", "survival"]
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
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
plague-shooter = "plagueshooter.game:main"

[tool.hatch.build.targets.wheel]
packages = ["plagueshooter"]

[tool.pytest.ini_options]
addopts = "-ra"
