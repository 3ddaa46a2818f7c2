[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "deskresume"
version = "0.1.0"
description = "An interactive desktop-style résumé driven by JSON screen descriptions"
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["resume", "desktop", "pygame", "portfolio", "interactive"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
deskresume = "deskresume.app:main"

[tool.hatch.build.targets.wheel]
packages = ["deskresume"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
