[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "karek"
version = "1.0.0"
description = "Interactive personal spending tracker, with a small 24-hour clock and a FIFO queue."
requires-python = ">=3.10"
dependencies = []
keywords = ["expenses", "budget", "spending", "tracker", "salary", "queue", "clock"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: English",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Accounting",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
karek = "karek.tracker:main"
karek-fifo = "karek.fifo:main"

[tool.hatch.build.targets.wheel]
packages = ["karek"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
