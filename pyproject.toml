[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "syslab"
version = "0.1.0"
description = "Worked examples of computer-systems concepts: integer and float representation, machine-level arithmetic, a heap allocator, robust I/O, sockets, cycle counting and a tiny shell."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "computer systems",
    "education",
    "malloc",
    "two's complement",
    "robust io",
    "shell",
    "cycle counting",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
syslab-shell = "syslab.shell:main"
syslab-intconv = "syslab.intconv:main"

[tool.hatch.build.targets.wheel]
packages = ["syslab"]

[tool.pytest.ini_options]
addopts = "-ra"
