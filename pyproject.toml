[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "turma"
version = "0.1.0"
description = "Classroom console tools: a student roster, pass/fail reports, a grade table and a small LSB text hider"
requires-python = ">=3.10"
dependencies = []
keywords = ["students", "grades", "roster", "report", "steganography", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
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
turma-roster = "turma.roster:main"
turma-review = "turma.review:main"
turma-report = "turma.report:main"
turma-stego = "turma.stego:main"

[tool.hatch.build.targets.wheel]
packages = ["turma"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
