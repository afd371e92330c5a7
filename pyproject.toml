[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "stagezero"
version = "0.1.0"
description = "Knight virtual machine tools: mnemonic assembler, M0 macro expander, disassembler and small utilities"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "assembler",
    "disassembler",
    "bootstrap",
    "M0",
    "macro assembler",
    "knight",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Assemblers",
    "Topic :: Software Development :: Disassemblers",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
stagezero-asm = "stagezero.asm:main"
stagezero-disasm = "stagezero.disasm:main"
stagezero-m0 = "stagezero.m0:main"
stagezero-m0-compact = "stagezero.m0:main_compact"
stagezero-catm = "stagezero.catm:main"
stagezero-execve-image = "stagezero.execve_image:main"
stagezero-charcount = "stagezero.charcount:main"
stagezero-more = "stagezero.pager:main"
stagezero-set = "stagezero.editor:main"

[tool.hatch.build.targets.wheel]
packages = ["stagezero"]

[tool.hatch.build.targets.sdist]
include = ["stagezero", "tests", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
