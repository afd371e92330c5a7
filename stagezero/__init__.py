"""Knight virtual machine tools: assembler, M0 macro expander, disassembler and utilities."""

__version__ = "0.1.0"