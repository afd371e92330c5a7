# stagezero

Tools for writing programs for the Knight virtual machine, in plain Python
with no dependencies outside the standard library: a mnemonic assembler, an
M0 macro expander, a disassembler, and a few small utilities.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command-line tools

Each tool is installed as a console script and takes its input file as the
first argument.

| Command | What it does |
| --- | --- |
| `stagezero-asm FILE` | Assembles Knight mnemonics; for each source line prints a `#` comment line with the source (labels annotated with their offset) and a line of hex |
| `stagezero-m0 FILE` | Expands M0 macro source (`DEFINE name value`, strings, immediates) into hex2 text, one item per line |
| `stagezero-m0-compact FILE` | The compact M0 expander: DEFINEs apply anywhere in the file, immediates must lie in -32768..65535, and unknown words stop the run |
| `stagezero-disasm FILE` | Disassembles a Knight binary into an addressed listing; words that are not instructions are shown as strings |
| `stagezero-catm OUT IN...` | Concatenates the input files into the output file (created with mode 0600, truncated if present) |
| `stagezero-execve-image IMAGE [ARGS...]` | Writes the image followed by its NUL-padded argument strings and an argv table to standard output |
| `stagezero-charcount FILE` | Counts digits, upper-case, lower-case and other printable characters, reporting on standard error |
| `stagezero-more FILE` | Shows a file ten lines at a time, waiting for a key between pages |
| `stagezero-set FILE` | A tiny line editor driven by single keys: `e` edit, `d` delete, `p` print, `f`/`b` next/previous line, `i`/`a` insert before/after, `w` write, `q` quit, `?` help |

Typical use:

```
stagezero-m0 program.s > program.hex2
stagezero-disasm program.bin
```

## Library use

```python
from stagezero.m0 import expand, expand_compact
from stagezero.disasm import disassemble
from stagezero.asm import assemble

hex2_text = expand(open("program.s").read())
listing = disassemble(open("program.bin", "rb").read())
annotated = assemble(open("program.asm").read())
```

Other pieces:

- `stagezero.m0.expand_compact` raises `M0Error` for out-of-range numbers and
  unknown words; its `partial` attribute holds the output produced so far.
- `stagezero.disasm.disassemble` raises `TruncatedInstructionError` when the
  data ends inside a four-byte word.
- `stagezero.asm.tokenize` returns the assembler's `Token` list.
- `stagezero.opcodes` turns opcode fields into mnemonic names (`name_4op`,
  `name_3op`, `name_2op`, `name_1op`, `name_0op`, `name_2opi`, `name_1opi`,
  `name_0opi`, `name_halcode`), returning `None` for unknown values.
- `stagezero.execve_image.build_image(binary, args)` lays out a binary with
  its arguments.
- `stagezero.catm.concatenate(output, inputs)` returns the number of bytes
  written.
- `stagezero.charcount.count_characters` returns a `CharacterCounts`.
- `stagezero.trace.InstructionTrace` tallies instruction names with `record`
  and lists them in first-seen order with `report`.
- `stagezero.pager.paginate(text, output, wait, page_lines=10)` writes text a
  page at a time.
- `stagezero.editor.Editor` and `stagezero.editor.load_lines` for scripting
  the line editor.
- `stagezero.cc_reader.tokenize` and `stagezero.cc_strings.parse_string` for
  tokenizing a C subset and converting string literals to assembler form.
- `stagezero.textutil` for number helpers such as `numerate_number` and
  `numerate_string`.

## What this package does not do

There is no assembler here that turns hex0, hex1 or hex2 text into a binary,
and no hex-dump tool. The output of `stagezero-m0` is hex2 text; turning it
into a runnable binary needs a separate hex2 assembler. The package also does
not include the Knight virtual machine itself, and the C tooling stops at
tokenizing and string-literal conversion: there is no compiler.