# pipeshell

Building blocks for a small command shell:

- `pipeshell.chars`: character classification and integer/text conversion
  (`atoi`, `itoa`, `intlen`, `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`,
  `is_print`, `to_lower`, `to_upper`).
- `pipeshell.strutil`: C-style string helpers (`split`, `strtrim`, `substr`,
  `strncmp`, `strcmp`, `strnstr`, `strchr`, `strrchr`, `strlcpy`, `strlcat`).
  Searches return an index into the text, or `None` when nothing is found.
- `pipeshell.linereader`: `LineReader` reads a text stream, a binary stream
  or a file descriptor line by line in fixed-size chunks. Each line keeps its
  trailing newline, and `read_line()` returns `None` at the end.
- `pipeshell.fmt`: `format_string` and `printf` handle the
  `%c %s %p %d %i %u %x %X %%` conversions. Integers wrap to 32 bits the way
  C's `int` and `unsigned int` do.
- `pipeshell.pipeline`: `Command`, `Pipeline` and `run_pipeline` look up
  programs on `PATH`, or take a name starting with `/` as it stands. They
  connect the commands with pipes and honour input files, output files,
  append mode and here-documents. Helpers: `find_path_dirs`,
  `resolve_command`, `collect_heredoc`, `is_blank`.

## Install

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from pipeshell.strutil import split
from pipeshell.fmt import format_string

split("  ls -l  /tmp ", " ")          # ['ls', '-l', '/tmp']
format_string("%d%% of %s", 50, "x")  # '50% of x'
```

```python
import io
from pipeshell.linereader import LineReader

reader = LineReader(io.StringIO("one\ntwo"), 4)
list(reader)                          # ['one\n', 'two']
```

```python
import os
from pipeshell.pipeline import Command, run_pipeline

commands = [Command(["printf", "b\\na\\n"]), Command(["sort"])]
statuses = run_pipeline(commands, dict(os.environ), None)  # e.g. [0, 0]
```

`Pipeline.run` waits for every stage and returns their exit statuses in
order. A stage whose program cannot be found is not started and reports
status 1.

`PipelineError` is raised in these cases:

- a command has an empty name;
- `PATH` is missing when a lookup needs it, which ends `find_path_dirs` and `resolve_command`;
- an input or output file cannot be opened;
- the input runs out before a here-document's delimiter line.

## What it does not do

There is no interactive shell and no command to run. The package does not
read or parse command lines, expand variables or quotes, or provide built-in
commands such as `cd`, `echo`, `export` or `exit`. It does not handle
signals. Pipelines are built from `Command` objects in Python code.