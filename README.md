# minishellkit

The parts of a small shell, as a plain Python library with no dependencies.

- `minishellkit.cstrings`: string helpers that follow C library rules.
  `atoi` and `atoll` parse a leading integer, wrapping to 32 and 64 bits.
  The module also has `itoa`, `split`, `strtrim`, `substr` and `strnstr`.
  `strcmp` and `strncmp` return the difference of the first differing bytes.
- `minishellkit.printf`: `format_printf(fmt, *args)` returns formatted text. It
  knows `%c %s %d %i %u %x %X %p %%`, and integers are treated as 32-bit values.
  `printf(fmt, *args, stream=None)` writes that text to `stream` (stdout by
  default) and returns the number of characters written.
- `minishellkit.lines`: `LineReader(stream, buffer_size=50)` reads a text or
  binary stream in fixed-size chunks. `next_line()` returns one line at a time,
  keeping the trailing newline, and returns `None` at the end. A `LineReader`
  can also be iterated.
- `minishellkit.environment`: `Environment` is an ordered store of `EnvVar`
  entries. It supports `get`, `set`, `append_value`, `remove`, `copy`,
  `env_lines` and `declare_lines`, and it is built with `Environment.from_envp`.
  The module also holds the checks the builtins use: `split_assignment`,
  `is_valid_export`, `is_plus_equal`, `is_positive_llong` and
  `is_negative_llong`.
- `minishellkit.builtins`: the builtins `cd`, `echo`, `env`, `exit_builtin`,
  `export`, `pwd` and `unset`. Each one works on a `ShellState`.

## Installation

```
pip install minishellkit
```

Run the tests with:

```
pip install "minishellkit[test]"
pytest
```

## Example

A builtin takes the arguments that follow the command name, not the name
itself.

```python
import io
from minishellkit.builtins import ShellState, ShellExit, echo, export, env, exit_builtin

out = io.StringIO()
state = ShellState.from_envp(["HOME=/home/user", "PATH=/usr/bin"], out=out)

export(["GREETING=hello"], state)
echo(["-n", "hi", "there"], state)
env(state)
print(out.getvalue())

try:
    exit_builtin(["42"], state)
except ShellExit as stop:
    print("shell would exit with", stop.status)
```

Each builtin records its exit status in `state.status` and returns it.
`exit_builtin` raises `ShellExit` instead of ending the process, so the
caller decides what happens next. If it gets more than one argument, it
reports an error and returns 1 instead of raising.

A `ShellState` holds two environments. `state.env` holds the variables handed
to commands. `state.exported` holds what `export` with no arguments lists as
`declare -x` lines. `export NAME` with no value adds `NAME` only to
`state.exported`.

## Reading lines

```python
import io
from minishellkit.lines import LineReader

for line in LineReader(io.StringIO("one\ntwo\nthree"), buffer_size=4):
    print(repr(line))
```

## What this package does not do

This is a library, not a shell you can run. It has no command-line entry
point and no interactive prompt. It has no command-line parsing, quoting or
`$` expansion. It has no pipelines, redirections or here-documents, and it
does not run external programs. Those parts are left to the code that uses
these builtins.