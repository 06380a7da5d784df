# pipex

`pipex` reads an input file and passes it through a chain of commands. The
result goes to an output file. It does the same job as the shell pipeline
`< infile cmd1 | cmd2 | ... | cmdN > outfile`.

## Installation

```
pip install .
```

## Usage

### Basic mode

The input file is read. Each command's output becomes the next command's
input. The output file is created with mode 0644 if it is missing, and is
truncated if it exists:

```
pipex infile "grep foo" "wc -l" outfile
```

This is the same as:

```
< infile grep foo | wc -l > outfile
```

One command is enough: `pipex infile cat outfile`.

### Here-document mode

Lines are read from standard input until a line that starts with the limiter.
The lines before it go into the first command. If input ends before the
limiter appears, everything read so far is used. The output file is opened for
appending:

```
pipex here_doc END "cat" "tr a-z A-Z" outfile
```

This is the same as:

```
cat << END | tr a-z A-Z >> outfile
```

The same entry point can be run as `python -m pipex.pipeline`.

### Commands

A command is split on spaces. No shell parses it, so quotes, variables and
globbing have no effect. If the first word names an existing file, that file
is run. Otherwise each directory in `PATH` is tried in order.

### Errors

- Too few arguments print `Error: wrong number of arguments`, and the exit
  status is 1. Basic mode needs at least `infile cmd outfile`. Here-document
  mode needs at least `here_doc LIMITER cmd outfile`.
- If the input or output file cannot be opened, `fd: <reason>` is printed and
  the exit status is 1.
- A command that cannot be found prints `command not found: <name>`. An empty
  command prints `access denied:`. A command that cannot be started prints
  `execve: <reason>`. In each of these cases the other commands still run, and
  the command after the failed one reads empty input. The exit status of
  `pipex` stays 0. The failure shows only as status 1 in the list that
  `run_pipeline` returns.

## As a library

```python
from pipex.pipeline import parse_args, run_pipeline

spec = parse_args(["infile", "grep foo", "wc -l", "outfile"])
statuses = run_pipeline(spec)   # one exit status per command
```

- `parse_args(args)` returns a `PipelineSpec`. It holds the `mode`
  (`Mode.BASIC` or `Mode.HEREDOC`), the `commands`, the `output_path`, and
  either an `input_path` or a `limiter`.
- `run_pipeline(spec, env=None, stdin=None)` runs the commands. `env` is the
  environment for the commands and for the `PATH` lookup. The default is
  `os.environ`. `stdin` is the stream that here-document lines are read from.
  The default is standard input.
- `main(argv=None)` takes the same arguments as the command line and returns
  the exit status.
- Errors are subclasses of `pipex.errors.PipexError`: `ArgumentCountError`,
  `CommandNotFoundError` and `EmptyCommandError`.
- `pipex.command.resolve_command(command_line, env)` returns the executable
  path and the argument list for a command.

The package also holds smaller helper modules:

- `pipex.lines`: `LineReader` reads lines from a descriptor or a stream. It
  pulls data in chunks of a fixed size. `LineReaderPool` keeps one reader per
  descriptor.
- `pipex.heredoc`: `collect_heredoc` and `is_limiter`.
- `pipex.fdprintf`: `fd_printf`, `format_string` and `to_base`. They provide a
  small printf with the conversions `c s p d i u x X %`.
- `pipex.fdio`: `put_char`, `put_str`, `put_endl` and `put_number`. They write
  straight to a file descriptor.
- `pipex.text`, `pipex.cstrings`, `pipex.memory` and `pipex.chars`: string,
  NUL-terminated buffer, byte-buffer and ASCII character helpers.
- `pipex.linkedlist`: a singly linked list, `LinkedList` built from `Node`s.

## What it does not do

`pipex` is not a shell. It has no quoting, redirection syntax other than the
input and output files, variables, globbing or built-in commands. It does not
report a failed command through its own exit status.