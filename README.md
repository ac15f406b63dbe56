# pipex

`pipex` runs a chain of commands the way a shell pipeline does. It reads
from a file and writes the result to another file.

## Installation

```
pip install .
```

## Usage

Give an input file, two or more commands, and an output file:

```
pipex infile "grep foo" "wc -l" outfile
```

This behaves like the shell line

```
< infile grep foo | wc -l > outfile
```

If the output file is missing, it is created with permissions `0777`. If it
exists, it is truncated. You can chain any number of commands:

```
pipex infile "cat" "sort" "uniq -c" outfile
```

The exit status is the exit status of the last command.

### Here-documents

If the first argument starts with `here_doc`, the input comes from standard
input. It is read up to, but not including, the first line that starts with
the limiter. The output file is then appended to rather than truncated:

```
pipex here_doc END "cat" "wc -l" outfile
```

This behaves like

```
cat << END | wc -l >> outfile
```

### Behaviour details

- Each command is split on spaces, and empty pieces are dropped. Quotes,
  variables and redirections are not interpreted. No shell is involved.
- The command name is looked up in the directories listed in `PATH`. If no
  executable is found there, the name is used as written. A name without a
  `/` is then taken relative to the current directory.
- If a command cannot be started, this is printed on standard error:
  `pipex: command not found: <name>`
  The next command in the chain then gets empty input.
- If there are too few arguments, the usage line
  `./pipex infile cmd cmd outfile` is printed on standard error and the
  exit status is 0. That means at least four arguments, or five with
  `here_doc`.
- If the input or output file cannot be opened, `pipex` exits with status 0
  and prints no message.

## Library use

You can also use the pieces behind the command from Python.

- `pipex.textops` has string helpers:
  - `split_words`
  - `strncmp`
  - `atoi`
  - `itoa`
  - `trim`
  - `substr`
  - `strnstr`
- `pipex.printf` has a small printf-style formatter with the conversions
  `c s p d i u x X %`:
  - `format_string` returns the text.
  - `print_formatted` writes it to standard output and returns its length.
  - `to_base` writes a non-negative number in any digit set.
- `pipex.lines.LineReader` reads a binary or text stream one line at a time,
  in fixed-size chunks. The default chunk size is 20.
- `pipex.resolve` has these helpers:
  - `open_file` with an `OpenMode` of `READ`, `TRUNCATE` or `APPEND`.
  - `getenv_value`
  - `command_argv`
  - `find_command`
  - `UsageError`
- `pipex.cli` has these functions:
  - `run_pipeline(commands, stdin, stdout, env)` runs a list of command
    strings between two open files and returns the last command's status.
  - `read_here_doc(limiter, stream)` collects here-document input.
  - `main(argv=None)` is the command-line entry point.

```python
from pipex.textops import split_words
from pipex.printf import format_string

split_words("ls  -l -a", " ")           # ['ls', '-l', '-a']
format_string("%d items, %x", 42, 255)  # '42 items, ff'
```

## What it does not do

`pipex` is not a shell. It has none of the following:

- quoting or escaping inside a command
- globbing
- variable expansion
- redirections inside a command
- conditional or background execution

Each command string is only split on spaces.