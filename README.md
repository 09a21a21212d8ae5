# pipechain

`pipechain` runs a chain of commands connected by pipes, reading the first
command's input from a file and writing the last command's output to a file.
It behaves like the shell line

```sh
< infile cmd1 | cmd2 > outfile
```

## Installation

```sh
pip install .
```

## Two commands

```sh
pipechain infile "grep error" "wc -l" outfile
```

Exactly four arguments are required: the input file, two commands and the
output file. Otherwise `pipechain` prints `Error : invalid parameters` and
exits with a failure status.

- The output file is created if needed (mode `0644`) and truncated.
- Each command is split on spaces; there is no quoting, globbing or variable
  expansion.
- A command name without a `/` is looked up in the directories of `PATH`;
  the first entry that exists and is readable and executable is used.
  A name containing a `/` is used as a path as given; a name ending in `/`
  is reported as `<name>: is a directory`.
- A command that cannot be found is reported on standard output as
  `command not found : <name>`, an empty command as `Command '' not found`,
  and the rest of the chain still runs; the command after it reads empty
  input.
- If the input file cannot be opened, the error is reported on standard
  error and the first command does not run; later commands still run with
  empty input. If the output file cannot be opened, the last command does
  not run.
- The command exits with status 0 once the chain has run, whatever the
  commands themselves returned.

## Three or more commands

```sh
pipechain-multi infile "cat" "tr a-z A-Z" "sort" "uniq -c" outfile
```

`pipechain-multi` takes an input file, three or more commands and an output
file, behaving like

```sh
< infile cmd1 | cmd2 | ... | cmdN > outfile
```

With fewer than five arguments it prints `Error : invalid parameters` and
exits with a failure status.

### Here-document input

```sh
pipechain-multi here_doc END "tr a-z A-Z" "cat" outfile
```

When the first argument starts with `here_doc`, the second argument is a
limiter and two or more commands may follow. Lines are read from standard
input, each after a `heredoc> ` prompt, until a line equal to the limiter
(followed by a newline) or the end of input. The collected text becomes the
input of the first command, and the output is appended to the output file
instead of replacing it, like

```sh
cmd1 << END | cmd2 >> outfile
```

## Using it from Python

```python
from pipechain.pipeline import run_pipeline

statuses = run_pipeline(["grep error", "wc -l"], "app.log", "count.txt")
```

`run_pipeline(commands, infile, outfile, append=False, env=None,
input_data=None)` returns the exit status of each stage; a stage that could
not run counts as 1. `input_data` (text or bytes) replaces the input file,
`append` appends to the output file, and `env` is the environment used both
for the `PATH` lookup and for the commands. It raises `ValueError` when no
command or no input is given.

`plan_stages(commands, env)` resolves commands without running them and
returns `Stage` objects holding the command, its words, the resolved `path`
or the `error` explaining why it cannot run.

`pipechain.resolve` offers the lookup on its own: `split_command`,
`path_directories`, `join_command`, `search_path`, `check_explicit_path` and
`resolve_command`, which raise `CommandResolutionError` when a command
cannot be found.

`pipechain.heredoc.collect_here_doc(limiter, stream, prompt_stream)` reads
here-document text from any stream, writing the prompt to `prompt_stream`.

## What it does not do

`pipechain` is not a shell: it does not parse quotes, operators, redirections
or variables inside a command, and it does not report the commands' exit
statuses through its own exit status.