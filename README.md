# minishell

Building blocks of a small POSIX-style shell, usable as a library.

- `minishell.builtins` holds the `Shell` class, which carries an
  `Environment`, an output stream, an error stream, the last exit status
  (`last_return`) and an optional logical working directory (`logical_cwd`).
  It runs the builtins `echo`, `env`, `export`, `unset` and `pwd`. Each
  builtin takes the whole argument list, command name first. It returns its
  exit status and records that status and the last argument in `_`.
  The module also has these helpers:
  - `is_n_flag` recognises `-n`, `-nnn` and the like.
  - `clean_path` collapses repeated slashes and drops trailing ones.
  - `exit_with_message` prints an exit message and raises `SystemExit`.
- `minishell.environment` holds `Environment`, an ordered list of `EnvVar`
  entries. An entry with no value is kept for `export` but left out of `env`.
  `Environment` has these methods:
  - `find`, `update`, `set` and `remove` look up and change entries. `remove`
    never removes `_`.
  - `sorted_copy`, `export_lines` and `env_lines` produce the listings.
  The module also has these functions:
  - `validate_name` checks an identifier and raises `InvalidIdentifier` for
    a bad one.
  - `load_path_from_environment_file` reads a `/etc/environment`-style file.
    `load_path_from_paths_file` reads a `/etc/paths`-style file. Each one
    fills in `PATH` only when it is missing or empty.
- `minishell.libstr` has the string helpers `atoi`, `itoa`, `split`,
  `strtrim`, `strnstr`, `strncmp`, `substr`, `strchr` and `strrchr`.
  `minishell.libchar` has the character helpers `isalpha`, `isdigit`,
  `isalnum`, `isascii`, `isprint`, `tolower` and `toupper`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
import io
from minishell.environment import Environment
from minishell.builtins import Shell

out, err = io.StringIO(), io.StringIO()
shell = Shell(Environment.from_mapping({"HOME": "/home/user"}), out, err)

shell.export(["export", "GREETING=hello"])
shell.echo(["echo", "hi", "there"])
print(out.getvalue(), end="")      # hi there
print(shell.env.find("GREETING"))  # hello

shell.export(["export", "1X"])
print(err.getvalue(), end="")  # minishell: export: `1X': not a valid identifier
print(shell.last_return)       # 1
```

On a `Shell` instance, the attribute `env` is the `Environment`. To run the
`env` builtin, call it through the class: `Shell.env(shell, ["env"])`.

## What it does not do

The package has no command-line program and no interactive prompt. It does
not read, tokenise, expand or parse command lines, and it does not run
external programs, pipelines, redirections or here-documents. Its builtins
are `echo`, `env`, `export`, `unset` and `pwd` only. There is no `cd` and no
`exit` builtin. `exit_with_message` only prints a message and raises
`SystemExit` with the given code.