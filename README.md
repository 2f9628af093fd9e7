# tgsh

Building blocks for a POSIX-style interactive shell, in plain Python with no
third-party dependencies.

## What is inside

- `tgsh.lexer`: `Lexer` turns a command line into `(start, Token, end)`
  triples. A `Token` has a `TokenKind` and, for words, a `value`. Keywords
  such as `if`, `case` or `done` get their own kinds; an unrecognised
  character raises `LexError`.
- `tgsh.ast`: the command tree types (`SimpleCommand`, `Pipeline`, `And`,
  `Or`, `Not`, `AsyncList`, `SeqList`, `Subshell`, `Exec`, `If`, `While`,
  `Until`, `For`, `Case`, `FunctionDef`, `NoOp`, with `Redirect`,
  `RedirectMode`, `Assign`, `SeparatorOp`, `CaseArm` and `Condition`).
- `tgsh.posix.needs_line_check`: tells whether a line is unfinished, that
  is, it has a trailing backslash, an open quote or an unclosed `(` or `{`.
- `tgsh.env.Env`: environment variables. Keys and values are checked.
  `InvalidKeyError`, `InvalidValueError` and `EnvNotFoundError` are raised
  for bad input. Every change is copied into `os.environ`.
- `tgsh.alias.Alias`: aliases, several per name. Each alias can have a
  rule (`AliasInfo.always`, `AliasInfo.with_rule`).
- `tgsh.history`: `DefaultHistory` keeps history in memory. `FileBackedHistory`
  keeps one entry per line in a file, drops duplicates and writes the file on
  every change. Index 0 is the most recent entry in both.
- `tgsh.hooks.Hooks`: hooks keyed by context type (`StartupCtx`,
  `BeforeCommandCtx`, `AfterCommandCtx`, `CommandNotFoundCtx`,
  `ChangeDirCtx`, `JobExitCtx`). `Hooks.with_defaults()` registers the
  default hooks.
- `tgsh.keybinding`: `parse_keybinding` reads strings such as `"C-S-c"`,
  `"Ctrl-c"` or `"<esc>"`. `DefaultKeybinding` sends a `KeyEvent` to the
  callback bound to it.
- `tgsh.jobs.Jobs`: tracks background child processes and one foreground
  process.
- `tgsh.signals.Signals`: records whether SIGINT has arrived.
- `tgsh.cmd_output.CmdOutput`: an exit status with captured stdout and
  stderr.
- `tgsh.output_writer.OutputWriter`: writes coloured output and can also
  collect it.
- `tgsh.prompt`: `full_pwd`, `top_pwd`, `username` and `hostname`.
  `username` and `hostname` run `whoami` and `hostname`.
- `tgsh.handler.find_binary`: resolves a command name. It looks first for a
  command the shell handles itself (`exit`), then for a file in the current
  directory, then in each directory of a colon-separated path.
- `tgsh.colors`, `tgsh.theme` and `tgsh.loader`: colours, styled text,
  gradients, the default `Theme` and a `LoadingIndicator` spinner.

## Installing

```
pip install .
```

## Examples

Tokenizing a line:

```python
from tgsh.lexer import Lexer

for start, token, end in Lexer("ls -al | grep 'hello world'"):
    print(start, token.kind, token.value, end)
```

Checking whether the user must keep typing:

```python
from tgsh.posix import needs_line_check

needs_line_check("echo 'unterminated")   # True
needs_line_check("echo done")            # False
```

Parsing a keybinding:

```python
from tgsh.keybinding import KeyModifiers, parse_keybinding

code, mods = parse_keybinding("Ctrl-Shift-c")
assert mods == KeyModifiers.CONTROL | KeyModifiers.SHIFT
```

Working with the environment:

```python
from tgsh.env import Env

env = Env()
env.set("EDITOR", "vi")
env.get("EDITOR")   # "vi"
```

## What it does not do

This is a library of parts, not a working shell. It does not:

- provide a command to run or an interactive read-eval loop;
- parse tokens into `tgsh.ast` trees or evaluate them, since the lexer
  stops at tokens;
- provide builtin commands such as `cd`, `export` or `alias`;
- provide a combined shell context object or a working-directory manager.

## Running the tests

```
pip install .[test]
pytest
```