"""Building blocks for a POSIX-style shell: lexer, syntax tree, environment, aliases, history, hooks and keybindings."""

__version__ = "0.1.0"