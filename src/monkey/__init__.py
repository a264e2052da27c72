"""Monkey — lexical scanner and token REPL for the Monkey scripting language."""

__version__ = "0.1.0"
