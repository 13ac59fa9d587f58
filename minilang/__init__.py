"""A small scripting language: lexer, parser, tree-walking evaluator and command line."""

__version__ = "0.0.1"