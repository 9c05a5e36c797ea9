"""Lexer with keyword suggestions, parse-tree builder, semantic checks and target-code translation for a small C subset."""

__version__ = "0.1.0"
__all__ = ["__version__"]