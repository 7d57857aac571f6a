"""Byte-buffer, conversion, character, printf, binary-tree, debug, line-reading and linked-list helpers."""

__version__ = "0.1.0"
__all__ = ["memory", "convert", "chars", "printf", "btree", "debug", "linereader", "linkedlist"]