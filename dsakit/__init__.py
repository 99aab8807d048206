"""Classic data structures: sorted sets, linked lists, stacks, hash-table account stores, big integers, rationals and expression evaluation."""

__version__ = "0.1.0"