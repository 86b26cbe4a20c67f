"""Character, memory, string, number, formatting, line-reading and linked-list utilities."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "strings", "numbers", "output", "line_reader", "linked_list"]