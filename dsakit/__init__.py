"""Classic data structures and algorithms: a bounded queue, a bounded stack, sorting and searching."""

__version__ = "0.1.0"
__all__ = ["circular_queue", "stack", "counting_sort", "quicksort", "search", "cli"]