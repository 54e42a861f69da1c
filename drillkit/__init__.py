"""Small building blocks: string helpers, djb2 hash tables and search algorithms."""

__version__ = "0.1.0"

__all__ = [
    "arithmetic",
    "charclass",
    "hash_table",
    "hashing",
    "linked_search",
    "school",
    "search",
    "sorted_hash_table",
    "textlib",
]