"""In-memory DNA sequence database on an open-addressing hash table with incremental rehashing."""

__version__ = "0.1.0"
__all__ = ["dna", "database", "driver"]