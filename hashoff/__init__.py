"""Hash table workbench: string hash functions, a chained hash set, an interactive interpreter and a console menu."""

__version__ = "0.1.0"