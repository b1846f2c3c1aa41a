"""
wordsplitter - Dictionary-based compound word splitting.

Splits a single compound word (e.g. a German noun) into its smallest
dictionary parts. The word list is injected by the host application.
"""

__version__ = "0.1.0"
