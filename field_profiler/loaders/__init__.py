"""
Row sources for local files.

Key Components:
- LoaderFactory: Picks the loader for a file's format
- CSVLoader / JSONLoader: Read a file into row mappings
- load_rows: One-call helper
"""

from .base import DataLoader
from .csv_loader import CSVLoader
from .json_loader import JSONLoader
from .factory import LoaderFactory, load_rows

__all__ = [
    'DataLoader',
    'CSVLoader',
    'JSONLoader',
    'LoaderFactory',
    'load_rows',
]
