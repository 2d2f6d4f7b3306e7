"""Base class for row sources."""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List

import pandas as pd

from field_profiler.core.exceptions import DataLoadError
from field_profiler.profiler.values import Row

logger = logging.getLogger(__name__)


def dataframe_to_rows(df: pd.DataFrame) -> List[Row]:
    """
    Convert a DataFrame into row mappings.

    Missing cells (NaN/None/NaT) become None so that the profiler sees them
    as nulls.
    """
    if df.empty:
        return []
    cleaned = df.astype(object).where(df.notna(), None)
    return cleaned.to_dict(orient="records")


class DataLoader(ABC):
    """
    Load a local file into rows.

    Subclasses implement ``read_frame``; ``load_rows`` handles the common
    checks and the conversion to row mappings.
    """

    def __init__(self, file_path: str, **kwargs: Any):
        """
        Initialize the loader.

        Args:
            file_path: Path to the data file
            **kwargs: Format specific options
        """
        self.file_path = Path(file_path)
        self.kwargs = kwargs

    def get_file_size(self) -> int:
        """File size in bytes."""
        return self.file_path.stat().st_size

    def is_empty(self) -> bool:
        return self.get_file_size() == 0

    @abstractmethod
    def read_frame(self) -> pd.DataFrame:
        """Read the file into a DataFrame."""

    def load_rows(self) -> List[Row]:
        """
        Load every row of the file.

        Returns:
            List of row mappings (empty for an empty file)

        Raises:
            DataLoadError: If the file is missing or cannot be parsed
        """
        if not self.file_path.exists():
            raise DataLoadError(f"Data file not found: {self.file_path}", str(self.file_path))

        if self.is_empty():
            logger.warning(f"Empty data file: {self.file_path}")
            return []

        rows = dataframe_to_rows(self.read_frame())
        logger.info(f"Loaded {len(rows):,} rows from {self.file_path}")
        return rows

    def get_metadata(self) -> Dict[str, Any]:
        """Basic file metadata."""
        return {
            "file_path": str(self.file_path),
            "file_size_bytes": self.get_file_size(),
            "file_size_mb": round(self.get_file_size() / (1024 * 1024), 2),
            "is_empty": self.is_empty(),
        }
