"""Loader factory: picks a row source from the file format."""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Type

from field_profiler.core.constants import FILE_EXTENSION_MAP, SUPPORTED_FILE_FORMATS
from field_profiler.core.exceptions import UnsupportedFormatError
from field_profiler.loaders.base import DataLoader
from field_profiler.loaders.csv_loader import CSVLoader
from field_profiler.loaders.json_loader import JSONLoader
from field_profiler.profiler.values import Row

logger = logging.getLogger(__name__)


class LoaderFactory:
    """Create the loader matching a file's format."""

    _loaders: Dict[str, Type[DataLoader]] = {
        "csv": CSVLoader,
        "json": JSONLoader,
    }

    @staticmethod
    def detect_format(file_path: str) -> str:
        """
        Format name for a file extension.

        Raises:
            UnsupportedFormatError: If the extension is unknown
        """
        suffix = Path(file_path).suffix.lower()
        file_format = FILE_EXTENSION_MAP.get(suffix)
        if file_format is None:
            raise UnsupportedFormatError(
                file_path,
                format=suffix.lstrip(".") or "unknown",
                supported_formats=list(SUPPORTED_FILE_FORMATS),
            )
        return file_format

    @classmethod
    def create_loader(cls, file_path: str, file_format: Optional[str] = None, **kwargs: Any) -> DataLoader:
        """
        Create a loader.

        Args:
            file_path: Path to the data file
            file_format: "csv" or "json" (detected from the extension when omitted)
            **kwargs: Loader options

        Returns:
            DataLoader instance

        Raises:
            UnsupportedFormatError: If the format is not supported
        """
        file_format = (file_format or cls.detect_format(file_path)).lower()
        loader_class = cls._loaders.get(file_format)
        if loader_class is None:
            raise UnsupportedFormatError(
                file_path, format=file_format, supported_formats=list(SUPPORTED_FILE_FORMATS)
            )
        logger.debug(f"Using {loader_class.__name__} for {file_path}")
        return loader_class(file_path, **kwargs)


def load_rows(file_path: str, file_format: Optional[str] = None, **kwargs: Any) -> List[Row]:
    """
    Load all rows of a CSV or JSON file.

    Raises:
        DataLoadError: If the file cannot be loaded
        UnsupportedFormatError: If the format is not supported
    """
    return LoaderFactory.create_loader(file_path, file_format, **kwargs).load_rows()
