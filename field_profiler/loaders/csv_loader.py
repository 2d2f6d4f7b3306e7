"""CSV data loader."""

import csv
import logging

import pandas as pd

from field_profiler.core.exceptions import DataLoadError
from field_profiler.loaders.base import DataLoader

logger = logging.getLogger(__name__)


def detect_delimiter(file_path: str, sample_size: int = 8192) -> str:
    """
    Auto-detect the delimiter used in a CSV file.

    Args:
        file_path: Path to the CSV file
        sample_size: Number of bytes to sample for detection

    Returns:
        Detected delimiter character, defaults to ',' if detection fails
    """
    encodings = ['utf-8', 'utf-8-sig', 'cp1252', 'latin-1']

    for encoding in encodings:
        try:
            with open(file_path, 'r', newline='', encoding=encoding) as f:
                sample = f.read(sample_size)
            dialect = csv.Sniffer().sniff(sample, delimiters=',\t|;')
            return dialect.delimiter
        except UnicodeDecodeError:
            continue
        except (csv.Error, OSError):
            break

    return ','


def detect_encoding(file_path: str) -> str:
    """
    Detect the encoding of a file by trying common encodings.

    Returns:
        Detected encoding name, defaults to 'utf-8'
    """
    for encoding in ['utf-8', 'utf-8-sig', 'cp1252', 'latin-1']:
        try:
            with open(file_path, 'r', encoding=encoding) as f:
                f.read(8192)
            return encoding
        except UnicodeDecodeError:
            continue
        except OSError:
            break

    return 'utf-8'


class CSVLoader(DataLoader):
    """
    Loader for CSV and delimited text files.

    Every cell is read as text so values such as ``007`` keep their leading
    zeros; numeric detection is left to the profiler. Empty cells are read
    as empty strings. Tokens listed in ``null_values`` are read as nulls.
    """

    def __init__(self, file_path: str, **kwargs):
        """
        Initialize CSVLoader with auto-detection.

        Args:
            file_path: Path to CSV file
            **kwargs: Options (delimiter, encoding, null_values)
        """
        super().__init__(file_path, **kwargs)

        if self.kwargs.get('delimiter') is None:
            self.kwargs['delimiter'] = detect_delimiter(file_path)
            if self.kwargs['delimiter'] != ',':
                logger.info(f"Auto-detected delimiter: {repr(self.kwargs['delimiter'])}")

        if self.kwargs.get('encoding') is None:
            self.kwargs['encoding'] = detect_encoding(file_path)
            if self.kwargs['encoding'] != 'utf-8':
                logger.info(f"Auto-detected encoding: {self.kwargs['encoding']}")

    def read_frame(self) -> pd.DataFrame:
        """
        Read the CSV file.

        Raises:
            DataLoadError: On parser or encoding errors
        """
        delimiter = self.kwargs['delimiter']
        encoding = self.kwargs['encoding']
        null_values = self.kwargs.get('null_values')

        try:
            return pd.read_csv(
                self.file_path,
                delimiter=delimiter,
                encoding=encoding,
                dtype=str,
                keep_default_na=False,
                na_values=null_values,
            )

        except pd.errors.EmptyDataError:
            logger.warning(f"Empty CSV file: {self.file_path}")
            return pd.DataFrame()

        except pd.errors.ParserError as e:
            error_msg = str(e)
            if "Expected" in error_msg and "fields" in error_msg:
                raise DataLoadError(
                    f"CSV parsing error in {self.file_path}: Row has inconsistent number of columns. "
                    f"This often means the delimiter is incorrect (current: {repr(delimiter)}) "
                    f"or the file contains unquoted delimiters in data fields.",
                    str(self.file_path),
                    original_exception=e
                )
            raise DataLoadError(
                f"CSV parsing error in {self.file_path}: {error_msg}",
                str(self.file_path),
                original_exception=e
            )

        except UnicodeDecodeError as e:
            raise DataLoadError(
                f"Encoding error in {self.file_path}: Cannot decode file with {encoding} encoding. "
                f"Try specifying a different encoding (e.g., cp1252, latin-1, utf-16).",
                str(self.file_path),
                original_exception=e
            )
