"""JSON data loader (array of records or JSON Lines)."""

import logging

import pandas as pd

from field_profiler.core.exceptions import DataLoadError
from field_profiler.loaders.base import DataLoader

logger = logging.getLogger(__name__)


class JSONLoader(DataLoader):
    """
    Loader for JSON files.

    Accepts an array of objects (``.json``) or one object per line
    (``.jsonl``, or ``lines=True``). Values keep their JSON types; no date
    conversion is applied.
    """

    def read_frame(self) -> pd.DataFrame:
        """
        Read the JSON file.

        Raises:
            DataLoadError: If the content is not a table of records
        """
        lines = self.kwargs.get('lines')
        if lines is None:
            lines = self.file_path.suffix.lower() == '.jsonl'

        try:
            return pd.read_json(
                self.file_path,
                orient='records',
                lines=lines,
                dtype=False,
                convert_dates=False,
                keep_default_dates=False,
                encoding=self.kwargs.get('encoding', 'utf-8'),
            )
        except ValueError as e:
            raise DataLoadError(
                f"JSON parsing error in {self.file_path}: {e}",
                str(self.file_path),
                original_exception=e
            )
