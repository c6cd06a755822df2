"""CSV loading and row validation for trip files."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator

import polars as pl

from fare_pipeline.schema import INPUT_COLUMNS, INPUT_SCHEMA, TripRecord

logger = logging.getLogger("FarePipeline")


class MalformedRowError(ValueError):
    """A row does not fit the trip schema."""


class DataLoader:
    """Reads comma-separated trip files into typed polars frames.

    Columns are mapped by position onto the trip schema; the header row is
    skipped, whatever its names are.
    """

    def __init__(self, separator: str = ",") -> None:
        self._separator = separator

    def scan(self, path: str) -> pl.LazyFrame:
        """Lazily scan a trip file.

        Nothing is parsed until the frame is collected, and the scan can only
        be restarted by calling this again.

        Raises:
            FileNotFoundError: If ``path`` does not exist.
        """
        if not os.path.isfile(path):
            raise FileNotFoundError(f"Trip file not found: {path}")
        return pl.scan_csv(
            path,
            has_header=False,
            skip_rows=1,
            separator=self._separator,
            schema=INPUT_SCHEMA,
            raise_if_empty=False,
        )

    def load(self, path: str) -> pl.DataFrame:
        """Parse and validate a whole trip file.

        Args:
            path: CSV file with a header row and seven columns.

        Returns:
            DataFrame with one row per trip, in file order.

        Raises:
            FileNotFoundError: If ``path`` does not exist.
            MalformedRowError: On a ragged row or a value that does not parse
                as its column's type.
        """
        try:
            df = self.scan(path).collect()
        except pl.exceptions.PolarsError as exc:
            raise MalformedRowError(f"{path}: {exc}") from exc

        # Blank lines parse as all-null rows; skip them.
        df = df.with_row_index("line").filter(
            ~pl.all_horizontal(pl.col(INPUT_COLUMNS).is_null())
        )

        null_counts = df.null_count().row(0, named=True)
        bad_columns = [c for c in INPUT_COLUMNS if null_counts[c]]
        if bad_columns:
            first_bad = (
                df.filter(pl.any_horizontal(pl.col(bad_columns).is_null()))
                .item(0, "line")
            )
            # +2: one for the header, one for 1-based line numbers
            raise MalformedRowError(
                f"{path}: line {first_bad + 2} is missing values for {', '.join(bad_columns)}"
            )

        df = df.drop("line")
        logger.info("Loaded %d trips from %s", df.height, path)
        return df

    def iter_records(self, path: str) -> Iterator[TripRecord]:
        """Yield trips from ``path`` one at a time, in file order."""
        for row in self.load(path).iter_rows(named=True):
            yield TripRecord.from_row(row)
