"""File loading utilities for treatment catalog sources."""

import logging
from io import BytesIO
from pathlib import Path
from typing import BinaryIO

import pandas as pd
import polars as pl

logger = logging.getLogger(__name__)

# Identifier and free-text columns are always read as strings (zero-padded codes)
TEXT_COLUMN_NAMES = {
    "id",
    "ID",
    "Id",
    "condition_id",
    "recommended_treatment_id",
    "Treatment ID",
    "Condition ID",
    "name",
    "Name",
    "Treatment Name",
    "category",
    "Category",
    "description",
    "Description",
    "condition_name",
    "Condition",
    "Condition Name",
    "patient_name",
    "allergies",
    "current_medications",
}


def load_excel_to_polars(
    file: BinaryIO | Path | str,
    sheet_name: str | int = 0,
) -> pl.DataFrame:
    """Load Excel file into Polars DataFrame.

    Uses pandas as intermediate step for Excel parsing (openpyxl backend),
    then converts to Polars for downstream processing.

    Identifier and text columns are automatically read as strings.

    Args:
        file: File path, path string, or file-like object.
        sheet_name: Sheet name or index to load. Defaults to first sheet.

    Returns:
        Polars DataFrame with loaded data.

    Raises:
        ValueError: If file cannot be parsed as Excel.
    """
    logger.info(f"Loading Excel file, sheet: {sheet_name}")

    try:
        if isinstance(file, str):
            file = Path(file)

        # First pass: read headers to detect identifier columns
        pdf_headers = pd.read_excel(
            file, sheet_name=sheet_name, engine="openpyxl", nrows=0
        )

        dtype_overrides: dict[str, type] = {}
        for col in pdf_headers.columns:
            if col in TEXT_COLUMN_NAMES:
                dtype_overrides[col] = str
                logger.debug(f"Reading '{col}' as string")

        if hasattr(file, "seek"):
            file.seek(0)

        pdf = pd.read_excel(
            file,
            sheet_name=sheet_name,
            engine="openpyxl",
            dtype=dtype_overrides if dtype_overrides else None,
        )

        df = pl.from_pandas(pdf)

        logger.info(f"Loaded {df.height} rows, {df.width} columns")
        return df

    except Exception as e:
        logger.error(f"Failed to load Excel file: {e}")
        raise ValueError(f"Cannot parse Excel file: {e}") from e


def load_csv_to_polars(
    file: BinaryIO | Path | str,
    encoding: str = "utf8",
    infer_schema_length: int = 10000,
    schema_overrides: dict[str, type[pl.DataType]] | None = None,
) -> pl.DataFrame:
    """Load CSV file into Polars DataFrame.

    Identifier and text columns are automatically read as strings. Explicit
    schema_overrides take precedence over that default.

    Args:
        file: File path, path string, or file-like object.
        encoding: Character encoding.
        infer_schema_length: Number of rows to scan for schema inference.
        schema_overrides: Column dtypes to use instead of inferred ones.

    Returns:
        Polars DataFrame with loaded data.

    Raises:
        ValueError: If file cannot be parsed as CSV.
    """
    logger.info(f"Loading CSV file with encoding: {encoding}")

    try:
        if isinstance(file, str):
            file = Path(file)

        # File-like objects are buffered so the header pass can be repeated
        if isinstance(file, Path):
            source: Path | BytesIO = file
        else:
            content = file.read()
            if isinstance(content, str):
                content = content.encode("utf-8")
            source = BytesIO(content)

        df_headers = pl.read_csv(source, encoding=encoding, n_rows=0)

        overrides: dict[str, type[pl.DataType]] = {
            col: pl.String for col in df_headers.columns if col in TEXT_COLUMN_NAMES
        }
        if schema_overrides:
            overrides.update(
                {
                    col: dtype
                    for col, dtype in schema_overrides.items()
                    if col in df_headers.columns
                }
            )

        if isinstance(source, BytesIO):
            source.seek(0)

        df = pl.read_csv(
            source,
            encoding=encoding,
            infer_schema_length=infer_schema_length,
            schema_overrides=overrides if overrides else None,
        )

        logger.info(f"Loaded {df.height} rows, {df.width} columns")
        return df

    except Exception as e:
        logger.error(f"Failed to load CSV file: {e}")
        raise ValueError(f"Cannot parse CSV file: {e}") from e


def detect_file_type(filename: str) -> str:
    """Detect file type from filename extension.

    Args:
        filename: Name of the file (with extension).

    Returns:
        File type string: "excel" or "csv".

    Raises:
        ValueError: If file type is not supported.
    """
    lower_name = filename.lower()

    if lower_name.endswith((".xlsx", ".xls")):
        return "excel"
    elif lower_name.endswith(".csv"):
        return "csv"
    else:
        raise ValueError(
            f"Unsupported file type: {filename}. Supported types: .xlsx, .xls, .csv"
        )


def load_file_auto(
    file: BinaryIO | Path | str,
    filename: str | None = None,
    sheet_name: str | int = 0,
    encoding: str = "utf8",
) -> pl.DataFrame:
    """Auto-detect file type and load appropriately.

    Args:
        file: File path, path string, or file-like object.
        filename: Filename for type detection (required if file is BinaryIO).
        sheet_name: Sheet name for Excel files.
        encoding: Encoding for CSV files.

    Returns:
        Polars DataFrame with loaded data.

    Raises:
        ValueError: If file type cannot be determined or file cannot be loaded.
    """
    if filename is None:
        if isinstance(file, Path):
            filename = file.name
        elif isinstance(file, str):
            filename = Path(file).name
        else:
            raise ValueError("filename must be provided for file-like objects")

    file_type = detect_file_type(filename)

    if file_type == "excel":
        return load_excel_to_polars(file, sheet_name=sheet_name)
    else:
        return load_csv_to_polars(file, encoding=encoding)
