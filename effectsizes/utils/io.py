"""I/O utilities"""

import json
from pathlib import Path
from typing import Any

import numpy as np
import pandas as pd


def read_samples(path: str | Path, column: str | None = None) -> np.ndarray:
    """Read a numeric sample from CSV, JSON or plain text.

    CSV files use ``column``, or the first numeric column when it is not given.
    JSON files hold a list of numbers. Any other file has one number per line.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Sample file not found: {path}")

    suffix = path.suffix.lower()
    if suffix == ".csv":
        df = pd.read_csv(path)
        if column is None:
            numeric = df.select_dtypes(include="number")
            if numeric.empty:
                raise ValueError(f"No numeric column in {path}")
            series = numeric.iloc[:, 0]
        elif column in df.columns:
            series = df[column]
        else:
            raise ValueError(f"Column {column!r} not found in {path}")
        return series.dropna().to_numpy(dtype=float)

    if suffix == ".json":
        with path.open("r", encoding="utf-8") as f:
            return np.asarray(json.load(f), dtype=float)

    with path.open("r", encoding="utf-8") as f:
        return np.array([float(line) for line in f if line.strip()], dtype=float)


def write_jsonl(path: str | Path, items: list[dict[str, Any]], mode: str = "w") -> None:
    """Write items to JSONL file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open(mode, encoding="utf-8") as f:
        for item in items:
            f.write(json.dumps(item, ensure_ascii=False) + "\n")


def read_jsonl(path: str | Path) -> list[dict[str, Any]]:
    """Read all records of a JSONL file."""
    path = Path(path)
    with path.open("r", encoding="utf-8") as f:
        return [json.loads(line) for line in f if line.strip()]
