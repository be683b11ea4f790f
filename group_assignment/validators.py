"""Validation utilities for group assignment."""

from pathlib import Path
from typing import Iterable, Optional, Sequence

import pandas as pd

from .errors import TotalCapacityError
from .groups import Group
from .subjects import Subject


def validate_total_capacity(subjects: Sequence[Subject], groups: Iterable[Group]) -> None:
    """Validate that the groups can hold every subject.

    Must be called by every assigner before any work is done.

    Args:
        subjects: Subjects to assign
        groups: Groups to assign them to

    Raises:
        TotalCapacityError: If the combined capacity is less than the number of subjects
    """
    total_capacity = sum(group.capacity() for group in groups)
    if total_capacity < len(subjects):
        raise TotalCapacityError(total_capacity, len(subjects))


def validate_rankings_csv(csv_path: Path, num_groups: Optional[int] = None) -> None:
    """Validate a rankings CSV file.

    Ensures the CSV file has the correct structure for group assignment:
    - Has at least 1 column (subject)
    - Has one row per group (matching ``num_groups`` when given)
    - All values are positive integers
    - Each column contains rankings from 1 to N (where N is number of groups)
    - No duplicate rankings within a column

    Args:
        csv_path: Path to the CSV file to validate
        num_groups: Expected number of ranked groups

    Raises:
        FileNotFoundError: If the CSV file doesn't exist
        ValueError: If the CSV structure or content is invalid
    """
    if not csv_path.exists():
        raise FileNotFoundError(f"Rankings file not found: {csv_path}")

    try:
        df = pd.read_csv(csv_path)
    except pd.errors.EmptyDataError:
        raise ValueError("Rankings CSV file is empty")
    except Exception as e:
        raise ValueError(f"Failed to read CSV file: {e}")

    if df.shape[1] < 1:
        raise ValueError("Rankings CSV must contain at least 1 subject (column)")

    if df.shape[0] == 0:
        raise ValueError("Rankings CSV must contain at least 1 group row")

    num_rankings = df.shape[0]
    if num_groups is not None and num_rankings != num_groups:
        raise ValueError(
            f"Rankings CSV has {num_rankings} rows but {num_groups} groups are configured"
        )

    expected_rankings = set(range(1, num_rankings + 1))

    for column in df.columns:
        column_data = df[column]

        if column_data.isna().any():
            raise ValueError(f"Column '{column}' contains missing values")

        # Reject fractional values that astype(int) would silently truncate
        try:
            rankings = column_data.astype(int)
        except (ValueError, TypeError):
            raise ValueError(f"Column '{column}' contains non-integer values")
        if (rankings != column_data).any():
            raise ValueError(f"Column '{column}' contains non-integer values")

        if (rankings <= 0).any():
            raise ValueError(f"Column '{column}' contains non-positive values")

        rankings_set = set(rankings)
        if rankings_set != expected_rankings:
            missing = expected_rankings - rankings_set
            extra = rankings_set - expected_rankings

            error_parts = []
            if missing:
                error_parts.append(f"missing rankings: {sorted(missing)}")
            if extra:
                error_parts.append(f"invalid rankings: {sorted(extra)}")

            raise ValueError(
                f"Column '{column}' has {', '.join(error_parts)}. "
                f"Expected rankings from 1 to {num_rankings}"
            )


def validate_subject_names(names: Iterable[str]) -> None:
    """Validate subject names from the rankings.

    Args:
        names: Subject names to validate

    Raises:
        ValueError: If subject names are invalid
    """
    names = list(names)
    if not names:
        raise ValueError("No subjects found in rankings")

    for name in names:
        if not name or not name.strip():
            raise ValueError("Subject names cannot be empty or whitespace-only")

    stripped = [name.strip() for name in names]
    duplicates = sorted({name for name in stripped if stripped.count(name) > 1})
    if duplicates:
        raise ValueError(f"Duplicate subject names: {duplicates}")

    for name in names:
        if len(name) > 100:
            raise ValueError(f"Subject name too long (max 100 chars): '{name[:50]}...'")
