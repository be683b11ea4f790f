"""Loading rankings tables and saving assignments for the command line."""

from pathlib import Path
from typing import Dict, List, Sequence, Tuple

import pandas as pd
import yaml

from .assignment import Assignment
from .groups import Group
from .subjects import DefaultSubject
from .validators import validate_subject_names


def load_subjects(
    rankings_file: Path, groups: Sequence[Group]
) -> Tuple[List[DefaultSubject], Dict[int, str]]:
    """Build subjects from a rankings CSV file.

    Each column holds one subject's ranks (1 is best) for the groups, one row
    per group in the given order. Subjects get ids 1..n in column order and a
    dissatisfaction of ``rank - 1``, so a first choice rates 0.

    Args:
        rankings_file: Path to CSV file with rankings
        groups: The ranked groups, in row order

    Returns:
        Tuple of (subjects, subject id -> subject name)

    Raises:
        ValueError: If the subject names are invalid
    """
    df = pd.read_csv(rankings_file)
    names = [str(column) for column in df.columns]
    validate_subject_names(names)

    subjects = []
    subject_names = {}
    for subject_id, (name, column) in enumerate(zip(names, df.columns), start=1):
        preferences = {
            group.id(): int(rank) - 1
            for group, rank in zip(groups, df[column].tolist())
        }
        subjects.append(DefaultSubject(subject_id, preferences))
        subject_names[subject_id] = name.strip()

    return subjects, subject_names


def group_members(
    assignment: Assignment,
    subject_names: Dict[int, str],
    group_names: Dict[int, str],
) -> Dict[str, List[str]]:
    """Resolve an assignment into group name -> sorted member names.

    Raises:
        ValueError: If two groups resolve to the same name
    """
    _, group_ids_to_subject_ids = assignment.to_dicts()
    members: Dict[str, List[str]] = {}
    for group_id, subject_ids in group_ids_to_subject_ids.items():
        name = group_names.get(group_id, str(group_id))
        if name in members:
            raise ValueError(f"Duplicate group name: {name!r}")
        members[name] = sorted(subject_names[subject_id] for subject_id in subject_ids)
    return members


def save_assignment_yaml(
    assignment: Assignment,
    subject_names: Dict[int, str],
    group_names: Dict[int, str],
    output_path: Path,
) -> None:
    """Save an assignment to YAML format with subjects grouped by group name.

    Args:
        assignment: The assignment to save
        subject_names: Mapping of subject id -> subject name
        group_names: Mapping of group id -> group name
        output_path: Path where to save the assignment YAML
    """
    yaml_data = {'groups': group_members(assignment, subject_names, group_names)}

    with open(output_path, 'w', encoding='utf-8') as f:
        yaml.dump(yaml_data, f, default_flow_style=False, sort_keys=True)


def save_assignment_csv(
    assignment: Assignment,
    subject_names: Dict[int, str],
    output_path: Path,
) -> None:
    """Save an assignment to CSV format matching the rankings file structure.

    Writes a single row holding the assigned group id under every subject's
    column.

    Args:
        assignment: The assignment to save
        subject_names: Mapping of subject id -> subject name, in column order
        output_path: Path where to save the assignment CSV
    """
    subject_ids_to_group_ids, _ = assignment.to_dicts()
    columns = list(subject_names.values())
    row = [subject_ids_to_group_ids.get(subject_id) for subject_id in subject_names]

    assignment_df = pd.DataFrame([row], columns=columns)
    assignment_df.to_csv(output_path, index=False)
