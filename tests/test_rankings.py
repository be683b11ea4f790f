"""Tests for the rankings module."""

import tempfile
from pathlib import Path

import pandas as pd
import pytest
import yaml

from group_assignment import Assignment, DefaultGroup
from group_assignment.rankings import (
    group_members,
    load_subjects,
    save_assignment_csv,
    save_assignment_yaml,
)


class TestLoadSubjects:
    """Test cases for building subjects from a rankings CSV."""

    def test_load_subjects(self):
        """Test that ranks become dissatisfaction ratings starting at 0."""
        df = pd.DataFrame({
            'Alice': [1, 2, 3],
            'Bob': [2, 1, 3],
            'Charlie': [3, 2, 1],
        })
        groups = [DefaultGroup(101, 1), DefaultGroup(102, 1), DefaultGroup(103, 1)]

        with tempfile.NamedTemporaryFile(mode='w', suffix='.csv', delete=False) as f:
            df.to_csv(f.name, index=False)
            csv_path = Path(f.name)

        try:
            subjects, subject_names = load_subjects(csv_path, groups)

            assert subject_names == {1: 'Alice', 2: 'Bob', 3: 'Charlie'}
            assert [subject.id() for subject in subjects] == [1, 2, 3]
            assert subjects[0].dissatisfaction(101) == 0
            assert subjects[1].dissatisfaction(101) == 1
            assert subjects[1].dissatisfaction(102) == 0
            assert subjects[2].dissatisfaction(103) == 0
        finally:
            csv_path.unlink()


class TestSaveAssignment:
    """Test cases for writing assignments."""

    def setup_method(self):
        self.assignment = Assignment(
            {1: 102, 2: 101, 3: 102},
            {101: [2], 102: [3, 1], 103: []},
        )
        self.subject_names = {1: 'Alice', 2: 'Bob', 3: 'Charlie'}
        self.group_names = {101: 'Early class', 102: 'Afternoon class', 103: 'Evening class'}

    def test_group_members(self):
        """Test resolving ids into names."""
        members = group_members(self.assignment, self.subject_names, self.group_names)

        assert members == {
            'Early class': ['Bob'],
            'Afternoon class': ['Alice', 'Charlie'],
            'Evening class': [],
        }

    def test_group_members_duplicate_names(self):
        """Test that groups sharing a name are rejected instead of merged."""
        group_names = {101: 'Lab', 102: 'Lab', 103: 'Evening class'}

        with pytest.raises(ValueError, match="Duplicate group name"):
            group_members(self.assignment, self.subject_names, group_names)

    def test_group_members_name_matches_other_id(self):
        """Test that a name equal to another group's fallback id is rejected."""
        group_names = {101: '102'}

        with pytest.raises(ValueError, match="Duplicate group name"):
            group_members(self.assignment, self.subject_names, group_names)

    def test_save_assignment_yaml(self):
        """Test saving an assignment to YAML format."""
        with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
            output_path = Path(f.name)

        try:
            save_assignment_yaml(self.assignment, self.subject_names, self.group_names, output_path)

            with open(output_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)

            assert data == {
                'groups': {
                    'Early class': ['Bob'],
                    'Afternoon class': ['Alice', 'Charlie'],
                    'Evening class': [],
                }
            }
        finally:
            output_path.unlink()

    def test_save_assignment_csv(self):
        """Test saving an assignment to CSV format."""
        with tempfile.NamedTemporaryFile(mode='w', suffix='.csv', delete=False) as f:
            output_path = Path(f.name)

        try:
            save_assignment_csv(self.assignment, self.subject_names, output_path)

            result_df = pd.read_csv(output_path)
            assert list(result_df.columns) == ['Alice', 'Bob', 'Charlie']
            assert list(result_df.iloc[0]) == [102, 101, 102]
        finally:
            output_path.unlink()
