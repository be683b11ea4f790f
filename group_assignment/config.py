"""Configuration management for Group Assignment."""

from pathlib import Path
from typing import Dict, List, Optional

import yaml

from .assigners import ASSIGNERS
from .groups import DefaultGroup


class GroupSettings:
    """A configured group: id, capacity and an optional display name."""

    def __init__(self, id: int, capacity: int, name: Optional[str] = None):
        self.id = id
        self.capacity = capacity
        self.name = name if name is not None else str(id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GroupSettings):
            return NotImplemented
        return (self.id, self.capacity, self.name) == (other.id, other.capacity, other.name)

    def __repr__(self) -> str:
        return f"GroupSettings(id={self.id}, capacity={self.capacity}, name={self.name!r})"


class Config:
    """Configuration class for group assignment settings."""

    def __init__(self):
        """Initialize configuration with default values."""
        self.assigner: str = "propose-and-reject"
        self.groups: List[GroupSettings] = []

    def load_from_file(self, config_path: Path) -> None:
        """Load configuration from a YAML file.

        Args:
            config_path: Path to the YAML configuration file

        Raises:
            FileNotFoundError: If the config file doesn't exist
            yaml.YAMLError: If the YAML file is invalid
            ValueError: If the configuration structure is invalid
        """
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f)

        if not isinstance(config_data, dict):
            raise ValueError("Configuration file must contain a YAML dictionary")

        if 'assigner' in config_data:
            assigner = config_data['assigner']
            if assigner not in ASSIGNERS:
                raise ValueError(
                    f"assigner must be one of {sorted(ASSIGNERS)}, got {assigner!r}"
                )
            self.assigner = assigner

        if 'groups' in config_data:
            groups = config_data['groups']
            if not isinstance(groups, list):
                raise ValueError("groups must be a list")

            self.groups = [self._parse_group(entry) for entry in groups]

            seen_ids = set()
            seen_names = set()
            for group in self.groups:
                if group.id in seen_ids:
                    raise ValueError(f"Duplicate group id: {group.id}")
                # Output is keyed by name, so names must be unique too
                if group.name in seen_names:
                    raise ValueError(f"Duplicate group name: {group.name!r}")
                seen_ids.add(group.id)
                seen_names.add(group.name)

    @staticmethod
    def _parse_group(entry) -> GroupSettings:
        if not isinstance(entry, dict):
            raise ValueError("Each group must be a dictionary with 'id' and 'capacity'")

        group_id = entry.get('id')
        # bool is an int subclass; reject `id: yes`
        if not isinstance(group_id, int) or isinstance(group_id, bool):
            raise ValueError(f"Group id must be an integer, got {group_id!r}")

        capacity = entry.get('capacity')
        if not isinstance(capacity, int) or isinstance(capacity, bool) or capacity < 0:
            raise ValueError(f"Group {group_id}: capacity must be a non-negative integer")

        name = entry.get('name')
        return GroupSettings(group_id, capacity, str(name) if name is not None else None)

    def build_groups(self) -> List[DefaultGroup]:
        """Create the configured groups, in file order."""
        return [DefaultGroup(group.id, group.capacity) for group in self.groups]

    def group_names(self) -> Dict[int, str]:
        """Get the display name of every configured group by id."""
        return {group.id: group.name for group in self.groups}

    def to_dict(self) -> dict:
        """Convert configuration to dictionary format.

        Returns:
            Dictionary representation of the configuration
        """
        config_dict = {'assigner': self.assigner}

        if self.groups:
            config_dict['groups'] = [
                {'id': group.id, 'name': group.name, 'capacity': group.capacity}
                for group in self.groups
            ]

        return config_dict

    def save_to_file(self, config_path: Path) -> None:
        """Save configuration to a YAML file.

        Args:
            config_path: Path where to save the configuration
        """
        config_dict = self.to_dict()

        with open(config_path, 'w', encoding='utf-8') as f:
            yaml.dump(config_dict, f, default_flow_style=False, sort_keys=False)
