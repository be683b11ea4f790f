"""Command line interface for Group Assignment."""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
import yaml

from group_assignment.assigners import ASSIGNERS, get_assigner
from group_assignment.config import Config
from group_assignment.errors import TotalCapacityError
from group_assignment.rankings import (
  group_members,
  load_subjects,
  save_assignment_csv,
  save_assignment_yaml,
)
from group_assignment.validators import validate_rankings_csv, validate_total_capacity


def load_config(config_file: Path) -> Config:
  """Load the config file, exiting with a red message when it is unusable."""
  config = Config()
  try:
    config.load_from_file(config_file)
  except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
    click.secho(f"Error: {e}", fg="red")
    sys.exit(1)
  if not config.groups:
    click.secho(f"Error: No groups configured in {config_file}", fg="red")
    sys.exit(1)
  return config

@click.group()
def cli():
  """Group Assignment CLI for assigning subjects to groups by preference."""
  pass

@cli.command()
@click.argument("rankings_file", type=click.Path(exists=True, path_type=Path))
@click.argument("config_file", type=click.Path(path_type=Path))
@click.option("--method", type=click.Choice(sorted(ASSIGNERS)), default=None,
              help="Assignment method (overrides the config file)")
@click.option("--yaml", "yaml_output", type=click.Path(path_type=Path), default=None,
              help="Write the groups to this YAML file")
@click.option("--csv", "csv_output", type=click.Path(path_type=Path), default=None,
              help="Write each subject's group id to this CSV file")
@click.option("--verbose", is_flag=True, help="Log every proposal round")
def assign(
  rankings_file: Path,
  config_file: Path,
  method: Optional[str],
  yaml_output: Optional[Path],
  csv_output: Optional[Path],
  verbose: bool,
):
  """Assign subjects to groups based on rankings."""
  if verbose:
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

  config = load_config(config_file)
  groups = config.build_groups()
  group_names = config.group_names()

  try:
    validate_rankings_csv(rankings_file, len(groups))
    subjects, subject_names = load_subjects(rankings_file, groups)
  except ValueError as e:
    click.secho(f"Error: {e}", fg="red")
    sys.exit(1)

  method = method or config.assigner
  click.secho(f"Assigning {len(subjects)} subjects to {len(groups)} groups using {method}", fg="blue")

  try:
    assignment = get_assigner(method).assign(subjects, groups)
  except TotalCapacityError as e:
    click.secho(f"Error: {e}", fg="red")
    sys.exit(1)

  for group_name, members in group_members(assignment, subject_names, group_names).items():
    click.secho(f"{group_name}: {', '.join(members) if members else '(empty)'}", fg="green")

  summary = assignment.summary()
  click.secho(
    f"Total dissatisfaction: {assignment.total_dissatisfaction(subjects)}, "
    f"average group size: {summary['average_group_size']}",
    fg="blue",
  )

  if yaml_output:
    save_assignment_yaml(assignment, subject_names, group_names, yaml_output)
    click.secho(f"Saved groups to {yaml_output}", fg="green")
  if csv_output:
    save_assignment_csv(assignment, subject_names, csv_output)
    click.secho(f"Saved assignment to {csv_output}", fg="green")

@cli.command()
@click.argument("rankings_file", type=click.Path(path_type=Path))
@click.argument("config_file", type=click.Path(path_type=Path))
def validate(rankings_file: Path, config_file: Path):
  """Validate rankings data against the configured groups."""
  config = load_config(config_file)
  groups = config.build_groups()

  try:
    validate_rankings_csv(rankings_file, len(groups))
    subjects, _ = load_subjects(rankings_file, groups)
  except (FileNotFoundError, ValueError) as e:
    click.secho(f"❌ {e}", fg="red")
    sys.exit(1)

  try:
    validate_total_capacity(subjects, groups)
  except TotalCapacityError as e:
    click.secho(f"❌ {e}", fg="red")
    sys.exit(1)

  click.secho("✅ All rankings are valid!", fg="green")

if __name__ == "__main__":
  cli()
