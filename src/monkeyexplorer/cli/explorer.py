#!/usr/bin/env python3
"""Command-line explorer for the monkey species catalog.

Each subcommand maps to one catalog query:
- list: Full table with totals
- show: Details for one species, with suggestions on a miss
- random: Random pick(s) and the running access count
- search / location / endangered: Filtered tables
- stats: Aggregate statistics
"""

import functools
import random
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import click
from dependency_injector import providers

from monkeyexplorer.catalog.service import CatalogSeedError, CatalogService
from monkeyexplorer.config.models import VALID_LOG_LEVELS, ExplorerConfig
from monkeyexplorer.core.container import Container
from monkeyexplorer.species.models import Species
from monkeyexplorer.utils.structlog_configurator import configure_structlog

BANNERS = (
    r"""
    Welcome to Monkey Explorer!
        .-"-.
       /     \
      | () () |
       \  ^  /
        |||||
        |||||
""",
    r"""
      Banana Time!
       .--..--..--..--..--.
      (    (    (    (    (
       '--'  '--'  '--'  '--'
         Going bananas!
""",
    r"""
    Monkey Business
         .-.   .-.
        (   ) (   )
         '-'   '-'
          |     |
        .-|     |-.
       (  |     |  )
        '-|     |-'
          |_____|
""",
    r"""
      Random Monkey Generator
            .-""-.
           /        \
          |  ^    ^  |
          |     o    |
           \   ___  /
            '-----'
""",
    r"""
    Monkey Detective
         .-"-.
        /  o o \
       |   ?    |
        \   -  /
         '-----'
       Finding monkeys...
""",
)

TABLE_WIDTH = 75


def catalog_command(func: Callable[..., None]) -> Callable[..., None]:
    """Report seed failures as a clean CLI error instead of a traceback."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> None:  # noqa: ANN401
        try:
            func(*args, **kwargs)
        except CatalogSeedError as e:
            click.echo(click.style(f"Error: {e}", fg="red", bold=True), err=True)
            sys.exit(1)

    return wrapper


def print_banner() -> None:
    """Print one of the ASCII art banners."""
    click.echo(click.style(random.choice(BANNERS), fg="yellow"))


def print_section(title: str) -> None:
    """Print a formatted section header."""
    click.echo(title)
    click.echo("=" * TABLE_WIDTH)


def print_species_table(species_list: list[Species]) -> None:
    """Print species as a name/location/population/status table."""
    if not species_list:
        click.echo("No monkeys found.")
        return

    click.echo(
        click.style(
            f"{'Name':<20} {'Location':<25} {'Population':<12} {'Status':<15}", fg="cyan"
        )
    )
    click.echo(click.style("-" * TABLE_WIDTH, fg="cyan"))

    for species in species_list:
        status_color = "red" if species.is_endangered else "green"
        population = f"{species.population:,}"
        click.echo(f"{species.name:<20} {species.location:<25} {population:<12} ", nl=False)
        click.echo(click.style(f"{species.conservation_status:<15}", fg=status_color))


def print_species_card(species: Species) -> None:
    """Print all details for one species."""
    click.echo(click.style(f"{species.name}", fg="yellow", bold=True))
    click.echo("-" * TABLE_WIDTH)
    click.echo(f"  Location:     {species.location}")
    click.echo(f"  Population:   {species.population:,}")
    status_color = "red" if species.is_endangered else "green"
    click.echo(
        "  Status:       " + click.style(str(species.conservation_status), fg=status_color)
    )
    click.echo(f"  Endangered:   {'Yes' if species.is_endangered else 'No'}")
    click.echo(f"  Coordinates:  {species.coordinates_display}")
    if species.details:
        click.echo(f"  Details:      {species.details}")
    if species.image:
        click.echo(f"  Image:        {species.image}")


@click.group()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar="MONKEYEXPLORER_CONFIG",
    help="Path to the YAML configuration file",
)
@click.option(
    "--log-level",
    type=click.Choice(VALID_LOG_LEVELS, case_sensitive=False),
    help="Override the configured log level",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, log_level: str | None) -> None:
    """Monkey Explorer.

    Discover monkey species from around the world.

    Examples:
      # Table of every species
      monkey-explorer list

      # Details for one species (case-insensitive)
      monkey-explorer show baboon

      # Three random picks
      monkey-explorer random --count 3
    """
    ctx.ensure_object(dict)

    container = Container()
    if config_path is not None:
        container.config_path.override(providers.Object(config_path))

    try:
        config: ExplorerConfig = container.config()
    except ValueError as e:
        click.echo(click.style(f"Error: {e}", fg="red", bold=True), err=True)
        sys.exit(1)

    if log_level:
        logging_config = config.logging.model_copy(update={"level": log_level.upper()})
        config = config.model_copy(update={"logging": logging_config})
    configure_structlog(config)

    ctx.obj["config"] = config
    ctx.obj["catalog"] = container.catalog_service()


@cli.command("list")
@click.option("--no-art", is_flag=True, help="Skip the ASCII art banner")
@click.pass_obj
@catalog_command
def list_species(obj: dict[str, Any], no_art: bool) -> None:
    """List all monkey species with totals."""
    catalog: CatalogService = obj["catalog"]
    config: ExplorerConfig = obj["config"]

    if not no_art:
        print_banner()

    print_section("ALL MONKEY SPECIES")
    statistics = catalog.statistics()
    click.echo(
        f"Total Species: {statistics.total_species} | "
        f"Total Population: {statistics.total_population:,} | "
        f"Endangered: {statistics.endangered_species}"
    )
    click.echo()

    print_species_table(catalog.list_all(sort_by_name=config.catalog.sort_listing_by_name))

    click.echo()
    click.echo(click.style("Tip: Use 'show NAME' to get details about any monkey!", fg="yellow"))


@cli.command()
@click.argument("name")
@click.pass_obj
@catalog_command
def show(obj: dict[str, Any], name: str) -> None:
    """Show details for the species called NAME."""
    catalog: CatalogService = obj["catalog"]
    config: ExplorerConfig = obj["config"]

    species = catalog.find_by_name(name)
    if species is not None:
        print_species_card(species)
        return

    click.echo(click.style(f"No monkey named '{name}' was found.", fg="red"), err=True)
    suggestions = catalog.suggestions(name, limit=config.catalog.suggestion_limit)
    if suggestions:
        click.echo("Did you mean:", err=True)
        for suggestion in suggestions:
            click.echo(f"  - {suggestion.name}", err=True)
    sys.exit(1)


@cli.command("random")
@click.option("--count", default=1, show_default=True, type=click.IntRange(min=1))
@click.pass_obj
@catalog_command
def random_species(obj: dict[str, Any], count: int) -> None:
    """Pick random species and show the running access count."""
    catalog: CatalogService = obj["catalog"]

    for _ in range(count):
        species = catalog.pick_random()
        if species is None:
            click.echo(click.style("The catalog is empty.", fg="yellow"))
            return
        print_species_card(species)
        click.echo()

    click.echo(f"Random picks this session: {catalog.random_access_count}")


@cli.command()
@click.argument("term")
@click.pass_obj
@catalog_command
def search(obj: dict[str, Any], term: str) -> None:
    """List species whose name contains TERM."""
    catalog: CatalogService = obj["catalog"]
    print_section(f"NAME SEARCH: {term}")
    print_species_table(catalog.search_by_name(term))


@cli.command()
@click.argument("term")
@click.pass_obj
@catalog_command
def location(obj: dict[str, Any], term: str) -> None:
    """List species whose location contains TERM."""
    catalog: CatalogService = obj["catalog"]
    print_section(f"LOCATION SEARCH: {term}")
    print_species_table(catalog.filter_by_location(term))


@cli.command()
@click.pass_obj
@catalog_command
def endangered(obj: dict[str, Any]) -> None:
    """List endangered species."""
    catalog: CatalogService = obj["catalog"]
    print_section("ENDANGERED SPECIES")
    print_species_table(catalog.list_endangered())


@cli.command()
@click.pass_obj
@catalog_command
def stats(obj: dict[str, Any]) -> None:
    """Show aggregate statistics for the catalog."""
    catalog: CatalogService = obj["catalog"]
    statistics = catalog.statistics()

    print_section("CATALOG STATISTICS")
    click.echo(f"  Total species:        {statistics.total_species}")
    click.echo(f"  Total population:     {statistics.total_population:,}")
    click.echo(
        f"  Endangered species:   {statistics.endangered_species} "
        f"({statistics.endangered_percentage}%)"
    )
    click.echo(f"  Average population:   {statistics.average_population:,}")
    click.echo(f"  Largest population:   {statistics.largest_population:,}")
    click.echo(f"  Smallest population:  {statistics.smallest_population:,}")
    click.echo(f"  Unique locations:     {statistics.unique_locations}")
    click.echo(f"  Random picks:         {statistics.random_access_count}")


def main() -> None:
    """Entry point for the Monkey Explorer CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
