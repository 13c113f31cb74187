"""Poker hands command-line entry point.

Counts how many rounds in an input file a player wins and prints the
result as "Player 1 wins: N".
"""

import logging
from typing import Optional, Tuple

import click

from poker_hands.application.config_service import (
    ConfigService,
    configure_logging,
    parse_player,
)
from poker_hands.application.input_service import read_lines, validate_input_file
from poker_hands.application.round_service import RoundService
from poker_hands.core.exceptions import ConfigError, LineError


@click.command()
@click.argument("files", nargs=-1)
@click.option("--player", type=click.Choice(["1", "2"]), default=None,
              help="Player whose wins are counted (default: 1).")
@click.option("--log-level", default=None,
              help="Log level, e.g. DEBUG or INFO.")
@click.option("--preset", default="default", show_default=True,
              help="Configuration preset.")
@click.pass_context
def main(ctx: click.Context, files: Tuple[str, ...], player: Optional[str],
         log_level: Optional[str], preset: str) -> None:
    """Count the rounds a player wins in FILE."""
    try:
        config = ConfigService().get_config(
            preset, log_level=log_level,
            player=parse_player(player) if player else None)
        target = config.tally.player
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    configure_logging(config.logging_config)
    logger = logging.getLogger(__name__)

    validation = validate_input_file(files)
    if not validation.is_successful():
        click.echo(validation.message)
        ctx.exit(1)

    file_name = validation.data
    logger.info("Counting wins for %s in %s", target, file_name)

    try:
        wins = RoundService().count_wins(target, read_lines(file_name))
    except LineError as e:
        click.echo(str(e))
        ctx.exit(1)

    click.echo(f"{target} wins: {wins}")


if __name__ == "__main__":
    main()
