import logging
from pathlib import Path

import click

from teashop.application.ports import InputClosedError
from teashop.application.settings import DEFAULT_SETTINGS
from teashop.infrastructure.bootstrap import DEFAULT_DATA_DIR, shop_app


@click.command()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=DEFAULT_DATA_DIR,
    show_default=True,
    help="Directory holding players.json and leaderboard.json.",
)
@click.option("--seed", type=int, default=None, help="Seed for reproducible customers.")
@click.option("--fast", is_flag=True, default=False, help="Skip cutscene pauses.")
@click.option("--verbose", is_flag=True, default=False, help="Log debug output to stderr.")
def cli(data_dir: Path, seed: int | None, fast: bool, verbose: bool) -> None:
    """Milk Tea Shop, a terminal barista simulator."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    settings = DEFAULT_SETTINGS.without_delays() if fast else DEFAULT_SETTINGS
    app = shop_app(data_dir=data_dir, seed=seed, settings=settings)

    try:
        app.run()
    except InputClosedError as exc:
        raise click.ClickException(f"{exc}; the shop is closing.")
