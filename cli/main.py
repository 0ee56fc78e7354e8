"""tarsier CLI: read the article of a web page in the terminal.

Usage:
    tarsier [options...] url
    python cli/main.py --help
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from tarsier.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

from typing import Optional

import typer

from cli.rendering import echo_markup
from tarsier.config import settings
from tarsier.errors import NoArticleFoundError, NoLinksFoundError, TarsierError
from tarsier.logging_config import setup_logging
from tarsier.reader import read_article
from tarsier.scraper.patterns import RESET_TOKEN, TITLE_TOKEN

USAGE = """Usage: tarsier [options...] url

Options:
  -r, --random       Selects a random link from within the url provided and outputs that instead
  --log-level LEVEL  Log verbosity on stderr (default: $TARSIER_LOG_LEVEL or WARNING)
"""

app = typer.Typer(
    name="tarsier",
    help="Read the article of a web page in the terminal.",
    add_completion=False,
)


def _print_usage() -> None:
    typer.echo(USAGE, err=True)


@app.command()
def main(
    url: Optional[str] = typer.Argument(None, help="Web page to read."),
    random_link: bool = typer.Option(
        False,
        "--random",
        "-r",
        help="Select a random link from within the url provided and output that instead.",
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Log verbosity on stderr."
    ),
) -> None:
    """Print the title and paragraphs of the article at URL."""
    setup_logging(log_level or settings.log_level)

    if not url:
        _print_usage()
        raise typer.Exit(0)

    try:
        document = read_article(
            url,
            random_link=random_link,
            on_follow=lambda link: typer.echo(f"Reading link {link}"),
        )
    except NoLinksFoundError as exc:
        typer.echo(f"Error: {exc}")
        raise typer.Exit(0)
    except NoArticleFoundError:
        typer.echo(
            "Error: tarsier was not able to parse the article in the provided website url"
        )
        _print_usage()
        raise typer.Exit(0)
    except TarsierError as exc:
        typer.echo(f"error running tarsier: {exc}")
        raise typer.Exit(1)

    if document.title is not None:
        echo_markup(f"{TITLE_TOKEN}{document.title}{RESET_TOKEN}")
    for paragraph in document.paragraphs:
        echo_markup(paragraph)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
