"""CLI entry point for sketshy."""

import logging
import sys

import click

from sketshy.config import EditorConfig
from sketshy.script import run_script


@click.command()
@click.argument("input", required=False, type=click.Path(exists=True))
@click.option("--ascii", "-a", "use_ascii", is_flag=True, help="Use plain ASCII instead of Unicode")
@click.option("--output", "-o", "output", type=str, default=None, help="Write output to this file instead of stdout")
@click.option("--verbose", "-v", "verbose", is_flag=True, help="Log editor events to stderr")
def main(input: str | None, use_ascii: bool, output: str | None, verbose: bool) -> None:
    """Replay a sketshy gesture script and print the drawn canvas."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if input:
        try:
            with open(input) as f:
                text = f.read()
        except OSError as e:
            click.echo(f"error: cannot read '{input}': {e}", err=True)
            sys.exit(1)
    else:
        text = sys.stdin.read()

    try:
        editor = run_script(text, EditorConfig(unicode=not use_ascii))
    except ValueError as e:
        click.echo(f"script error:\n{e}", err=True)
        sys.exit(1)
    except OSError as e:
        click.echo(f"error: export failed: {e}", err=True)
        sys.exit(1)

    rendered = editor.canvas.export().decode("utf-8")

    if output:
        try:
            with open(output, "w") as f:
                f.write(rendered)
        except OSError as e:
            click.echo(f"error: cannot write '{output}': {e}", err=True)
            sys.exit(1)
    else:
        click.echo(rendered, nl=False)


if __name__ == "__main__":
    main()
