import click

from hangulnum import default_codec
from hangulnum.cli.codec import render_grid
from hangulnum.errors import HangulNumberError
from hangulnum.formatting import parse_number


@click.command("interactive")
def interactive():
    """Prompts for numbers and prints all their encodings until 'exit'."""
    click.echo("=== Hangul Number Converter (Base-128, Variable Length) ===")
    click.echo("Enter a non-negative integer to encode.")
    click.echo("Type 'exit' to quit.\n")

    while True:
        try:
            answer = click.prompt(
                "Enter number", default="", show_default=False, prompt_suffix=": "
            ).strip()
        except click.Abort:
            # EOF on stdin
            break

        if not answer or answer.lower() == "exit":
            break

        try:
            num = parse_number(answer)
        except HangulNumberError:
            click.echo("Please enter a valid number.\n")
            continue

        click.echo()
        for line in render_grid(default_codec, num):
            click.echo(line)
        click.echo("-" * 50 + "\n")
