import click

from hangulnum import __version__
from hangulnum.codec import HangulNumberCodec
from hangulnum.cli.codec import encode_cmd, decode_cmd, all_cmd, alphabet_cmd
from hangulnum.cli.interactive import interactive


@click.group()
@click.version_option(__version__, prog_name="hangulnum")
@click.option("--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose):
    """Encodes numbers as seeded Hangul strings and decodes them back."""
    if verbose:
        HangulNumberCodec.set_log_level("DEBUG")


# Add codec commands
cli.add_command(encode_cmd)
cli.add_command(decode_cmd)
cli.add_command(all_cmd)
cli.add_command(alphabet_cmd)

# Add the interactive loop
cli.add_command(interactive)


if __name__ == "__main__":
    cli()
