import click
from rich.console import Console
from rich.table import Table

from hangulnum import ALPHABET_GROUPS, default_codec
from hangulnum.codec import HangulNumberCodec, split_symbols, symbol_count
from hangulnum.config import ALPHABET_SIZE, GRID_COLUMNS
from hangulnum.errors import HangulNumberError
from hangulnum.formatting import format_with_commas, parse_number


def _parse_or_fail(text):
    try:
        return parse_number(text)
    except HangulNumberError as e:
        raise click.ClickException(str(e))


def render_grid(codec: HangulNumberCodec, num: int, columns: int = GRID_COLUMNS):
    """
    Render all 128 encodings of num as text lines.

    Each encoding is followed by ✓ if it decodes back to num, ✗ otherwise.
    """
    encodings = codec.encode_all(num)

    lines = [f"All {ALPHABET_SIZE} encodings for {format_with_commas(num)}:"]
    lines.append("-" * 50)
    for start in range(0, len(encodings), columns):
        items = []
        for encoded in encodings[start : start + columns]:
            check = "✓" if codec.verify(encoded, num) else "✗"
            items.append(f"{encoded}{check}")
        lines.append("  ".join(items))
    lines.append("")
    lines.append(
        f"Total: {len(encodings)} variants, "
        f"Length: {symbol_count(encodings[0])} chars each"
    )
    return lines


@click.command("encode")
@click.argument("number")
@click.option(
    "--seed",
    type=click.IntRange(0, ALPHABET_SIZE - 1),
    default=None,
    help="Scramble seed (0-127). Picked from the clock if omitted.",
)
def encode_cmd(number, seed):
    """Encodes NUMBER (commas allowed) as a Hangul string."""
    num = _parse_or_fail(number)
    try:
        if seed is None:
            encoded = default_codec.encode(num)
        else:
            encoded = default_codec.encode_with_seed(num, seed)
    except HangulNumberError as e:
        raise click.ClickException(f"Failed to encode {number}: {e}")

    click.echo(encoded)


@click.command("decode")
@click.argument("text")
@click.option("--raw", is_flag=True, help="Print digits without thousands separators.")
@click.option("--explain", is_flag=True, help="Show how each symbol was decoded.")
def decode_cmd(text, raw, explain):
    """Decodes a Hangul string back to its number."""
    text = text.strip()
    try:
        num = default_codec.decode(text)
    except HangulNumberError as e:
        raise click.ClickException(f"Failed to decode {text!r}: {e}")

    if explain:
        symbols = split_symbols(text)
        seed = default_codec.reverse_map[symbols[0]]

        table = Table(title=f"Seed {symbols[0]} = {seed}")
        table.add_column("Pos", justify="right")
        table.add_column("Symbol")
        table.add_column("Index", justify="right")
        table.add_column("Digit", justify="right")
        for position, symbol in enumerate(symbols[1:], start=1):
            index = default_codec.reverse_map[symbol]
            digit = (index - seed + ALPHABET_SIZE) % ALPHABET_SIZE
            table.add_row(str(position), symbol, str(index), str(digit))
        Console().print(table)

    click.echo(str(num) if raw else format_with_commas(num))


@click.command("all")
@click.argument("number")
@click.option(
    "--columns",
    type=click.IntRange(1, ALPHABET_SIZE),
    default=GRID_COLUMNS,
    show_default=True,
    help="Encodings per row.",
)
def all_cmd(number, columns):
    """Prints all 128 encodings of NUMBER with a round-trip check."""
    num = _parse_or_fail(number)
    for line in render_grid(default_codec, num, columns):
        click.echo(line)


@click.command("alphabet")
def alphabet_cmd():
    """Shows the 128-syllable table grouped by initial consonant."""
    table = Table(title="Hangul alphabet")
    table.add_column("Group")
    table.add_column("Indices", justify="right")
    table.add_column("Syllables")

    index = 0
    for consonant, syllables in ALPHABET_GROUPS:
        table.add_row(
            consonant,
            f"{index}-{index + len(syllables) - 1}",
            " ".join(syllables),
        )
        index += len(syllables)

    Console().print(table)
