"""
CLI interface for simplepass.
"""

import logging
import sys
from typing import Callable, List, Optional

import click
from click.core import ParameterSource

from .clipboard import CLIPBOARD_CLEAR_SECONDS, copy_to_clipboard
from .exceptions import (
    ClipboardError,
    EmptyAlphabetError,
    InvalidLengthError,
)
from .presets import DEFAULT_PRESET, PRESETS, apply_preset, list_presets
from .utils.password_generator import (
    GenerationOptions,
    build_alphabet,
    count_entropy_bits,
    describe_alphabet,
    generate_password,
)
from .utils.strength import classify_strength
from .utils.validation import MAX_LENGTH, MIN_LENGTH, validate_length

logger = logging.getLogger(__name__)

DEFAULT_LENGTH = 16
ENV_PREFIX = "SIMPLEPASS"


def _length_callback(ctx: click.Context, param: click.Parameter, value: Optional[str]) -> int:
    try:
        return validate_length(value)
    except InvalidLengthError as e:
        raise click.BadParameter(str(e))


def generation_options(func: Callable) -> Callable:
    """Attach the options shared by every command that builds GenerationOptions."""
    decorators = [
        click.option("--length", "-l", default=str(DEFAULT_LENGTH), callback=_length_callback,
                     help=f"Password length ({MIN_LENGTH}-{MAX_LENGTH}, default: {DEFAULT_LENGTH})"),
        click.option("--preset", "-p", type=click.Choice(list(PRESETS)), default=DEFAULT_PRESET,
                     show_default=True, help="Character preset"),
        click.option("--numbers/--no-numbers", default=None, help="Include digits"),
        click.option("--symbols/--no-symbols", default=None, help="Include special symbols"),
        click.option("--lowercase/--no-lowercase", default=None, help="Include lowercase letters"),
        click.option("--uppercase/--no-uppercase", default=None, help="Include uppercase letters"),
        click.option("--allow-ambiguous/--no-ambiguous", default=None,
                     help="Allow ambiguous characters (i, 1, l, I, 0, O)"),
    ]
    for decorator in reversed(decorators):
        func = decorator(func)
    return func


FLAG_PARAMS = ("numbers", "symbols", "lowercase", "uppercase", "allow_ambiguous")


def _explicit_flags(ctx: click.Context) -> List[Optional[bool]]:
    """Flag values the user actually set; None where the preset should decide."""
    flags: List[Optional[bool]] = []
    for name in FLAG_PARAMS:
        source = ctx.get_parameter_source(name)
        if source is None or source == ParameterSource.DEFAULT:
            flags.append(None)
        else:
            flags.append(ctx.params[name])
    return flags


def build_options(length: int, preset: str, numbers: Optional[bool], symbols: Optional[bool],
                  lowercase: Optional[bool], uppercase: Optional[bool],
                  allow_ambiguous: Optional[bool]) -> GenerationOptions:
    """Apply the preset, then any flags the user set explicitly."""
    options = apply_preset(GenerationOptions(length=length), preset)

    overrides = {
        "use_numbers": numbers,
        "use_symbols": symbols,
        "use_lowercase": lowercase,
        "use_uppercase": uppercase,
        "allow_ambiguous_characters": allow_ambiguous,
    }
    overrides = {field: value for field, value in overrides.items() if value is not None}
    if overrides:
        options = options.replace(**overrides)

    logger.debug(f"Options: preset={preset}, {describe_alphabet(options)}, length={options.length}")
    return options


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """simplepass - Simple password generator at your fingertips."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


@cli.command()
@generation_options
@click.option("--count", "-n", default=1, type=click.IntRange(1, 100), help="Number of passwords to generate")
@click.option("--copy/--no-copy", default=True, help="Copy the result to the clipboard (default: copy)")
@click.option("--clear-after", default=CLIPBOARD_CLEAR_SECONDS, type=click.IntRange(0),
              help=f"Seconds before the clipboard is cleared, 0 to keep (default: {CLIPBOARD_CLEAR_SECONDS})")
@click.option("--show-entropy", is_flag=True, help="Print entropy and strength after the password")
@click.pass_context
def generate(ctx: click.Context, length: int, preset: str, numbers: Optional[bool], symbols: Optional[bool],
             lowercase: Optional[bool], uppercase: Optional[bool], allow_ambiguous: Optional[bool],
             count: int, copy: bool, clear_after: int, show_entropy: bool) -> None:
    """Generate passwords with the options you choose."""
    options = build_options(length, preset, *_explicit_flags(ctx))

    try:
        passwords = [generate_password(options) for _ in range(count)]
    except (InvalidLengthError, EmptyAlphabetError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    for password in passwords:
        click.echo(password)

    if show_entropy:
        entropy_bits = count_entropy_bits(options)
        click.echo(f"Entropy bits: {entropy_bits:.2f} ({classify_strength(entropy_bits)})", err=True)

    if copy:
        try:
            copy_to_clipboard("\n".join(passwords), clear_after=clear_after)
            noun = "Password" if count == 1 else "Passwords"
            click.echo(f"🔐 {noun} copied to clipboard!", err=True)
        except ClipboardError as e:
            click.echo(f"Error: {e}", err=True)


@cli.command()
@generation_options
@click.pass_context
def entropy(ctx: click.Context, length: int, preset: str, numbers: Optional[bool], symbols: Optional[bool],
            lowercase: Optional[bool], uppercase: Optional[bool], allow_ambiguous: Optional[bool]) -> None:
    """Show the entropy and strength of the chosen options."""
    options = build_options(length, preset, *_explicit_flags(ctx))
    entropy_bits = count_entropy_bits(options)

    click.echo(f"Alphabet: {describe_alphabet(options)} ({len(build_alphabet(options))} characters)")
    click.echo(f"Entropy bits: {entropy_bits:.2f}")
    click.echo(f"Password strength: {classify_strength(entropy_bits)}")


@cli.command()
def presets() -> None:
    """List available presets."""
    for preset in list_presets():
        marker = " (default)" if preset.name == DEFAULT_PRESET else ""
        click.echo(f"  {preset.name:<16} {preset.title} - {preset.description}{marker}")


def main() -> None:
    """Main entry point for the CLI application."""
    cli(auto_envvar_prefix=ENV_PREFIX)


if __name__ == "__main__":
    main()
