"""CryptTor CLI - Main commands."""
import binascii
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from crypttor.core.config import CryptConfig
from crypttor.core.exceptions import CryptException
from crypttor.core.format import Format
from crypttor.core.logging import LogLevel, configure_logging
from crypttor.core.strategies import StrategyFactory, DEFAULT_ALGORITHM, DEFAULT_MODE

app = typer.Typer(
    name="crypttor",
    help="Symmetric encryption with pluggable cipher backends",
    add_completion=False
)
console = Console()
err_console = Console(stderr=True)


class FormatChoice(str, Enum):
    raw = "raw"
    base64 = "base64"
    hex = "hex"


def fail(message: str) -> None:
    """Print an error and exit with status 1."""
    err_console.print(f"[red]{escape(message)}[/red]")
    raise typer.Exit(1)


def load_key(key_hex: Optional[str], key_file: Optional[Path]) -> bytes:
    if key_file is not None:
        return key_file.read_bytes()
    if not key_hex:
        fail("A key is required: use --key-hex or --key-file")
    try:
        return binascii.unhexlify(key_hex.strip())
    except (binascii.Error, ValueError):
        fail("--key-hex must be an even-length hexadecimal string")


def load_payload(text: Optional[str], input_file: Optional[Path], fmt: Format):
    if input_file is not None:
        data = input_file.read_bytes()
        # Trailing newlines are common in text files
        return data if fmt is Format.RAW else data.strip()
    if text is None:
        fail("Nothing to process: pass TEXT or --input")
    return text.encode('utf-8') if fmt is Format.RAW else text


def to_format(fmt: FormatChoice) -> Format:
    return Format[fmt.value.upper()]


def build_config(strategy: str, algorithm: str, mode: str, fmt: FormatChoice, verbose: bool = False) -> CryptConfig:
    return CryptConfig(
        strategy=strategy,
        algorithm=algorithm,
        mode=mode,
        format=to_format(fmt),
        log_level=LogLevel.DEBUG.value if verbose else None
    )


def enable_verbose(verbose: bool) -> None:
    if verbose:
        configure_logging(
            LogLevel.DEBUG,
            enable_console=False,
            handler=RichHandler(console=err_console, show_path=False)
        )


@app.command()
def encrypt(
    text: Optional[str] = typer.Argument(None, help="Plaintext to encrypt"),
    input_file: Optional[Path] = typer.Option(None, "--input", "-i", exists=True, dir_okay=False, help="Read plaintext from file"),
    key_hex: Optional[str] = typer.Option(None, "--key-hex", "-k", envvar="CRYPTTOR_KEY_HEX", help="Key as hexadecimal"),
    key_file: Optional[Path] = typer.Option(None, "--key-file", exists=True, dir_okay=False, help="Read raw key bytes from file"),
    strategy: str = typer.Option("openssl", "--strategy", "-s", envvar="CRYPTTOR_STRATEGY", help="Backend: openssl or mcrypt"),
    algorithm: str = typer.Option(DEFAULT_ALGORITHM, "--algorithm", "-a", envvar="CRYPTTOR_ALGORITHM", help="Cipher algorithm"),
    mode: str = typer.Option(DEFAULT_MODE, "--mode", "-m", envvar="CRYPTTOR_MODE", help="Cipher mode"),
    fmt: FormatChoice = typer.Option(FormatChoice.base64, "--format", "-f", envvar="CRYPTTOR_FORMAT", help="Output format"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """Encrypt TEXT (or --input) and print the framed ciphertext."""
    enable_verbose(verbose)
    key = load_key(key_hex, key_file)
    data = load_payload(text, input_file, Format.RAW)

    try:
        crypt = build_config(strategy, algorithm, mode, fmt, verbose).build(key)
        result = crypt.encrypt(data)
    except CryptException as e:
        fail(f"Encryption failed: {e}")

    typer.echo(result, nl=crypt.format is not Format.RAW)


@app.command()
def decrypt(
    text: Optional[str] = typer.Argument(None, help="Encoded ciphertext to decrypt"),
    input_file: Optional[Path] = typer.Option(None, "--input", "-i", exists=True, dir_okay=False, help="Read ciphertext from file"),
    key_hex: Optional[str] = typer.Option(None, "--key-hex", "-k", envvar="CRYPTTOR_KEY_HEX", help="Key as hexadecimal"),
    key_file: Optional[Path] = typer.Option(None, "--key-file", exists=True, dir_okay=False, help="Read raw key bytes from file"),
    strategy: str = typer.Option("openssl", "--strategy", "-s", envvar="CRYPTTOR_STRATEGY", help="Backend: openssl or mcrypt"),
    algorithm: str = typer.Option(DEFAULT_ALGORITHM, "--algorithm", "-a", envvar="CRYPTTOR_ALGORITHM", help="Cipher algorithm"),
    mode: str = typer.Option(DEFAULT_MODE, "--mode", "-m", envvar="CRYPTTOR_MODE", help="Cipher mode"),
    fmt: FormatChoice = typer.Option(FormatChoice.base64, "--format", "-f", envvar="CRYPTTOR_FORMAT", help="Input format"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """Decrypt TEXT (or --input) and print the plaintext."""
    enable_verbose(verbose)
    key = load_key(key_hex, key_file)
    data = load_payload(text, input_file, to_format(fmt))

    try:
        crypt = build_config(strategy, algorithm, mode, fmt, verbose).build(key)
        plaintext = crypt.decrypt(data)
    except CryptException as e:
        fail(f"Decryption failed: {e}")

    typer.echo(plaintext, nl=False)


@app.command()
def ciphers(
    strategy: Optional[str] = typer.Option(None, "--strategy", "-s", help="Only list this backend"),
):
    """List supported algorithms and modes per backend."""
    names = [strategy] if strategy else StrategyFactory.available()

    table = Table()
    table.add_column("Strategy", style="cyan")
    table.add_column("Algorithm")
    table.add_column("Modes")

    for name in names:
        try:
            cls = StrategyFactory.strategy_class(name)
        except CryptException as e:
            fail(str(e))
        if not cls.is_available():
            table.add_row(name, "[dim]unavailable[/dim]", "")
            continue
        for algorithm in cls.supported_algorithms():
            modes = cls.supported_modes(algorithm)
            table.add_row(name, algorithm, ", ".join(modes) if modes else "[dim]none[/dim]")

    console.print(table)


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
