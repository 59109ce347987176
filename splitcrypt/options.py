"""Command-line splitting, remote names and copy parameters."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from splitcrypt.crypto import CryptoProcessor, build_crypto_processor

U64_MAX = 2**64 - 1

_MULTIPLIERS = {"K": 1024, "M": 1024 * 1024, "G": 1024 * 1024 * 1024}


@dataclass
class CommandParameters:
    """Settings shared by the copy commands."""

    crypto_processor: CryptoProcessor
    max_file_size: int = U64_MAX
    dry_run: bool = False
    decrypt: bool = False
    from_part: int = 0


def _parse_u64(text: str) -> int:
    digits = text[1:] if text.startswith("+") else text
    if not digits or not digits.isascii() or not digits.isdigit():
        raise ValueError(f"invalid number: {text!r}")
    value = int(digits)
    if value > U64_MAX:
        raise ValueError(f"number too large: {text!r}")
    return value


def parse_size(size_string: str) -> int:
    """Parse a size such as ``512``, ``64K``, ``10M`` or ``2G`` into bytes."""
    if len(size_string) < 2:
        raise ValueError("invalid size")
    multiplier = _MULTIPLIERS.get(size_string[-1])
    if multiplier is None:
        return _parse_u64(size_string)
    return _parse_u64(size_string[:-1]) * multiplier


def split_arguments(argv: Iterable[str]) -> tuple[list[str], dict[str, str]]:
    """Separate positional arguments from ``--name[=value]`` options."""
    arguments: list[str] = []
    options: dict[str, str] = {}
    for arg in argv:
        if arg.startswith("--"):
            key, _, value = arg.partition("=")
            options[key[2:]] = value
        else:
            arguments.append(arg)
    return arguments, options


def parse_file_name(file_name: str, config: Mapping[str, str]) -> tuple[str | None, str]:
    """Split ``remote:path`` into the remote's configuration file and the path."""
    remote_name, sep, path = file_name.partition(":")
    if not sep:
        return None, file_name
    try:
        remote_file = config[remote_name]
    except KeyError:
        raise ValueError("unknown remote name") from None
    return remote_file, path


def _lookup(key: str, *sources: Mapping[str, str]) -> str | None:
    for source in sources:
        if key in source:
            return source[key]
    return None


def build_command_parameters(
    config: Mapping[str, str],
    parameters: Mapping[str, str],
    options: Mapping[str, str],
) -> CommandParameters:
    """Combine options, remote parameters and global configuration, in that priority."""
    encryption_key = _lookup("encryption_key", options, parameters, config)
    crypto_processor = build_crypto_processor(encryption_key)

    size_text = _lookup("max_file_size", options, parameters, config)
    max_file_size = U64_MAX if size_text is None else parse_size(size_text)
    print(f"Max file size {max_file_size}")

    dry_run = "dry_run" in options
    if dry_run:
        print("Dry run")
    decrypt = "decrypt" in options
    if decrypt:
        print("Decrypt")

    from_part_text = options.get("from_part")
    from_part = 0 if from_part_text is None else _parse_u64(from_part_text)

    return CommandParameters(
        crypto_processor=crypto_processor,
        max_file_size=max_file_size,
        dry_run=dry_run,
        decrypt=decrypt,
        from_part=from_part,
    )