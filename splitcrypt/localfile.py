"""Splitting local files into (optionally encrypted) parts and joining them back."""

from __future__ import annotations

import os
from pathlib import PurePath
from typing import BinaryIO

from splitcrypt.options import CommandParameters


def _part_suffix(part_number: int, num_parts: int) -> str:
    if num_parts <= 10:
        return str(part_number)
    if num_parts <= 100:
        return f"{part_number:02d}"
    return f"{part_number:03d}"


class LocalFile:
    """A local source that yields its content part by part.

    When encrypting, one file is cut into pieces of at most
    ``parameters.max_file_size`` bytes. When decrypting, every file in the
    directory whose name starts with the given name is one part, in name order.
    """

    def __init__(
        self,
        files: list[tuple[str, BinaryIO]],
        num_parts: int,
        file_size: int,
        parameters: CommandParameters,
    ) -> None:
        self.files = files
        self.num_parts = num_parts
        self.file_size = file_size
        self.parameters = parameters

    @classmethod
    def open(cls, file_name: str, parameters: CommandParameters) -> "LocalFile":
        """Open the source for ``file_name`` according to ``parameters``."""
        if parameters.decrypt:
            return cls._open_parts(file_name, parameters)
        return cls._open_single(file_name, parameters)

    @classmethod
    def _open_parts(cls, file_name: str, parameters: CommandParameters) -> "LocalFile":
        path = PurePath(file_name)
        parent = path.parent
        if not parent.name:
            parent = PurePath(".")
        prefix = path.name
        files: list[tuple[str, BinaryIO]] = []
        try:
            with os.scandir(parent) as entries:
                for entry in entries:
                    if entry.name.startswith(prefix):
                        files.append((entry.name, open(entry.path, "rb")))
        except BaseException:
            for _, handle in files:
                handle.close()
            raise
        if not files:
            raise ValueError("File list is empty")
        files.sort(key=lambda item: item[0])
        file_size = os.fstat(files[0][1].fileno()).st_size if len(files) == 1 else 0
        return cls(files, len(files), file_size, parameters)

    @classmethod
    def _open_single(cls, file_name: str, parameters: CommandParameters) -> "LocalFile":
        if parameters.max_file_size <= 0:
            raise ValueError("max file size must be positive")
        handle = open(file_name, "rb")
        file_size = os.fstat(handle.fileno()).st_size
        num_parts = -(-file_size // parameters.max_file_size)
        return cls([(file_name, handle)], num_parts, file_size, parameters)

    def get_part(self, part_number: int, dest_file_name: str) -> tuple[bytes, str]:
        """Return the processed data of one part and the name it is stored under."""
        if not 0 <= part_number < max(self.num_parts, len(self.files)):
            raise IndexError(f"part {part_number} out of range")
        if len(self.files) > 1:
            file_name, handle = self.files[part_number]
            buffer = handle.read()
        else:
            handle = self.files[0][1]
            max_size = self.parameters.max_file_size
            seek_pos = max_size * part_number
            if seek_pos > self.file_size:
                raise IndexError(f"part {part_number} out of range")
            handle.seek(seek_pos)
            expected_size = min(self.file_size - seek_pos, max_size)
            buffer = handle.read(expected_size)
            if len(buffer) != expected_size:
                raise ValueError("Corrupted file")
            file_name = dest_file_name
            if self.num_parts > 1:
                file_name += "." + _part_suffix(part_number, self.num_parts)

        processor = self.parameters.crypto_processor
        data = processor.decrypt(buffer) if self.parameters.decrypt else processor.encrypt(buffer)
        print(f"File part {part_number} size {len(data)} file name {file_name}")
        return data, file_name

    def close(self) -> None:
        """Close every open file."""
        for _, handle in self.files:
            handle.close()

    def __enter__(self) -> "LocalFile":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def run_local_copy(
    source_file_name: str, dest_file_name: str, parameters: CommandParameters
) -> None:
    """Split and encrypt a file into parts, or join and decrypt parts into one file."""
    dry_run = parameters.dry_run
    with LocalFile.open(source_file_name, parameters) as source:
        if parameters.decrypt:
            with open(dest_file_name, "wb") as out:
                for part_no in range(source.num_parts):
                    part, _ = source.get_part(part_no, dest_file_name)
                    if not dry_run:
                        out.write(part)
        else:
            for part_no in range(source.num_parts):
                part, file_name = source.get_part(part_no, dest_file_name)
                if not dry_run:
                    with open(file_name, "wb") as out:
                        out.write(part)