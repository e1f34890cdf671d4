#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/paraunwrap/utils/io_utils.py
"""Reading and writing whole documents from paths and streams."""

from __future__ import annotations

import io
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast


def read_text_input(input_data: Union[str, Path, bytes, IO[bytes], IO[str]]) -> str:
    """Read an entire input into a string.

    Parameters
    ----------
    input_data : str, Path, bytes, IO[bytes], or IO[str]
        Input source. A ``str`` is taken to be the content itself, a ``Path``
        is read from disk, ``bytes`` and binary streams are decoded as UTF-8.

    Returns
    -------
    str
        The full text

    Raises
    ------
    UnicodeDecodeError
        If binary input is not valid UTF-8
    OSError
        If a path cannot be read
    TypeError
        If the input type is not supported

    """
    if isinstance(input_data, str):
        return input_data
    if isinstance(input_data, Path):
        return input_data.read_bytes().decode("utf-8")
    if isinstance(input_data, (bytes, bytearray)):
        return bytes(input_data).decode("utf-8")
    if hasattr(input_data, "read"):
        raw_content = input_data.read()
        if isinstance(raw_content, (bytes, bytearray)):
            return bytes(raw_content).decode("utf-8")
        if isinstance(raw_content, str):
            return raw_content
        raise TypeError(f"Stream returned unsupported content type: {type(raw_content)}")
    raise TypeError(f"Unsupported input type: {type(input_data)}")


def write_text_output(content: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
    """Write a string to a path or stream.

    Parameters
    ----------
    content : str
        Text to write
    output : str, Path, IO[bytes], or IO[str]
        Output destination. ``str`` and ``Path`` are file paths; binary
        streams receive UTF-8 bytes.

    Raises
    ------
    OSError
        If the destination cannot be written
    TypeError
        If the output type is not supported

    """
    if isinstance(output, (str, Path)):
        Path(output).write_text(content, encoding="utf-8")
        return

    if hasattr(output, "write"):
        if isinstance(output, BytesIO):
            is_binary_mode = True
        elif isinstance(output, StringIO):
            is_binary_mode = False
        elif isinstance(output, io.TextIOBase):
            is_binary_mode = False
        elif isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
            is_binary_mode = True
        elif hasattr(output, "mode"):
            mode = getattr(output, "mode", "")
            is_binary_mode = isinstance(mode, str) and "b" in mode
        else:
            is_binary_mode = False

        if is_binary_mode:
            cast(IO[bytes], output).write(content.encode("utf-8"))
        else:
            cast(IO[str], output).write(content)
        return

    raise TypeError(f"Unsupported output type: {type(output)}")


__all__ = ["read_text_input", "write_text_output"]
