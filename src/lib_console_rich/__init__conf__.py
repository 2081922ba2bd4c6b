"""Static package metadata surfaced by the CLI banner."""

from __future__ import annotations

from typing import Callable

name = "lib_console_rich"
title = "Drop-in console facade writing through pluggable sinks"
version = "0.1.0"
homepage = "https://github.com/bitranox/lib_console_rich"
author = "bitranox"
author_email = "bitranox@gmail.com"
shell_command = "lib_console_rich"


def print_info(writer: Callable[[str], object] | None = None) -> None:
    """Emit the metadata banner one line at a time through ``writer``.

    ``writer`` receives each line including its trailing newline; it defaults
    to writing on stdout.
    """

    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:\n", "\n"]
    lines.extend(f"    {label.ljust(pad)} = {value}\n" for label, value in fields)
    emit = writer if writer is not None else (lambda text: print(text, end=""))
    for line in lines:
        emit(line)
