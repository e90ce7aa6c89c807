"""
Copyright (c) 2025 Ynosound.
All rights reserved.

See LICENSE file in the project root for full license information.
"""


def read_chars(file_path, encoding="utf-8", chunk_size=4096):
    # yields the characters of a text file one at a time, newlines included
    with open(file_path, "r", encoding=encoding, newline="") as f:
        while True:
            chunk = f.read(chunk_size)
            if not chunk:
                return
            yield from chunk


def string_chars(text):
    return iter(text)
