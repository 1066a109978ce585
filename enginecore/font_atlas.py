"""Glyph lookup for a fixed-grid bitmap font atlas."""

from __future__ import annotations

import os
import re
import string
from dataclasses import dataclass
from typing import Iterable, Optional, Union

DEFAULT_FONT_FILE = "Pretendard_Kor.txt"
DEFAULT_KERNING = 0.6

_DEFAULT_SETTINGS = {
    "texture_width": 512,
    "texture_height": 512,
    "cell_width": 14,
    "cell_height": 32,
    "cells_per_row": 36,
    "cells_per_column": 16,
}

_CONFIG_KEYS = {
    "TEXTURE_WIDTH": "texture_width",
    "TEXTURE_HEIGHT": "texture_height",
    "CELL_WIDTH": "cell_width",
    "CELL_HEIGHT": "cell_height",
    "CELLS_PER_ROW": "cells_per_row",
    "CELLS_PER_COLUMN": "cells_per_column",
}

_WORD = re.compile(r"\s*(\S+)")
_INTEGER = re.compile(r"\s*([+-]?\d+)")
_CHAR_MASK = 0xFFFF


@dataclass(frozen=True)
class GlyphInfo:
    """Texture coordinates of one glyph cell, in UV units."""

    u: float = 0.0
    v: float = 0.0
    width: float = 0.0
    height: float = 0.0
    offset_x: float = 0.0
    offset_y: float = 0.0


class _LineReader:
    """Reads whitespace-separated words and integers from one line.

    Once a read fails, every later read fails too.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0
        self._failed = False

    def _read(self, pattern: re.Pattern[str]) -> Optional[str]:
        if self._failed:
            return None
        match = pattern.match(self._text, self._pos)
        if match is None:
            self._failed = True
            return None
        self._pos = match.end()
        return match.group(1)

    def word(self) -> Optional[str]:
        return self._read(_WORD)

    def integer(self) -> Optional[int]:
        token = self._read(_INTEGER)
        return None if token is None else int(token)

    def rewind(self) -> None:
        self._pos = 0


class FontAtlas:
    """Maps characters to the cells of a font texture laid out as a grid."""

    def __init__(self) -> None:
        self.glyph_aspect_ratio = 1.0
        self.kerning = DEFAULT_KERNING
        self._glyphs: dict[str, GlyphInfo] = {}
        self._default_glyph = GlyphInfo()

    @classmethod
    def parse(cls, lines: Iterable[str]) -> "FontAtlas":
        """Build an atlas from the lines of a glyph description file.

        Lines starting with ``#`` and empty lines are skipped. Lines of the
        form ``KEY value`` set the grid layout; other lines give a cell index
        and the character code drawn in that cell.
        """
        settings = dict(_DEFAULT_SETTINGS)
        chars: list[str] = []

        for raw in lines:
            line = raw.rstrip("\n")
            if not line or line[0] == "#":
                continue

            reader = _LineReader(line)
            key = reader.word()
            if key is not None:
                if key in _CONFIG_KEYS:
                    value = reader.integer()
                    if value is not None:
                        settings[_CONFIG_KEYS[key]] = value
                        continue
                elif key[0] in string.digits:
                    reader.rewind()

            index = reader.integer()
            code = reader.integer()
            if index is None or code is None:
                continue

            capacity = settings["cells_per_row"] * settings["cells_per_column"]
            if 0 <= index < capacity:
                if index >= len(chars):
                    chars.extend(" " * (index + 1 - len(chars)))
                chars[index] = chr(code & _CHAR_MASK)

        return cls._from_grid(chars, **settings)

    @classmethod
    def _from_grid(
        cls,
        chars: list[str],
        *,
        texture_width: int,
        texture_height: int,
        cell_width: int,
        cell_height: int,
        cells_per_row: int,
        cells_per_column: int,
    ) -> "FontAtlas":
        if texture_width == 0 or texture_height == 0 or cell_height == 0:
            raise ValueError("texture size and cell height must be non-zero")

        atlas = cls()
        atlas.glyph_aspect_ratio = cell_width / cell_height
        uv_width = cell_width / texture_width
        uv_height = cell_height / texture_height

        if cells_per_row <= 0 or cells_per_column <= 0:
            return atlas

        for index, char in enumerate(chars):
            row, col = divmod(index, cells_per_row)
            if row >= cells_per_column:
                break
            atlas.add_glyph(
                char,
                GlyphInfo(
                    u=col * cell_width / texture_width,
                    v=row * cell_height / texture_height,
                    width=uv_width,
                    height=uv_height,
                ),
            )
        return atlas

    @classmethod
    def load(cls, path: Union[str, "os.PathLike[str]"] = DEFAULT_FONT_FILE) -> "FontAtlas":
        """Read a glyph description file; raises OSError if it cannot be opened."""
        with open(path, encoding="utf-8") as handle:
            return cls.parse(handle)

    def get_glyph(self, char: str) -> GlyphInfo:
        """Return the glyph of ``char``, or an all-zero glyph if it is unknown."""
        return self._glyphs.get(char, self._default_glyph)

    def add_glyph(self, char: str, glyph: GlyphInfo) -> None:
        self._glyphs[char] = glyph

    def __contains__(self, char: object) -> bool:
        return char in self._glyphs

    def __len__(self) -> int:
        return len(self._glyphs)