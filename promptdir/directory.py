"""Path contraction and fish-style abbreviation for the prompt's directory segment."""

from __future__ import annotations

import os
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Union

import regex

PathArg = Union[str, "os.PathLike[str]"]

_IS_WINDOWS = os.name == "nt"

_GRAPHEME = regex.compile(r"\X")


def _pure_path(path: PathArg) -> PurePath:
    if _IS_WINDOWS:
        return PureWindowsPath(path)
    return PurePosixPath(path)


def _to_slash(path: PurePath) -> str:
    """Render a path with forward slashes, keeping a Windows drive and root apart."""
    if isinstance(path, PureWindowsPath) and path.anchor:
        pieces = []
        if path.drive:
            pieces.append(path.drive)
        if path.root:
            pieces.append("")
        pieces.extend(path.parts[1:])
        return "/".join(pieces)
    return path.as_posix()


def _starts_with(full: PurePath, top: PurePath) -> bool:
    return full == top or top in full.parents


def contract_path(
    full_path: PathArg, top_level_path: PathArg, top_level_replacement: str
) -> str:
    """Replace ``top_level_path`` at the start of ``full_path`` with a replacement.

    Comparison is by whole path components; a path outside the top level is
    returned unchanged apart from using forward slashes.
    """
    full = _pure_path(full_path)
    top = _pure_path(top_level_path)

    if not _starts_with(full, top):
        return replace_c_dir(_to_slash(full))

    if full == top:
        return replace_c_dir(top_level_replacement)

    relative = _to_slash(full.relative_to(top))
    return f"{top_level_replacement}/{replace_c_dir(relative)}"


def replace_c_dir(path: str) -> str:
    """Turn a ``C:/`` drive prefix into ``/c`` on Windows; elsewhere return the path as is."""
    if _IS_WINDOWS:
        return path.replace("C:/", "/c")
    return path


def to_fish_style(pwd_dir_length: int, dir_string: str, truncated_dir_string: str) -> str:
    """Abbreviate every directory before the truncated part to its first graphemes.

    Directories starting with a dot keep the dot plus ``pwd_dir_length``
    graphemes. The truncated tail itself is removed from the result.
    """
    replaced = dir_string
    if truncated_dir_string:
        while replaced.endswith(truncated_dir_string):
            replaced = replaced[: -len(truncated_dir_string)]

    def shorten(word: str) -> str:
        if not word:
            return ""
        graphemes = _GRAPHEME.findall(word)
        if len(graphemes) <= pwd_dir_length:
            return word
        keep = pwd_dir_length + 1 if word.startswith(".") else pwd_dir_length
        return "".join(graphemes[:keep])

    return "/".join(shorten(word) for word in replaced.split("/"))