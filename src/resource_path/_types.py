"""Type aliases used throughout resource_path."""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from resource_path._path import ResourcePath

JoinOperand = Union[str, "ResourcePath"]  # noqa: UP007
