"""Error hierarchy for resource_path.

Parsing, joining and formatting never raise; these errors only surface at
the dispatch seam where a consumer looks a protocol up.
"""

from __future__ import annotations

from typing import Optional


class ResourcePathError(Exception):
    """Base class for all resource_path errors.

    :param message: Human-readable error description.
    :param path: The canonical path involved in the error, if any.
    :param protocol: The protocol involved, if any.
    """

    def __init__(self, message: str = "", *, path: Optional[str] = None, protocol: Optional[str] = None) -> None:
        self.path = path
        self.protocol = protocol
        super().__init__(message)

    def __str__(self) -> str:
        parts = [super().__str__()]
        if self.path is not None:
            parts.append(f"path={self.path!r}")
        if self.protocol is not None:
            parts.append(f"protocol={self.protocol!r}")
        return " | ".join(parts) if len(parts) > 1 else parts[0]

    def __repr__(self) -> str:
        cls = type(self).__name__
        args = [repr(super().__str__())]
        if self.path is not None:
            args.append(f"path={self.path!r}")
        if self.protocol is not None:
            args.append(f"protocol={self.protocol!r}")
        return f"{cls}({', '.join(args)})"


class UnknownProtocol(ResourcePathError):
    """Raised when no handler is registered for a protocol."""


class ProtocolConflict(ResourcePathError):
    """Raised when a protocol is registered twice or two protocols share a hash."""
