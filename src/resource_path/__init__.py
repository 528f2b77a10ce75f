"""Protocol-qualified resource paths: parse, normalize, join and format."""

from resource_path._errors import ProtocolConflict, ResourcePathError, UnknownProtocol
from resource_path._flavour import POSIX, WINDOWS, PathFlavour, host_flavour
from resource_path._normalize import normalize, split_segments
from resource_path._path import BAD_PATH, ResourcePath, join, join_in_place, parse
from resource_path._protocol import NATURAL_PROTOCOL, normalize_protocol, protocol_hash
from resource_path._registry import ProtocolRegistry
from resource_path._types import JoinOperand

__version__ = "0.1.0"

__all__ = [
    # Path
    "ResourcePath",
    "BAD_PATH",
    "parse",
    "join",
    "join_in_place",
    "JoinOperand",
    # Normalization
    "normalize",
    "split_segments",
    # Protocols
    "NATURAL_PROTOCOL",
    "normalize_protocol",
    "protocol_hash",
    "ProtocolRegistry",
    # Config
    "PathFlavour",
    "POSIX",
    "WINDOWS",
    "host_flavour",
    # Errors
    "ResourcePathError",
    "UnknownProtocol",
    "ProtocolConflict",
    # Version
    "__version__",
]
