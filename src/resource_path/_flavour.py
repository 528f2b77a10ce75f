"""Path flavour: the platform capabilities the parser and formatter honour."""

from __future__ import annotations

import dataclasses
import os

from resource_path._protocol import NATURAL_PROTOCOL, PROTOCOL_SEPARATOR, normalize_protocol

_NATIVE_SEPARATORS = ("/", "\\")


@dataclasses.dataclass(frozen=True)
class PathFlavour:
    """Describes how paths are read and written on a platform.

    Validates on construction.

    :param supports_drive_letters: Recognise a leading ``<letter>:`` as a drive.
    :param native_separator: Separator used by :meth:`ResourcePath.native_string`.
    :param default_protocol: Protocol assumed when the input has no ``://``.
    :raises ValueError: If any field is out of range.
    """

    supports_drive_letters: bool = False
    native_separator: str = "/"
    default_protocol: str = NATURAL_PROTOCOL

    def __post_init__(self) -> None:
        object.__setattr__(self, "default_protocol", normalize_protocol(self.default_protocol))
        self.validate()

    def validate(self) -> None:
        """Check the separator and the default protocol.

        :raises ValueError: If the flavour cannot produce well-formed paths.
        """
        if self.native_separator not in _NATIVE_SEPARATORS:
            raise ValueError(
                f"Unsupported native separator {self.native_separator!r}. Expected one of {list(_NATIVE_SEPARATORS)}"
            )
        if not self.default_protocol:
            raise ValueError("Default protocol must not be empty")
        if PROTOCOL_SEPARATOR in self.default_protocol:
            raise ValueError(f"Default protocol must not contain {PROTOCOL_SEPARATOR!r}: {self.default_protocol!r}")

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> PathFlavour:
        """Construct from a plain dict (e.g. parsed TOML/JSON).

        :param data: Dict with any of the dataclass field names as keys.
        :raises TypeError: If ``data`` is not a dict, or a flag is not a bool.
        :raises ValueError: If ``data`` has unknown keys or invalid values.
        """
        if not isinstance(data, dict):
            msg = f"Expected a dict, got {type(data).__name__}"
            raise TypeError(msg)
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown flavour options {unknown}. Known options: {sorted(known)}")

        kwargs: dict[str, object] = {}
        if "supports_drive_letters" in data:
            drives = data["supports_drive_letters"]
            if not isinstance(drives, bool):
                msg = f"'supports_drive_letters' must be a bool, got {type(drives).__name__}"
                raise TypeError(msg)
            kwargs["supports_drive_letters"] = drives
        if "native_separator" in data:
            kwargs["native_separator"] = str(data["native_separator"])
        if "default_protocol" in data:
            kwargs["default_protocol"] = str(data["default_protocol"])
        return cls(**kwargs)  # type: ignore[arg-type]


POSIX = PathFlavour()
WINDOWS = PathFlavour(supports_drive_letters=True, native_separator="\\")


def host_flavour() -> PathFlavour:
    """The flavour matching the running interpreter's platform."""
    return WINDOWS if os.name == "nt" else POSIX
