import re
from typing import NamedTuple

__all__ = ["version", "version_info"]


version = "1.0.0"


_re_version = re.compile(
    r"(?P<major>\d+)\.(?P<minor>\d+)\.(?P<micro>\d+)"
    r"(?:(?P<level>[a-z]+)(?P<serial>\d*))?$"
)

_release_levels = {"a": "alpha", "b": "beta", "c": "candidate", "r": "candidate"}


class VersionInfo(NamedTuple):
    major: int
    minor: int
    micro: int
    releaselevel: str
    serial: int

    @classmethod
    def from_str(cls, v: str) -> "VersionInfo":
        """Parse a version string such as ``1.2.3`` or ``1.2.3rc4``."""
        match = _re_version.match(v)
        if not match:
            raise ValueError(f"Invalid version: {v!r}.")
        level = match.group("level")
        serial = match.group("serial")
        return cls(
            int(match.group("major")),
            int(match.group("minor")),
            int(match.group("micro")),
            _release_levels.get(level[:1], "final") if level else "final",
            int(serial) if serial else 0,
        )

    def __str__(self):
        v = f"{self.major}.{self.minor}.{self.micro}"
        level = self.releaselevel
        if level and level != "final":
            v = f"{v}{level[:1]}{self.serial}"
        return v


version_info = VersionInfo.from_str(version)
