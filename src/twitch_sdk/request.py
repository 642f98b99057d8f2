"""
Request descriptors built by the endpoint layer.

A RequestDescriptor captures everything the executor needs to issue one Helix
call. It is frozen: the executor may resend the same descriptor on retry
without worrying that a middleware or an earlier attempt altered it.
"""

from dataclasses import dataclass
from dataclasses import field
from datetime import datetime
from datetime import timezone
from typing import Any
from typing import Iterable
from typing import Optional

Params = tuple[tuple[str, str], ...]


def _render(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
    return str(value)


def build_params(**filters: Any) -> Params:
    """
    Flatten keyword filters into Helix query pairs.

    None values are dropped and sequences repeat their key (id=1&id=2).
    Booleans and datetimes are rendered the way Helix expects them
    ("true"/"false", RFC 3339 in UTC).
    """
    pairs: list[tuple[str, str]] = []
    for key, value in filters.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple, set, frozenset)):
            pairs.extend((key, _render(item)) for item in value)
        else:
            pairs.append((key, _render(value)))
    return tuple(pairs)


@dataclass(frozen=True)
class RequestDescriptor:
    method: str
    path: str
    params: Params = field(default_factory=tuple)
    body: Optional[Any] = None

    @classmethod
    def get(cls, path: str, params: Iterable[tuple[str, str]] = ()) -> "RequestDescriptor":
        return cls("GET", path, tuple(params))

    def param_values(self, key: str) -> list[str]:
        """All values sent for `key`, in order."""
        return [value for name, value in self.params if name == key]
