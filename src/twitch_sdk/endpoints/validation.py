"""
Input checks shared by the endpoint functions.

Every check raises InvalidRequestError before any token is fetched or any
request is sent.
"""

from typing import Iterable
from typing import Optional
from typing import Union

from twitch_sdk.exceptions import InvalidRequestError

# Helix caps both page size and the number of ids per filter at 100
MAX_PAGE_SIZE = 100
MAX_IDS = 100

Identifiers = Union[str, Iterable[str], None]


def check_first(first: Optional[int], maximum: int = MAX_PAGE_SIZE) -> Optional[int]:
    if first is None:
        return None
    if isinstance(first, bool) or not isinstance(first, int):
        raise InvalidRequestError(f"'first' must be an integer, got {first!r}")
    if not 1 <= first <= maximum:
        raise InvalidRequestError(f"'first' must be between 1 and {maximum}, got {first}")
    return first


def check_ids(name: str, values: Identifiers, maximum: int = MAX_IDS) -> list[str]:
    """
    Normalize an identifier filter to a list.

    A single string is accepted as a one-element list. Blank identifiers are
    rejected because Helix silently ignores them, which hides caller bugs.
    """
    if values is None:
        return []
    items = [values] if isinstance(values, str) else list(values)
    for item in items:
        if not isinstance(item, str) or not item.strip():
            raise InvalidRequestError(f"'{name}' contains an empty or non-string identifier: {item!r}")
    if len(items) > maximum:
        raise InvalidRequestError(f"'{name}' accepts at most {maximum} values, got {len(items)}")
    return items


def check_required(name: str, value: Optional[str]) -> str:
    if value is None or not isinstance(value, str) or not value.strip():
        raise InvalidRequestError(f"'{name}' must be a non-empty string")
    return value


def check_choice(name: str, value: Optional[str], choices: Iterable[str]) -> Optional[str]:
    if value is None:
        return None
    allowed = tuple(choices)
    if value not in allowed:
        raise InvalidRequestError(f"'{name}' must be one of {', '.join(allowed)}; got {value!r}")
    return value


def check_exactly_one(**selectors) -> str:
    """Name of the single selector that was provided."""
    given = [name for name, value in selectors.items() if value]
    if len(given) != 1:
        raise InvalidRequestError(
            f"Exactly one of {', '.join(selectors)} must be provided, got {len(given)}"
        )
    return given[0]


def check_cursors(after: Optional[str], before: Optional[str]) -> None:
    if after and before:
        raise InvalidRequestError("'after' and 'before' cannot be used together")
