"""Pure derivation of the displayed listing from the collection."""

from collections.abc import Sequence

from simple_todos.models import Filter, Projection, Task


class InvalidFilterError(ValueError):
    """Raised for a filter value outside all/active/completed."""


def parse_filter(value: str | Filter) -> Filter:
    """Convert a filter name, failing loudly on anything unknown."""
    try:
        return Filter(value)
    except ValueError:
        raise InvalidFilterError(f"Unknown filter: {value!r}") from None


def select(tasks: Sequence[Task], filter: str | Filter) -> list[Task]:
    """Return the tasks visible under ``filter``, in collection order."""
    match parse_filter(filter):
        case Filter.ACTIVE:
            return [t for t in tasks if not t.completed]
        case Filter.COMPLETED:
            return [t for t in tasks if t.completed]
        case _:
            return list(tasks)


def remaining_count(tasks: Sequence[Task]) -> int:
    return sum(1 for t in tasks if not t.completed)


def has_completed(tasks: Sequence[Task]) -> bool:
    return any(t.completed for t in tasks)


def project(tasks: Sequence[Task], filter: str | Filter) -> Projection:
    """Build the full projection for one filter."""
    return Projection(
        items=select(tasks, filter),
        remaining=remaining_count(tasks),
        any_completed=has_completed(tasks),
    )
