from __future__ import annotations

from typing import Any, Callable


class FilterRegistry:
    """Named extension points where other code may override a value.

    Callbacks run in priority order (lowest first, then registration order),
    each receiving the value returned by the previous one.
    """

    def __init__(self):
        self._filters: dict[str, list[tuple[int, Callable[..., Any]]]] = {}

    def add_filter(self, name: str, callback: Callable[..., Any], priority: int = 10) -> None:
        self._filters.setdefault(name, []).append((priority, callback))
        self._filters[name].sort(key=lambda item: item[0])

    def remove_filter(self, name: str, callback: Callable[..., Any]) -> bool:
        callbacks = self._filters.get(name, [])
        remaining = [item for item in callbacks if item[1] is not callback]
        if len(remaining) == len(callbacks):
            return False
        self._filters[name] = remaining
        return True

    def apply_filters(self, name: str, value: Any, *args: Any) -> Any:
        for _priority, callback in self._filters.get(name, []):
            value = callback(value, *args)
        return value


filters = FilterRegistry()

add_filter = filters.add_filter
remove_filter = filters.remove_filter
apply_filters = filters.apply_filters
