from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from .config_types import AppEntry
from .errors import ConfigurationError, UnknownAppError


class AppRegistry(Mapping[str, AppEntry]):
    """Read-only mapping of logical app name -> AppEntry."""

    def __init__(self, apps: Mapping[str, AppEntry | Mapping[str, Any]] | None = None):
        entries: dict[str, AppEntry] = {}
        for name, value in (apps or {}).items():
            if isinstance(value, AppEntry):
                entries[str(name)] = value
            elif isinstance(value, Mapping):
                try:
                    entries[str(name)] = AppEntry.from_dict(value)
                except ConfigurationError as exc:
                    raise ConfigurationError(f"App '{name}': {exc}") from exc
            else:
                raise ConfigurationError(f"App '{name}' must be a mapping, got {type(value).__name__}")
        self._apps = entries

    def __getitem__(self, name: str) -> AppEntry:
        try:
            return self._apps[name]
        except KeyError:
            raise UnknownAppError(f"App '{name}' is not registered.") from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._apps)

    def __len__(self) -> int:
        return len(self._apps)

    def __repr__(self) -> str:
        return f"AppRegistry({sorted(self._apps)!r})"


def as_registry(apps: AppRegistry | Mapping[str, Any] | None) -> AppRegistry:
    if isinstance(apps, AppRegistry):
        return apps
    return AppRegistry(apps)
