from __future__ import annotations

from abc import ABC, abstractmethod


class BaseWidget(ABC):
    """What the host needs from a widget type.

    ``render`` draws the front end inside the area's wrapper markup,
    ``form`` draws the admin editor and ``update`` turns an admin submission
    into the config that gets persisted on the ``WidgetInstance``.
    """

    slug: str = ""
    label: str = ""
    description: str = ""

    @abstractmethod
    def render(self, config: dict, request=None, args: dict | None = None) -> str: ...

    def form(self, config: dict, naming=None) -> str:
        return ""

    def update(self, new_config: dict, old_config: dict) -> dict:
        return new_config


class BasePlugin:
    name: str = ""
    label: str = ""
    version: str = "1.0.0"
    description: str = ""

    def get_widget_types(self) -> list[type[BaseWidget]]:
        return []


class PluginRegistry:
    def __init__(self):
        self._plugins: dict[str, BasePlugin] = {}

    def register(self, plugin: BasePlugin) -> None:
        self._plugins[plugin.name] = plugin

    def get_all_widget_types(self) -> list[type[BaseWidget]]:
        types = []
        for plugin in self._plugins.values():
            types.extend(plugin.get_widget_types())
        return types

    def get_widget_type(self, slug: str) -> type[BaseWidget] | None:
        for cls in self.get_all_widget_types():
            if cls.slug == slug:
                return cls
        return None

    def widget_choices(self) -> list[tuple[str, str]]:
        return [(cls.slug, cls.label) for cls in self.get_all_widget_types()]


registry = PluginRegistry()
