"""
Widget registry.

Maps widget kinds from the classifier to widget factories. The walker
receives a registry explicitly, so hosts can register extra kinds (for
example a ``date`` or ``file`` widget) without touching the engine.
Unregistered kinds fall back to the text widget.
"""

from typing import Callable

from trade_forms.engine.classifier import WidgetKind
from trade_forms.rendering.nodes import (
    CheckboxField,
    FieldProps,
    NumberField,
    RenderNode,
    SelectField,
    TextareaField,
    TextField,
)

WidgetFactory = Callable[[FieldProps], RenderNode]


class WidgetRegistry:
    """Table of widget factories keyed by widget kind."""

    def __init__(
        self,
        factories: dict[str, WidgetFactory] | None = None,
        fallback: str = WidgetKind.TEXT.value,
    ):
        self._factories: dict[str, WidgetFactory] = dict(factories or {})
        self.fallback = fallback

    def register(self, kind: str, factory: WidgetFactory) -> None:
        self._factories[str(kind)] = factory

    def unregister(self, kind: str) -> None:
        self._factories.pop(str(kind), None)

    def __contains__(self, kind: str) -> bool:
        return str(kind) in self._factories

    @property
    def kinds(self) -> list[str]:
        return list(self._factories)

    def resolve(self, kind: str) -> WidgetFactory:
        """
        Find the factory for a kind.

        Raises:
            KeyError: If neither the kind nor the fallback is registered.
        """
        factory = self._factories.get(str(kind))
        if factory is None:
            factory = self._factories[self.fallback]
        return factory

    def create(self, props: FieldProps) -> RenderNode:
        return self.resolve(props.kind)(props)

    def copy(self) -> "WidgetRegistry":
        return WidgetRegistry(self._factories, self.fallback)


def default_registry() -> WidgetRegistry:
    """A fresh registry holding the built-in widgets."""
    return WidgetRegistry(
        {
            WidgetKind.TEXT.value: TextField,
            WidgetKind.EMAIL.value: TextField,
            WidgetKind.NUMBER.value: NumberField,
            WidgetKind.TEXTAREA.value: TextareaField,
            WidgetKind.SELECT.value: SelectField,
            WidgetKind.CHECKBOX.value: CheckboxField,
        }
    )
