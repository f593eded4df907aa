"""Minimal stand-ins for the DOM nodes the voice UI tests observe."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ElementState:
    """Observable attributes of one DOM element."""

    text: str = ""
    classes: set[str] = field(default_factory=set)
    dataset: dict[str, str] = field(default_factory=dict)

    def class_contains(self, name: str) -> bool:
        return name in self.classes

    def add_class(self, name: str) -> None:
        self.classes.add(name)

    def remove_class(self, name: str) -> None:
        self.classes.discard(name)

    def toggle_class(self, name: str, state: bool) -> None:
        if state:
            self.add_class(name)
        else:
            self.remove_class(name)
