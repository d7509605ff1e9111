"""Composite - treat single objects and trees of objects uniformly."""
import sys
from abc import ABC, abstractmethod
from typing import List, Optional

from src.config.schemas import AppConfig


class Component(ABC):
    """
    Common operations for both simple and complex objects of a composition.

    Child management lives on the base class so client code can assemble
    trees without knowing concrete classes; leaves simply ignore it.
    """

    def __init__(self) -> None:
        self._parent: Optional["Component"] = None

    @property
    def parent(self) -> Optional["Component"]:
        return self._parent

    @parent.setter
    def parent(self, parent: Optional["Component"]) -> None:
        self._parent = parent

    def add(self, component: "Component") -> None:
        pass

    def remove(self, component: "Component") -> None:
        pass

    def is_composite(self) -> bool:
        return False

    @abstractmethod
    def operation(self) -> str:
        pass


class Leaf(Component):
    """End object of a composition; does the actual work."""

    def operation(self) -> str:
        return "Leaf"


class Composite(Component):
    """Component with children; delegates to them and sums up the result."""

    def __init__(self) -> None:
        super().__init__()
        self._children: List[Component] = []

    @property
    def children(self) -> List[Component]:
        return list(self._children)

    def add(self, component: Component) -> None:
        self._children.append(component)
        component.parent = self

    def remove(self, component: Component) -> None:
        if component in self._children:
            self._children.remove(component)
            component.parent = None

    def is_composite(self) -> bool:
        return True

    def operation(self) -> str:
        results = " + ".join(child.operation() for child in self._children)
        return f"Branch ( {results} )"


def client_code(component: Component) -> None:
    print(f"RESULT: {component.operation()}", end="")


def client_code2(component1: Component, component2: Component) -> None:
    if component1.is_composite():
        component1.add(component2)

    print(f"RESULT: {component1.operation()}", end="")


def main(config: Optional[AppConfig] = None) -> int:
    simple = Leaf()
    print("Client: I've got a simple component:")
    client_code(simple)
    print("\n")

    tree = Composite()

    branch1 = Composite()
    branch1.add(Leaf())
    branch1.add(Leaf())

    branch2 = Composite()
    branch2.add(Leaf())

    tree.add(branch1)
    tree.add(branch2)

    print("Client: Now I've got a composite tree:")
    client_code(tree)
    print("\n")

    print("Client: I don't need to check the component classes even when managing the tree:")
    client_code2(tree, simple)
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
