"""Visitor - add operations over a component set via double dispatch."""
import sys
from abc import ABC, abstractmethod
from typing import Iterable, Optional

from src.config.schemas import AppConfig


class Visitor(ABC):
    """One visiting method per concrete component class."""

    @abstractmethod
    def visit_concrete_component_a(self, element: "ConcreteComponentA") -> None:
        pass

    @abstractmethod
    def visit_concrete_component_b(self, element: "ConcreteComponentB") -> None:
        pass


class Component(ABC):
    @abstractmethod
    def accept(self, visitor: Visitor) -> None:
        pass


class ConcreteComponentA(Component):
    def accept(self, visitor: Visitor) -> None:
        # The method name tells the visitor which class it is dealing with
        visitor.visit_concrete_component_a(self)

    def exclusive_method_of_concrete_component_a(self) -> str:
        return "A"


class ConcreteComponentB(Component):
    def accept(self, visitor: Visitor) -> None:
        visitor.visit_concrete_component_b(self)

    def special_method_of_concrete_component_b(self) -> str:
        return "B"


class ConcreteVisitor1(Visitor):
    def visit_concrete_component_a(self, element: ConcreteComponentA) -> None:
        print(f"{element.exclusive_method_of_concrete_component_a()} + ConcreteVisitor1.")

    def visit_concrete_component_b(self, element: ConcreteComponentB) -> None:
        print(f"{element.special_method_of_concrete_component_b()} + ConcreteVisitor1.")


class ConcreteVisitor2(Visitor):
    def visit_concrete_component_a(self, element: ConcreteComponentA) -> None:
        print(f"{element.exclusive_method_of_concrete_component_a()} + ConcreteVisitor2.")

    def visit_concrete_component_b(self, element: ConcreteComponentB) -> None:
        print(f"{element.special_method_of_concrete_component_b()} + ConcreteVisitor2.")


def client_code(components: Iterable[Component], visitor: Visitor) -> None:
    for component in components:
        component.accept(visitor)


def main(config: Optional[AppConfig] = None) -> int:
    components = [ConcreteComponentA(), ConcreteComponentB()]

    print("The Client Code works with all visitors via the base Visitor interface:")
    client_code(components, ConcreteVisitor1())
    print()

    print("It allows the same Client Code to work with different types of visitors:")
    client_code(components, ConcreteVisitor2())
    return 0


if __name__ == "__main__":
    sys.exit(main())
