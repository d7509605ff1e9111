"""Bridge - split an abstraction from its implementation so both can vary.

The Abstraction keeps a reference to an Implementation and delegates the
platform-specific work to it; either side can be extended independently.
"""
import sys
from abc import ABC, abstractmethod
from typing import Optional

from src.config.schemas import AppConfig


class Implementation(ABC):
    """Primitive operations every platform provides."""

    @abstractmethod
    def operation_implementation(self) -> str:
        pass


class ConcreteImplementationA(Implementation):
    def operation_implementation(self) -> str:
        return "ConcreteImplementationA: Here's the result of the platform A.\n"


class ConcreteImplementationB(Implementation):
    def operation_implementation(self) -> str:
        return "ConcreteImplementationB: Here's the result of the platform B.\n"


class Abstraction:
    """Control side of the bridge, delegating real work to an Implementation."""

    def __init__(self, implementation: Implementation):
        self.implementation = implementation

    def operation(self) -> str:
        return ("Abstraction: Base operation with:\n"
                f"{self.implementation.operation_implementation()}")


class ExtendedAbstraction(Abstraction):
    def operation(self) -> str:
        return ("ExtendedAbstraction: Extended operation with: \n"
                f"{self.implementation.operation_implementation()}")


def client_code(abstraction: Abstraction) -> None:
    print(abstraction.operation(), end="")


def main(config: Optional[AppConfig] = None) -> int:
    client_code(Abstraction(ConcreteImplementationA()))
    print()

    client_code(ExtendedAbstraction(ConcreteImplementationB()))
    return 0


if __name__ == "__main__":
    sys.exit(main())
