"""Prototype - create objects by cloning registered exemplars."""
import copy
import sys
from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, Optional

from src.config.schemas import AppConfig
from src.domain.core.exceptions import PatternNotFoundError


class PrototypeType(Enum):
    PROTOTYPE_1 = 0
    PROTOTYPE_2 = 1


class Prototype(ABC):
    """Prototype with cloning ability."""

    def __init__(self, prototype_name: str = ""):
        self.prototype_name = prototype_name
        self.prototype_field = 0.0

    @abstractmethod
    def clone(self) -> "Prototype":
        pass

    def method(self, prototype_field: float) -> None:
        self.prototype_field = prototype_field
        print(f"Call Method from {self.prototype_name}with field: {self.prototype_field:g}")


class ConcretePrototype1(Prototype):
    def __init__(self, prototype_name: str, concrete_prototype_field: float):
        super().__init__(prototype_name)
        self._concrete_prototype_field1 = concrete_prototype_field

    def clone(self) -> Prototype:
        return copy.deepcopy(self)


class ConcretePrototype2(Prototype):
    def __init__(self, prototype_name: str, concrete_prototype_field: float):
        super().__init__(prototype_name)
        self._concrete_prototype_field2 = concrete_prototype_field

    def clone(self) -> Prototype:
        # Deep copy so clones never share mutable state with the exemplar
        return copy.deepcopy(self)


class PrototypeFactory:
    """Stores one default prototype per concrete class and hands out clones."""

    def __init__(self) -> None:
        self._prototypes: Dict[PrototypeType, Prototype] = {
            PrototypeType.PROTOTYPE_1: ConcretePrototype1("PROTOTYPE_1 ", 50.0),
            PrototypeType.PROTOTYPE_2: ConcretePrototype2("PROTOTYPE_2 ", 60.0),
        }

    def create_prototype(self, prototype_type: PrototypeType) -> Prototype:
        if prototype_type not in self._prototypes:
            raise PatternNotFoundError(str(prototype_type), kind="Prototype")
        return self._prototypes[prototype_type].clone()


def client_code(prototype_factory: PrototypeFactory) -> None:
    print("Let's create a Prototype 1")
    prototype = prototype_factory.create_prototype(PrototypeType.PROTOTYPE_1)
    prototype.method(90.0)
    print()

    print("Let's create a Prototype 2")
    prototype = prototype_factory.create_prototype(PrototypeType.PROTOTYPE_2)
    prototype.method(10.0)
    print()


def main(config: Optional[AppConfig] = None) -> int:
    client_code(PrototypeFactory())
    return 0


if __name__ == "__main__":
    sys.exit(main())
