"""Template Method - fixed algorithm skeleton, overridable steps."""
import sys
from abc import ABC, abstractmethod
from typing import Optional

from src.config.schemas import AppConfig


class AbstractClass(ABC):
    """
    Defines the skeleton of an algorithm in ``template_method``.

    Subclasses implement the required operations and may override the hooks,
    which default to doing nothing. The template method itself stays intact.
    """

    def template_method(self) -> None:
        self.base_operation1()
        self.required_operation1()
        self.base_operation2()
        self.hook1()
        self.required_operation2()
        self.base_operation3()
        self.hook2()

    def base_operation1(self) -> None:
        print("AbstractClass says: I'm doing the bulk of the work.")

    def base_operation2(self) -> None:
        print("AbstractClass says: But I let subclasses override some operations.")

    def base_operation3(self) -> None:
        print("AbstractClass says: But I'm doing the bulk of the work anyway.")

    @abstractmethod
    def required_operation1(self) -> None:
        pass

    @abstractmethod
    def required_operation2(self) -> None:
        pass

    def hook1(self) -> None:
        pass

    def hook2(self) -> None:
        pass


class ConcreteClass1(AbstractClass):
    def required_operation1(self) -> None:
        print("ConcreteClass1 says: Implemented Operation1.")

    def required_operation2(self) -> None:
        print("ConcreteClass1 says: Implemented Operation2.")


class ConcreteClass2(AbstractClass):
    def required_operation1(self) -> None:
        print("ConcreteClass2 says: Implemented Operation1.")

    def required_operation2(self) -> None:
        print("ConcreteClass2 says: Implemented Operation2.")

    def hook1(self) -> None:
        print("ConcreteClass2 says: Overriden Hook1.")


def client_code(abstract_class: AbstractClass) -> None:
    abstract_class.template_method()


def main(config: Optional[AppConfig] = None) -> int:
    print("Same Client Code can work with different subclasses:")
    client_code(ConcreteClass1())
    print()

    print("Same Client Code can work with different subclasses:")
    client_code(ConcreteClass2())
    return 0


if __name__ == "__main__":
    sys.exit(main())
