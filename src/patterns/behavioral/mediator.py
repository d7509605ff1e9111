"""Mediator - components talk through a mediator instead of to each other."""
import sys
from abc import ABC, abstractmethod
from typing import Optional

from src.config.schemas import AppConfig
from src.domain.core.exceptions import PatternConfigurationError
from src.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class Mediator(ABC):
    """Components notify the mediator about events; it decides who reacts."""

    @abstractmethod
    def notify(self, sender: "BaseComponent", event: str) -> None:
        pass


class BaseComponent:
    """Stores the mediator instance inside component objects."""

    def __init__(self, mediator: Optional[Mediator] = None):
        self._mediator = mediator

    @property
    def mediator(self) -> Mediator:
        if self._mediator is None:
            raise PatternConfigurationError(type(self).__name__, "mediator")
        return self._mediator

    @mediator.setter
    def mediator(self, mediator: Mediator) -> None:
        self._mediator = mediator


class Component1(BaseComponent):
    def do_a(self) -> None:
        print("Component1 does A.")
        self.mediator.notify(self, "A")

    def do_b(self) -> None:
        print("Component1 does B.")
        self.mediator.notify(self, "B")


class Component2(BaseComponent):
    def do_c(self) -> None:
        print("Component2 does C.")
        self.mediator.notify(self, "C")

    def do_d(self) -> None:
        print("Component2 does D.")
        self.mediator.notify(self, "D")


class ConcreteMediator(Mediator):
    """Coordinates Component1 and Component2; only A and D trigger reactions."""

    def __init__(self, component1: Component1, component2: Component2):
        self._component1 = component1
        self._component1.mediator = self
        self._component2 = component2
        self._component2.mediator = self

    def notify(self, sender: BaseComponent, event: str) -> None:
        logger.debug("Mediator notified", sender=type(sender).__name__, mediator_event=event)
        if event == "A":
            print("Mediator reacts on A and triggers following operations:")
            self._component2.do_c()
        elif event == "D":
            print("Mediator reacts on D and triggers following operations:")
            self._component1.do_b()
            self._component2.do_c()


def client_code() -> None:
    c1 = Component1()
    c2 = Component2()
    ConcreteMediator(c1, c2)

    print("Client triggers operation A.")
    c1.do_a()

    print("\nClient triggers operation D.")
    c2.do_d()


def main(config: Optional[AppConfig] = None) -> int:
    client_code()
    return 0


if __name__ == "__main__":
    sys.exit(main())
