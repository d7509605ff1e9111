"""Strategy - swap interchangeable algorithms behind one interface."""
import sys
from abc import ABC, abstractmethod
from typing import Optional

from src.config.schemas import AppConfig


class Strategy(ABC):
    """Operations common to all supported versions of an algorithm."""

    @abstractmethod
    def do_algorithm(self, data: str) -> str:
        pass


class Context:
    """
    Holds a strategy and runs business logic through it.

    The strategy is usually passed to the constructor but can be replaced at
    runtime through the ``strategy`` property.
    """

    def __init__(self, strategy: Optional[Strategy] = None):
        self._strategy = strategy

    @property
    def strategy(self) -> Optional[Strategy]:
        return self._strategy

    @strategy.setter
    def strategy(self, strategy: Strategy) -> None:
        self._strategy = strategy

    def do_some_business_logic(self) -> None:
        if self._strategy is None:
            print("Context: Strategy isn't set")
            return

        print("Context: Sorting data using the strategy (not sure how it'll do it)")
        result = self._strategy.do_algorithm("aecbd")
        print(result)


class ConcreteStrategyA(Strategy):
    def do_algorithm(self, data: str) -> str:
        return "".join(sorted(data))


class ConcreteStrategyB(Strategy):
    def do_algorithm(self, data: str) -> str:
        return "".join(sorted(data, reverse=True))


def client_code() -> None:
    context = Context(ConcreteStrategyA())
    print("Client: Strategy is set to normal sorting.")
    context.do_some_business_logic()
    print()

    print("Client: Strategy is set to reverse sorting.")
    context.strategy = ConcreteStrategyB()
    context.do_some_business_logic()


def main(config: Optional[AppConfig] = None) -> int:
    client_code()
    return 0


if __name__ == "__main__":
    sys.exit(main())
