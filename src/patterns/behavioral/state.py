"""State - let an object change its behavior when its internal state changes."""
import sys
from abc import ABC, abstractmethod
from typing import Optional

from src.config.schemas import AppConfig
from src.domain.core.exceptions import PatternConfigurationError
from src.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class State(ABC):
    """
    Base state with a back reference to its Context.

    States use the back reference to move the context to another state.
    """

    def __init__(self) -> None:
        self._context: Optional["Context"] = None

    @property
    def context(self) -> "Context":
        if self._context is None:
            raise PatternConfigurationError(type(self).__name__, "context")
        return self._context

    @context.setter
    def context(self, context: "Context") -> None:
        self._context = context

    @abstractmethod
    def handle1(self) -> None:
        pass

    @abstractmethod
    def handle2(self) -> None:
        pass


class Context:
    """Interface of interest to clients; delegates to the current State."""

    def __init__(self, state: State):
        self._state: Optional[State] = None
        self.transition_to(state)

    @property
    def state(self) -> State:
        return self._state

    def transition_to(self, state: State) -> None:
        print(f"Context: Transition to {type(state).__name__}.")
        previous = type(self._state).__name__ if self._state is not None else None
        self._state = state
        self._state.context = self
        logger.debug("State transition", from_state=previous, to_state=type(state).__name__)

    def request1(self) -> None:
        self._state.handle1()

    def request2(self) -> None:
        self._state.handle2()


class ConcreteStateA(State):
    def handle1(self) -> None:
        print("ConcreteStateA handles Request1.")
        print("ConcreteStateA wants to change the state of the context.")
        self.context.transition_to(ConcreteStateB())

    def handle2(self) -> None:
        print("ConcreteStateA handles Request2.")


class ConcreteStateB(State):
    def handle1(self) -> None:
        print("ConcreteStateB handles Request1.")

    def handle2(self) -> None:
        print("ConcreteStateB handles Request2.")
        print("ConcreteStateB wants to change the state of the context.")
        self.context.transition_to(ConcreteStateA())


def client_code() -> None:
    context = Context(ConcreteStateA())
    context.request1()
    context.request2()


def main(config: Optional[AppConfig] = None) -> int:
    client_code()
    return 0


if __name__ == "__main__":
    sys.exit(main())
