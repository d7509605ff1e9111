"""Memento - capture and restore an object's state without exposing it.

The Originator saves snapshots of its state into mementos; the Caretaker
keeps the history and rolls back through it, knowing mementos only through
their metadata (name and date).
"""
import random
import string
import sys
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Callable, List, Optional

from src.config.schemas import AppConfig
from src.domain.core.exceptions import MementoRestoreError
from src.infrastructure.logging.logger import get_logger
from src.patterns.base import resolve_demo_config

logger = get_logger(__name__)

ALPHANUMERIC = string.digits + string.ascii_uppercase + string.ascii_lowercase

Clock = Callable[[], datetime]


class Memento(ABC):
    """Metadata view of a snapshot; the Caretaker works only with this."""

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @property
    @abstractmethod
    def date(self) -> str:
        pass

    @property
    @abstractmethod
    def state(self) -> str:
        pass


class ConcreteMemento(Memento):
    def __init__(self, state: str, owner: object = None, clock: Clock = datetime.now):
        self._state = state
        self._owner = owner
        self._date = clock().ctime()

    @property
    def owner(self) -> object:
        return self._owner

    @property
    def state(self) -> str:
        return self._state

    @property
    def name(self) -> str:
        return f"{self._date} / ( {self._state[:9]}...)"

    @property
    def date(self) -> str:
        return self._date


class Originator:
    """
    Holds state that changes over time.

    Clients should back the state up through ``save`` before running
    business logic that may change it.
    """

    def __init__(self, state: str, rng: Optional[random.Random] = None,
                 clock: Clock = datetime.now, state_length: int = 30):
        self._state = state
        self._rng = rng or random.Random()
        self._clock = clock
        self._state_length = state_length
        print(f"Originator: My initial state is: {self._state}")

    @property
    def state(self) -> str:
        return self._state

    def do_something(self) -> None:
        print("Originator: I'm doing something important.")
        self._state = self._generate_random_string(self._state_length)
        print(f"Originator: and my state has changed to: {self._state}")

    def _generate_random_string(self, length: int = 10) -> str:
        return "".join(self._rng.choice(ALPHANUMERIC) for _ in range(length))

    def save(self) -> Memento:
        return ConcreteMemento(self._state, owner=self, clock=self._clock)

    def restore(self, memento: Memento) -> None:
        if not isinstance(memento, ConcreteMemento) or memento.owner is not self:
            raise MementoRestoreError(memento.name, "memento was not produced by this originator")
        self._state = memento.state
        print(f"Originator: My state has changed to: {self._state}")


class Caretaker:
    """Keeps the memento history; depends only on the Memento interface."""

    def __init__(self, originator: Originator):
        self._mementos: List[Memento] = []
        self._originator = originator

    @property
    def history(self) -> List[Memento]:
        return list(self._mementos)

    def backup(self) -> None:
        print("\nCaretaker: Saving Originator's state...")
        self._mementos.append(self._originator.save())

    def push(self, memento: Memento) -> None:
        """Add an externally obtained memento to the history."""
        self._mementos.append(memento)

    def undo(self) -> None:
        if not self._mementos:
            return

        memento = self._mementos.pop()
        print(f"Caretaker: Restoring state to: {memento.name}")
        try:
            self._originator.restore(memento)
        except MementoRestoreError as e:
            logger.warning("Skipping unusable memento", memento=memento.name, reason=e.reason)
            self.undo()

    def show_history(self) -> None:
        print("Caretaker: Here's the list of mementos:")
        for memento in self._mementos:
            print(memento.name)


def client_code(originator: Originator) -> None:
    caretaker = Caretaker(originator)

    caretaker.backup()
    originator.do_something()

    caretaker.backup()
    originator.do_something()

    caretaker.backup()
    originator.do_something()

    print()
    caretaker.show_history()

    print("\nClient: Now, let's rollback\n")
    caretaker.undo()
    caretaker.undo()
    caretaker.undo()


def main(config: Optional[AppConfig] = None) -> int:
    demo = resolve_demo_config(config)
    originator = Originator(
        "Super-duper-super-puper-super",
        rng=random.Random(demo.memento_seed),
        state_length=demo.memento_state_length,
    )
    client_code(originator)
    return 0


if __name__ == "__main__":
    sys.exit(main())
