"""Command - turn a request into a stand-alone object the invoker can run."""
import sys
from abc import ABC, abstractmethod
from typing import Optional

from src.config.schemas import AppConfig


class Command(ABC):
    @abstractmethod
    def execute(self) -> None:
        pass


class SimpleCommand(Command):
    """Performs a simple operation on its own."""

    def __init__(self, payload: str):
        self._payload = payload

    def execute(self) -> None:
        print(f"SimpleCommand: See, I can do simple things like printing ({self._payload})")


class Receiver:
    """Holds the business logic; any class may serve as a receiver."""

    def do_something(self, a: str) -> None:
        print(f"Receiver: Working on ({a}).")

    def do_something_else(self, b: str) -> None:
        print(f"Receiver: Also working on ({b}).")


class ComplexCommand(Command):
    """Delegates the real work to a receiver, along with its context data."""

    def __init__(self, receiver: Receiver, a: str, b: str):
        self._receiver = receiver
        self._a = a
        self._b = b

    def execute(self) -> None:
        print("ComplexCommand: Complex stuff should be done by a receiver object.")
        self._receiver.do_something(self._a)
        self._receiver.do_something_else(self._b)


class Invoker:
    """Associated with one or several commands; either slot may be left empty."""

    def __init__(self) -> None:
        self._on_start: Optional[Command] = None
        self._on_finish: Optional[Command] = None

    def set_on_start(self, command: Command) -> None:
        self._on_start = command

    def set_on_finish(self, command: Command) -> None:
        self._on_finish = command

    def do_something_important(self) -> None:
        print("Invoker: Does anybody want something done before I begin?")
        if self._on_start is not None:
            self._on_start.execute()

        print("Invoker: ...doing something really important...")

        print("Invoker: Does anybody want something done after I finish?")
        if self._on_finish is not None:
            self._on_finish.execute()


def main(config: Optional[AppConfig] = None) -> int:
    invoker = Invoker()
    invoker.set_on_start(SimpleCommand("Say Hi!"))
    receiver = Receiver()
    invoker.set_on_finish(ComplexCommand(receiver, "Send email", "Save report"))
    invoker.do_something_important()
    return 0


if __name__ == "__main__":
    sys.exit(main())
