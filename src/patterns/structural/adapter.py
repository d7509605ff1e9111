"""Adapter - make an incompatible interface usable through the target one."""
import sys
from typing import Optional

from src.config.schemas import AppConfig


class Target:
    """Domain-specific interface used by the client code."""

    def request(self) -> str:
        return "Target: The default target's behavior."


class Adaptee:
    """Useful behavior behind an interface the client cannot use directly."""

    def specific_request(self) -> str:
        return ".eetpadA eht fo roivaheb laicepS"


class Adapter(Target):
    """Makes the Adaptee's interface compatible with the Target's interface."""

    def __init__(self, adaptee: Adaptee):
        self._adaptee = adaptee

    def request(self) -> str:
        return f"Adapter: (TRANSLATED) {self._adaptee.specific_request()[::-1]}"


def client_code(target: Target) -> None:
    print(target.request(), end="")


def main(config: Optional[AppConfig] = None) -> int:
    print("Client: I can work just fine with the Target objects:")
    client_code(Target())
    print("\n")

    adaptee = Adaptee()
    print("Client: The Adaptee class has a weird interface. See, I don't understand it:")
    print(f"Adaptee: {adaptee.specific_request()}", end="\n\n")

    print("Client: But I can work with it via the Adapter:")
    client_code(Adapter(adaptee))
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
