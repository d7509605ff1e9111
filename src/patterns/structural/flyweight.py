"""Flyweight - share the common part of state between many objects.

Cars in a police database share brand, model and color (intrinsic state,
cached in flyweights) while owner and plates (extrinsic state) are passed
in by the client on every call.
"""
import sys
from dataclasses import dataclass, replace
from typing import Dict, Iterable, List, Optional

from src.config.schemas import AppConfig
from src.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class SharedState:
    """Intrinsic state reused across many cars."""
    brand: str
    model: str
    color: str

    def __str__(self) -> str:
        return f"[ {self.brand}, {self.model}, {self.color} ]"


@dataclass(frozen=True)
class UniqueState:
    """Extrinsic state, always supplied by the client."""
    owner: str
    plates: str

    def __str__(self) -> str:
        return f"[ {self.owner}, {self.plates} ]"


class Flyweight:
    def __init__(self, shared_state: SharedState):
        self._shared_state = replace(shared_state)

    @property
    def shared_state(self) -> SharedState:
        return self._shared_state

    def operation(self, unique_state: UniqueState) -> None:
        print(f"Flyweight: Displaying shared ({self._shared_state}) and unique ({unique_state}) state.")


class FlyweightFactory:
    """
    Creates and manages Flyweight objects.

    A requested flyweight is returned from the cache when one exists for the
    same shared state; otherwise a new one is created and cached. Keys are
    kept in insertion order.
    """

    def __init__(self, shared_states: Iterable[SharedState]):
        self._flyweights: Dict[str, Flyweight] = {}
        for shared_state in shared_states:
            self._flyweights[self.get_key(shared_state)] = Flyweight(shared_state)

    @staticmethod
    def get_key(shared_state: SharedState) -> str:
        return f"{shared_state.brand}_{shared_state.model}_{shared_state.color}"

    def get_flyweight(self, shared_state: SharedState) -> Flyweight:
        key = self.get_key(shared_state)
        if key not in self._flyweights:
            print("FlyweightFactory: Can't find a flyweight, creating a new one.")
            self._flyweights[key] = Flyweight(shared_state)
            logger.debug("Flyweight cache miss", key=key, size=len(self._flyweights))
        else:
            print("FlyweightFactory: Reusing existing flyweight.")
            logger.debug("Flyweight cache hit", key=key)
        return self._flyweights[key]

    def keys(self) -> List[str]:
        return list(self._flyweights)

    def __len__(self) -> int:
        return len(self._flyweights)

    def list_flyweights(self) -> None:
        print(f"\nFlyweightFactory: I have {len(self._flyweights)} flyweights:")
        for key in self._flyweights:
            print(key)


def add_car_to_police_database(factory: FlyweightFactory, plates: str, owner: str,
                               brand: str, model: str, color: str) -> None:
    print("\nClient: Adding a car to database.")
    flyweight = factory.get_flyweight(SharedState(brand, model, color))
    flyweight.operation(UniqueState(owner, plates))


def main(config: Optional[AppConfig] = None) -> int:
    factory = FlyweightFactory([
        SharedState("Chevrolet", "Camaro", "pink"),
        SharedState("Mercedes Benz", "C300", "black"),
        SharedState("Mercedes Benz", "C500", "red"),
        SharedState("BMW", "M5", "red"),
        SharedState("BMW", "X6", "white"),
    ])

    factory.list_flyweights()

    add_car_to_police_database(factory, "CL234IR", "James Doe", "BMW", "M5", "red")
    add_car_to_police_database(factory, "CL234IR", "James Doe", "BMW", "X1", "red")

    factory.list_flyweights()
    return 0


if __name__ == "__main__":
    sys.exit(main())
