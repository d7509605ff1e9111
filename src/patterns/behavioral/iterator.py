"""Iterator - traverse a collection without exposing its representation.

The explicit first/next/is_done/current cursor is kept alongside the Python
iteration protocol, so a Container works in a plain ``for`` loop too.
"""
import sys
from typing import Generic, Iterator as TypingIterator, List, Optional, TypeVar

from src.config.schemas import AppConfig

T = TypeVar("T")


class Iterator(Generic[T]):
    """Cursor over a Container."""

    def __init__(self, container: "Container[T]"):
        self._container = container
        self._position = 0

    def first(self) -> None:
        self._position = 0

    def next(self) -> None:
        self._position += 1

    def is_done(self) -> bool:
        return self._position >= len(self._container)

    def current(self) -> T:
        if self.is_done():
            raise IndexError("Iterator is past the end of the container")
        return self._container[self._position]

    def __iter__(self) -> "Iterator[T]":
        return self

    def __next__(self) -> T:
        if self.is_done():
            raise StopIteration
        item = self.current()
        self.next()
        return item


class Container(Generic[T]):
    """Generic collection that hands out fresh iterators."""

    def __init__(self) -> None:
        self._data: List[T] = []

    def add(self, item: T) -> None:
        self._data.append(item)

    def create_iterator(self) -> Iterator[T]:
        return Iterator(self)

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index: int) -> T:
        return self._data[index]

    def __iter__(self) -> TypingIterator[T]:
        return self.create_iterator()


class Data:
    def __init__(self, value: int = 0):
        self._value = value

    def set_data(self, value: int) -> None:
        self._value = value

    def current_data(self) -> int:
        return self._value


def client_code() -> None:
    print("Iterator with (int):")
    cont: Container[int] = Container()
    for i in range(10):
        cont.add(i)

    it = cont.create_iterator()
    it.first()
    while not it.is_done():
        print(it.current())
        it.next()

    cont2: Container[Data] = Container()
    for value in (100, 1000, 10000):
        cont2.add(Data(value))

    print("Iterator with (custom Class):")
    it2 = cont2.create_iterator()
    it2.first()
    while not it2.is_done():
        print(it2.current().current_data())
        it2.next()


def main(config: Optional[AppConfig] = None) -> int:
    client_code()
    return 0


if __name__ == "__main__":
    sys.exit(main())
