"""Observer - notify subscribed objects whenever a subject's message changes."""
import sys
from abc import ABC, abstractmethod
from typing import List, Optional

from src.config.schemas import AppConfig
from src.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class IObserver(ABC):
    @abstractmethod
    def update(self, message_from_subject: str) -> None:
        pass


class ISubject(ABC):
    @abstractmethod
    def attach(self, observer: IObserver) -> None:
        pass

    @abstractmethod
    def detach(self, observer: IObserver) -> None:
        pass

    @abstractmethod
    def notify(self) -> None:
        pass


class Subject(ISubject):
    """
    Owns some important state and notifies observers when it changes.

    The subject also numbers the observers created for it, so every run of
    the demonstration starts again from observer 1.
    """

    def __init__(self) -> None:
        self._observers: List[IObserver] = []
        self._message = ""
        self._observer_count = 0

    @property
    def observers(self) -> List[IObserver]:
        return list(self._observers)

    def next_observer_number(self) -> int:
        self._observer_count += 1
        return self._observer_count

    def attach(self, observer: IObserver) -> None:
        self._observers.append(observer)

    def detach(self, observer: IObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def notify(self) -> None:
        self.how_many_observers()
        logger.debug("Notifying observers", count=len(self._observers))
        # Snapshot so observers may detach while being notified
        for observer in list(self._observers):
            observer.update(self._message)

    def create_message(self, message: str = "Empty") -> None:
        self._message = message
        self.notify()

    def how_many_observers(self) -> None:
        print(f"There are {len(self._observers)} observers in the list.")

    def some_business_logic(self) -> None:
        self._message = "change message"
        self.notify()
        print("I'm about to do something important.")


class Observer(IObserver):
    def __init__(self, subject: Subject):
        self._subject = subject
        self._message_from_subject = ""
        self._subject.attach(self)
        self.number = subject.next_observer_number()
        print(f'Hi, I\'m the Observer "{self.number}"')

    def update(self, message_from_subject: str) -> None:
        self._message_from_subject = message_from_subject
        self.print_info()

    def remove_me_from_the_list(self) -> None:
        self._subject.detach(self)
        print(f'Observer "{self.number}" removed from the list.')

    def print_info(self) -> None:
        print(f'Observer "{self.number}" a new message is available --> {self._message_from_subject}')

    def close(self) -> None:
        print(f'Goodbye, I was the Observer "{self.number}"')


def client_code() -> None:
    subject = Subject()
    observer1 = Observer(subject)
    observer2 = Observer(subject)
    observer3 = Observer(subject)

    subject.create_message("Hello World! :D")
    observer3.remove_me_from_the_list()

    subject.create_message("The weather is hot today! :P")
    observer4 = Observer(subject)

    observer2.remove_me_from_the_list()
    observer5 = Observer(subject)

    subject.create_message("My new car is great! ;)")
    observer5.remove_me_from_the_list()

    observer4.remove_me_from_the_list()
    observer1.remove_me_from_the_list()

    for observer in (observer5, observer4, observer3, observer2, observer1):
        observer.close()


def main(config: Optional[AppConfig] = None) -> int:
    client_code()
    return 0


if __name__ == "__main__":
    sys.exit(main())
