"""Singleton - one lazily created, thread-safe shared instance.

Two threads race to create the instance with different values; whichever
wins, both print the same value.
"""
import sys
import threading
import time
from typing import Optional

from src.config.schemas import AppConfig
from src.infrastructure.logging.logger import get_logger
from src.patterns.base import resolve_demo_config

logger = get_logger(__name__)

_CREATION_TOKEN = object()


class Singleton:
    """
    Access the single instance through ``get_instance``.

    The first call creates the instance under a lock and stores it on the
    class; later calls return the stored instance and ignore their argument.
    Direct construction and copying are refused.
    """

    _instance: Optional["Singleton"] = None
    _lock = threading.Lock()

    def __init__(self, value: str, _token: object = None):
        if _token is not _CREATION_TOKEN:
            raise TypeError("Singleton cannot be instantiated directly, use Singleton.get_instance()")
        self._value = value

    def __copy__(self):
        raise TypeError("Singleton instances cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError("Singleton instances cannot be copied")

    @classmethod
    def get_instance(cls, value: str) -> "Singleton":
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls(value, _token=_CREATION_TOKEN)
                    logger.debug("Singleton created", value=value)
        return cls._instance

    def some_business_logic(self) -> None:
        pass

    @property
    def value(self) -> str:
        return self._value


def _thread_main(value: str, delay_ms: int) -> None:
    time.sleep(delay_ms / 1000.0)
    singleton = Singleton.get_instance(value)
    print(singleton.value)


def main(config: Optional[AppConfig] = None) -> int:
    delay_ms = resolve_demo_config(config).singleton_delay_ms

    threads = [
        threading.Thread(target=_thread_main, args=("FOO", delay_ms), name="ThreadFoo"),
        threading.Thread(target=_thread_main, args=("BAR", delay_ms), name="ThreadBar"),
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return 0


if __name__ == "__main__":
    sys.exit(main())
