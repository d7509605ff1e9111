"""Builder - assemble a complex product step by step.

The Director runs building steps in a fixed order; concrete builders decide
what each step produces. Builders hand over their product and start again
with a blank one, so one builder can produce many products.
"""
import sys
from abc import ABC, abstractmethod
from typing import List, Optional

from src.config.schemas import AppConfig
from src.domain.core.exceptions import PatternConfigurationError
from src.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class Product1:
    """Product assembled by ConcreteBuilder1."""

    def __init__(self) -> None:
        self.parts: List[str] = []

    def list_parts(self) -> None:
        print(f"Product parts: {', '.join(self.parts)}\n")


class Builder(ABC):
    """Builder interface specifies methods for creating the parts of a product."""

    @abstractmethod
    def produce_part_a(self) -> None:
        pass

    @abstractmethod
    def produce_part_b(self) -> None:
        pass

    @abstractmethod
    def produce_part_c(self) -> None:
        pass


class ConcreteBuilder1(Builder):
    """
    Builds Product1 instances.

    Every production step works on the same product instance until the
    product is collected through the ``product`` property.
    """

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        self._product = Product1()

    @property
    def product(self) -> Product1:
        """
        Hand the current product over to the caller.

        The builder starts over with a blank product, so the caller becomes
        the only owner of the returned object.
        """
        product = self._product
        self.reset()
        logger.debug("Product collected", parts=len(product.parts))
        return product

    def produce_part_a(self) -> None:
        self._product.parts.append("PartA1")

    def produce_part_b(self) -> None:
        self._product.parts.append("PartB1")

    def produce_part_c(self) -> None:
        self._product.parts.append("PartC1")


class Director:
    """Executes building steps in a particular sequence."""

    def __init__(self) -> None:
        self._builder: Optional[Builder] = None

    @property
    def builder(self) -> Builder:
        if self._builder is None:
            raise PatternConfigurationError("Director", "builder")
        return self._builder

    @builder.setter
    def builder(self, builder: Builder) -> None:
        self._builder = builder

    def build_minimal_viable_product(self) -> None:
        self.builder.produce_part_a()

    def build_full_featured_product(self) -> None:
        builder = self.builder
        builder.produce_part_a()
        builder.produce_part_b()
        builder.produce_part_c()


def client_code(director: Director) -> None:
    builder = ConcreteBuilder1()
    director.builder = builder

    print("Standard basic product:")
    director.build_minimal_viable_product()
    builder.product.list_parts()

    print("Standard full featured product:")
    director.build_full_featured_product()
    builder.product.list_parts()

    # The builder can also be used without a director
    print("Custom product:")
    builder.produce_part_a()
    builder.produce_part_c()
    builder.product.list_parts()


def main(config: Optional[AppConfig] = None) -> int:
    client_code(Director())
    return 0


if __name__ == "__main__":
    sys.exit(main())
