"""Behavioral patterns: Command, Iterator, Mediator, Memento, Observer,
State, Strategy, Template Method, Visitor."""
