"""Creational patterns: Builder, Factory Method, Prototype, Singleton."""
