"""Structural patterns: Adapter, Bridge, Composite, Decorator, Flyweight."""
