# Creational patterns package initialization
from . import abstract_factory, builder, factory, prototype, singleton

__all__ = ["abstract_factory", "builder", "factory", "prototype", "singleton"]
