"""
Gang-of-Four design pattern catalogue.

Every pattern module exposes ``demo()`` returning printable lines;
``DEMOS`` maps a CLI-friendly name to that function.
"""

from .behavioral import (
    chain_of_responsibility,
    command,
    interpreter,
    iterator,
    mediator,
    memento,
    observer,
    state,
    strategy,
    template_method,
    visitor,
)
from .creational import abstract_factory, builder, factory, prototype, singleton
from .structural import adapter, bridge, composite, decorator, facade, flyweight, proxy

DEMOS = {
    # Creational
    "singleton": singleton.demo,
    "builder": builder.demo,
    "factory": factory.demo,
    "abstract-factory": abstract_factory.demo,
    "prototype": prototype.demo,
    # Structural
    "adapter": adapter.demo,
    "bridge": bridge.demo,
    "composite": composite.demo,
    "decorator": decorator.demo,
    "facade": facade.demo,
    "flyweight": flyweight.demo,
    "proxy": proxy.demo,
    # Behavioral
    "chain-of-responsibility": chain_of_responsibility.demo,
    "command": command.demo,
    "interpreter": interpreter.demo,
    "iterator": iterator.demo,
    "mediator": mediator.demo,
    "memento": memento.demo,
    "observer": observer.demo,
    "state": state.demo,
    "strategy": strategy.demo,
    "template-method": template_method.demo,
    "visitor": visitor.demo,
}

__all__ = ["DEMOS"]
