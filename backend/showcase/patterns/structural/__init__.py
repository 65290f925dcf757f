# Structural patterns package initialization
from . import adapter, bridge, composite, decorator, facade, flyweight, proxy

__all__ = ["adapter", "bridge", "composite", "decorator", "facade", "flyweight", "proxy"]
