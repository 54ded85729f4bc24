from solid_playground.core.app import Playground
from solid_playground.core.container import Container
from solid_playground.core.module import Module
from solid_playground.core.config import Config, PlaygroundSettings

__all__ = [
    "Playground",
    "Container",
    "Module",
    "Config",
    "PlaygroundSettings",
]
