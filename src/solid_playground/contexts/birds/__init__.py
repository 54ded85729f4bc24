"""Birds context (Liskov substitution)."""
from .domain import Bird, Duck, Eater, Flyer, FlyingBird, Ostrich, Sparrow, fly_flying_bird, flyers, let_fly

__all__ = [
    "Bird",
    "Duck",
    "Eater",
    "Flyer",
    "FlyingBird",
    "Ostrich",
    "Sparrow",
    "fly_flying_bird",
    "flyers",
    "let_fly",
]
