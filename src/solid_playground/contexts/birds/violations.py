"""A subclass that cannot honor its base class contract."""


class Bird:
    def fly(self) -> str:
        return "Bird is flying..."


class Duck(Bird):
    def fly(self) -> str:
        return "Duck is flying..."


class Ostrich(Bird):
    def fly(self) -> str:
        raise NotImplementedError("Ostrich doesn't fly, yet it is accepted wherever a Bird is")


def fly_bird(bird: Bird) -> str:
    return bird.fly()
