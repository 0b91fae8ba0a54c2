"""Default-export example with a constructor dependency."""


class Greeter:
    """Greets users; ``clock`` is injected by name."""

    def __init__(self, clock) -> None:
        self.clock = clock

    def greet(self, name: str) -> str:
        return f"Hello, {name}! It is {self.clock.now():%H:%M} UTC."


default = Greeter
