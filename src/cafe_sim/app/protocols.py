from typing import Protocol, runtime_checkable


@runtime_checkable
class PricingPolicy(Protocol):
    """Turns the minutes of one table stay into the amount billed for it."""

    def charge(self, m: int) -> int: ...


@runtime_checkable
class Sink(Protocol):
    def write(self, rec) -> None: ...
