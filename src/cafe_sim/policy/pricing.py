# policy/pricing.py

from cafe_sim.app.protocols import PricingPolicy
from cafe_sim.sim.clock import HOUR


def ceil_hours(m: int) -> int:
    """Whole hours billed for a stay of m minutes; any started hour counts."""
    return (m + HOUR - 1) // HOUR


class HourlyPricingPolicy(PricingPolicy):
    def __init__(self, rate: int):
        self.rate = rate

    def charge(self, m: int) -> int:
        return ceil_hours(m) * self.rate
