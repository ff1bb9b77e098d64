"""Base generator class for synthetic ledger data."""

from __future__ import annotations

import random
from abc import ABC

from faker import Faker


class BaseGenerator(ABC):
    """Base class for all data generators.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility. Seeds both the Faker instance and
        the generator's own ``random.Random``.
    locale : str
        Faker locale (default ``es_MX``).
    """

    def __init__(self, seed: int | None = None, locale: str = "es_MX") -> None:
        self.fake = Faker(locale)
        self.rng = random.Random(seed)
        if seed is not None:
            self.fake.seed_instance(seed)
