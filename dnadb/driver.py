"""Random helpers and a demonstration run of the DNA database."""

from __future__ import annotations

import argparse
import enum
import math
import random

from dnadb.database import DnaDb
from dnadb.dna import ALPHABET, DNA, MAX_LOC_ID, MIN_LOC_ID, MIN_PRIME, ProbePolicy, hash_code

_FIXED_SEED = 10


class Distribution(enum.Enum):
    """Kind of values a :class:`Random` produces."""

    UNIFORMINT = "uniformint"
    UNIFORMREAL = "uniformreal"
    NORMAL = "normal"
    SHUFFLE = "shuffle"


class Random:
    """Random number source bound to a range and a distribution."""

    def __init__(
        self,
        minimum: int,
        maximum: int,
        kind: Distribution = Distribution.UNIFORMINT,
        mean: float = 50,
        stdev: float = 20,
    ) -> None:
        self.minimum = minimum
        self.maximum = maximum
        self.kind = kind
        self._mean = mean
        self._stdev = stdev
        self._real_bounds = (0.0, 1.0)
        if kind in (Distribution.UNIFORMINT, Distribution.UNIFORMREAL):
            self._generator = random.Random(_FIXED_SEED)
        else:
            self._generator = random.Random()
        if kind is Distribution.UNIFORMREAL:
            self._real_bounds = (float(minimum), float(maximum))

    def set_seed(self, seed: int) -> None:
        """Restart the generator from ``seed``."""
        self._generator = random.Random(seed)

    def init(self, minimum: int, maximum: int) -> None:
        """Switch to uniform integers in ``[minimum, maximum]`` from the fixed seed."""
        self.minimum = minimum
        self.maximum = maximum
        self.kind = Distribution.UNIFORMINT
        self._generator = random.Random(_FIXED_SEED)

    def shuffled(self) -> list[int]:
        """Return every integer from minimum to maximum in random order."""
        values = list(range(self.minimum, self.maximum + 1))
        self._generator.shuffle(values)
        return values

    def rand_num(self) -> int:
        """Return a random integer; 0 for distributions that give no integers."""
        if self.kind is Distribution.NORMAL:
            while True:
                result = int(self._generator.gauss(self._mean, self._stdev))
                if self.minimum <= result <= self.maximum:
                    return result
        if self.kind is Distribution.UNIFORMINT:
            return self._generator.randint(self.minimum, self.maximum)
        return 0

    def real_rand_num(self) -> float:
        """Return a uniform real number rounded down to two decimal places."""
        low, high = self._real_bounds
        value = self._generator.uniform(low, high)
        return math.floor(value * 100.0) / 100.0

    def rand_string(self, size: int) -> str:
        """Return ``size`` characters whose code points come from :meth:`rand_num`."""
        return "".join(chr(self.rand_num()) for _ in range(size))


def sequencer(size: int, seed: int) -> str:
    """Return a reproducible DNA sequence of ``size`` bases for ``seed``."""
    generator = Random(0, len(ALPHABET) - 1)
    generator.set_seed(seed)
    return "".join(ALPHABET[generator.rand_num()] for _ in range(size))


def main(argv: list[str] | None = None) -> int:
    """Fill a database, remove two records, dump it and check what remains."""
    parser = argparse.ArgumentParser(
        prog="dnadb", description="Demonstrate the DNA hash table."
    )
    parser.parse_args(argv)

    data: list[DNA] = []
    locations = Random(MIN_LOC_ID, MAX_LOC_ID)
    database = DnaDb(MIN_PRIME, hash_code, ProbePolicy.DOUBLEHASH)

    print("Inserting 49 data nodes!")
    for seed in range(49):
        record = DNA(sequencer(5, seed), locations.rand_num(), True)
        data.append(record)
        if not database.insert(record):
            print(f"Did not insert {record}")

    for position in (5, 15):
        print(f"Removing data node {data[position]}")
        database.remove(data[position])
    database.dump()

    print()
    print("Checking whether all data exist in the DB:")
    all_found = True
    for record in data:
        found = database.get_dna(record.sequence, record.location) == record
        all_found = all_found and found
        if not found:
            print(f"Data point {record.sequence}({record.location}) is missing!")
    if all_found:
        print("\tAll data points exist in the DnaDb object!")
    return 0