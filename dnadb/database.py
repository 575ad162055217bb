"""An open-addressing hash table of DNA records with incremental rehashing."""

from __future__ import annotations

import itertools
import math
from collections.abc import Callable, Iterator
from dataclasses import dataclass

from dnadb.dna import (
    DEFAULT_POLICY,
    DNA,
    MAX_LOC_ID,
    MAX_PRIME,
    MIN_LOC_ID,
    MIN_PRIME,
    ProbePolicy,
    hash_code,
)

HashFunction = Callable[[str], int]


def is_prime(number: int) -> bool:
    """Return True if no integer in 2..number//2 divides ``number``."""
    return all(number % divisor for divisor in range(2, number // 2 + 1))


def _has_no_small_divisor(number: int) -> bool:
    return number >= 4 and all(
        number % divisor for divisor in range(2, math.isqrt(number) + 1)
    )


def find_next_prime(current: int) -> int:
    """Return the smallest prime above ``current`` within the table size bounds."""
    if current < MIN_PRIME:
        current = MIN_PRIME - 1
    for candidate in range(current, MAX_PRIME):
        if candidate != current and _has_no_small_divisor(candidate):
            return candidate
    return MAX_PRIME


def _offset(policy: ProbePolicy, hash_value: int, step: int) -> int:
    if policy is ProbePolicy.QUADRATIC:
        return step * step
    if policy is ProbePolicy.DOUBLEHASH:
        return step * (11 - hash_value % 11)
    return step


@dataclass
class _Table:
    slots: list[DNA | None]
    probing: ProbePolicy
    size: int = 0
    num_deleted: int = 0

    @classmethod
    def empty(cls, capacity: int, probing: ProbePolicy) -> _Table:
        return cls([None] * capacity, probing)

    @property
    def capacity(self) -> int:
        return len(self.slots)

    def probe(self, hash_value: int, first_step: int) -> Iterator[int]:
        capacity = self.capacity
        origin = hash_value % capacity
        yield origin
        for step in itertools.count(first_step):
            yield (origin + _offset(self.probing, hash_value, step)) % capacity

    def find(self, hash_value: int, match: Callable[[DNA], bool]) -> DNA | None:
        for index in itertools.islice(self.probe(hash_value, 0), self.capacity):
            entry = self.slots[index]
            if entry is not None and entry.used and match(entry):
                return entry
        return None


class DnaDb:
    """Hash table of DNA records that migrates to a new table gradually."""

    def __init__(
        self,
        size: int,
        hash_fn: HashFunction = hash_code,
        probing: ProbePolicy = DEFAULT_POLICY,
    ) -> None:
        if size < MIN_PRIME:
            capacity = MIN_PRIME
        elif size > MAX_PRIME:
            capacity = MAX_PRIME
        elif not is_prime(size):
            capacity = find_next_prime(size)
        else:
            capacity = size
        self._hash = hash_fn
        self._new_policy = probing
        self._current = _Table.empty(capacity, probing)
        self._old: _Table | None = None
        self._transfer_index = 0

    def change_probe_policy(self, policy: ProbePolicy) -> None:
        """Use ``policy`` for the table created by the next rehash."""
        self._new_policy = policy

    def insert(self, dna: DNA) -> bool:
        """Insert a copy of ``dna``; False if its location is invalid or it is present."""
        if not MIN_LOC_ID <= dna.location <= MAX_LOC_ID:
            return False
        hash_value = self._hash(dna.sequence)
        table = self._current
        for index in table.probe(hash_value, 1):
            entry = table.slots[index]
            if entry is None or not entry.used:
                break
            if entry == dna:
                return False
        table.slots[index] = DNA(dna.sequence, dna.location, True)
        table.size += 1
        if self.load_factor() > 0.5:
            self._rehash()
        self._incremental_rehash()
        return True

    def remove(self, dna: DNA) -> bool:
        """Mark ``dna`` deleted in whichever table holds it; False if not found."""
        hit = self._locate(self._hash(dna.sequence), lambda entry: entry == dna)
        if hit is None:
            return False
        table, entry = hit
        entry.used = False
        table.num_deleted += 1
        if table is self._current and table.num_deleted > 0.8 * table.size:
            self._rehash()
        self._incremental_rehash()
        return True

    def get_dna(self, sequence: str, location: int) -> DNA:
        """Return a copy of the matching record, or an empty DNA if absent."""
        hit = self._locate(
            self._hash(sequence),
            lambda entry: entry.location == location and entry.sequence == sequence,
        )
        if hit is None:
            return DNA()
        entry = hit[1]
        return DNA(entry.sequence, entry.location, entry.used)

    def update_loc_id(self, dna: DNA, location: int) -> bool:
        """Change the location of the stored record equal to ``dna``."""
        hit = self._locate(self._hash(dna.sequence), lambda entry: entry == dna)
        if hit is None:
            return False
        hit[1].location = location
        return True

    def load_factor(self) -> float:
        """Entries (deleted ones included) per slot of the current table."""
        return self._current.size / self._current.capacity

    def deleted_ratio(self) -> float:
        """Deleted entries per entry of the current table; NaN when it is empty."""
        if self._current.size == 0:
            return math.nan
        return self._current.num_deleted / self._current.size

    def dump(self) -> None:
        """Print every slot of the current and the old table."""
        print("Dump for the current table: ")
        for index, entry in enumerate(self._current.slots):
            print(f"[{index}] : {entry if entry is not None else ''}")
        print("Dump for the old table: ")
        if self._old is not None:
            for index, entry in enumerate(self._old.slots):
                print(f"[{index}] : {entry if entry is not None else ''}")

    def _locate(
        self, hash_value: int, match: Callable[[DNA], bool]
    ) -> tuple[_Table, DNA] | None:
        for table in (self._current, self._old):
            if table is None:
                continue
            entry = table.find(hash_value, match)
            if entry is not None:
                return table, entry
        return None

    def _rehash(self) -> None:
        live = self._current.size - self._current.num_deleted
        self._old = self._current
        self._current = _Table.empty(find_next_prime(4 * live), self._new_policy)
        self._transfer_index = 0

    def _place(self, entry: DNA) -> None:
        table = self._current
        for index in table.probe(self._hash(entry.sequence), 0):
            occupant = table.slots[index]
            if occupant is None or not occupant.used:
                break
        table.slots[index] = entry
        entry.used = True
        table.size += 1

    def _incremental_rehash(self) -> None:
        old = self._old
        if old is None:
            return
        count = old.capacity // 4
        for offset in range(count):
            index = (self._transfer_index + offset) % old.capacity
            entry = old.slots[index]
            if entry is not None and entry.used:
                self._place(entry)
                old.size -= 1
            old.slots[index] = None
        self._transfer_index = (self._transfer_index + count) % old.capacity
        if old.size == 0:
            self._old = None