# dnadb

dnadb is an in-memory database of DNA records. Each record has a sequence of
`A`, `C`, `G` and `T` and a location ID. The records are kept in an
open-addressing hash table. The table uses quadratic, double-hash or linear
probing. When it grows, it rehashes a part at a time.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `dnadb.dna` has the `DNA` record, the `ProbePolicy` enum (`QUADRATIC`,
  `DOUBLEHASH`, `LINEAR`) and `hash_code`. `hash_code` is an unsigned 32-bit
  multiply-by-33 string hash.
- `dnadb.database` has the `DnaDb` table and the helpers `is_prime` and
  `find_next_prime`.
- `dnadb.driver` has a seeded `Random` helper, a `Distribution` enum,
  `sequencer(size, seed)` and the `main` demonstration. `sequencer` builds a
  reproducible random sequence from a seed.

## Usage

```python
from dnadb.dna import DNA, ProbePolicy, hash_code
from dnadb.database import DnaDb

db = DnaDb(101, hash_code, ProbePolicy.LINEAR)

gene = DNA("GTTTT", 100000)
db.insert(gene)                     # True
db.insert(gene)                     # False: the record is already stored

db.get_dna("GTTTT", 100000) == gene # True
db.get_dna("GTTTT", 100001)         # an empty DNA(): no such record

db.update_loc_id(gene, 100005)      # True
db.remove(DNA("GTTTT", 100005))     # True

db.change_probe_policy(ProbePolicy.DOUBLEHASH)  # used from the next rehash on
print(db.load_factor(), db.deleted_ratio())
db.dump()
```

## Rules

- A location ID must be between 100000 and 999999. Otherwise `insert`
  refuses the record and returns False.
- Two records are equal when their sequences and location IDs are equal.
- `insert` stores a copy of the record. `get_dna` returns a copy of the
  stored record.
- The table capacity is always a prime between 101 and 99991.
- The table rehashes into a new one in two cases: when its load factor goes
  above 0.5, or when more than 80% of its entries are deleted. The new
  capacity is the next prime above four times the live entries. A quarter
  of the old table's slots moves across on each insert and each removal,
  starting with the operation that started the rehash.
- Lookups, updates and removals search both tables while a transfer is
  still going on.
- `deleted_ratio()` returns NaN when the current table has no entries.
- `dump()` prints every slot of the current table, and of the old table if
  one is still being emptied.

## Demonstration

```
dnadb-demo
```

The demonstration inserts 49 random records and removes two of them. It
prints both tables. Then it checks that every record can still be found.

## Limitations

All data lives in memory only. dnadb does not save records to a file or
load them from one. It has no command for querying a database beyond the
demonstration above.