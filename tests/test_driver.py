import pytest

from dnadb.dna import ALPHABET, MAX_LOC_ID, MIN_LOC_ID
from dnadb.driver import Distribution, Random, main, sequencer


def test_sequencer_is_reproducible_for_a_seed():
    first = sequencer(20, 7)
    assert len(first) == 20
    assert set(first) <= set(ALPHABET)
    assert sequencer(20, 7) == first
    assert sequencer(8, 7) == first[:8]


def test_sequencer_length_and_alphabet():
    sequence = sequencer(50, 3)
    assert len(sequence) == 50
    assert set(sequence) <= set(ALPHABET)


def test_sequencer_empty():
    assert sequencer(0, 1) == ""


def test_uniform_int_stays_in_range():
    generator = Random(MIN_LOC_ID, MAX_LOC_ID)
    values = [generator.rand_num() for _ in range(200)]
    assert all(MIN_LOC_ID <= value <= MAX_LOC_ID for value in values)


def test_uniform_int_uses_fixed_seed():
    first = Random(0, 1000)
    second = Random(0, 1000)
    assert [first.rand_num() for _ in range(10)] == [second.rand_num() for _ in range(10)]


def test_set_seed_restarts_sequence():
    generator = Random(0, 1000)
    generator.set_seed(42)
    first = [generator.rand_num() for _ in range(5)]
    generator.set_seed(42)
    assert [generator.rand_num() for _ in range(5)] == first


def test_init_switches_range_and_resets():
    generator = Random(0, 3, Distribution.SHUFFLE)
    generator.init(10, 20)
    assert generator.kind is Distribution.UNIFORMINT
    values = [generator.rand_num() for _ in range(50)]
    assert all(10 <= value <= 20 for value in values)
    fresh = Random(10, 20)
    assert values == [fresh.rand_num() for _ in range(50)]


def test_shuffled_is_permutation_of_range():
    generator = Random(1, 30, Distribution.SHUFFLE)
    assert sorted(generator.shuffled()) == list(range(1, 31))


def test_normal_values_within_bounds():
    generator = Random(0, 100, Distribution.NORMAL)
    values = [generator.rand_num() for _ in range(200)]
    assert all(isinstance(value, int) and 0 <= value <= 100 for value in values)


def test_shuffle_kind_gives_zero_integer():
    assert Random(5, 9, Distribution.SHUFFLE).rand_num() == 0


def test_real_rand_num_range_and_two_decimals():
    generator = Random(1, 5, Distribution.UNIFORMREAL)
    for _ in range(100):
        value = generator.real_rand_num()
        assert 1.0 <= value <= 5.0
        assert abs(value * 100 - round(value * 100)) < 1e-6


@pytest.mark.parametrize("size", [0, 1, 12])
def test_rand_string_characters_in_range(size):
    generator = Random(65, 90)
    text = generator.rand_string(size)
    assert len(text) == size
    assert all(65 <= ord(char) <= 90 for char in text)


def test_main_reports_removed_records_missing(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Inserting 49 data nodes!\n")
    assert "Dump for the current table: " in out
    assert "Dump for the old table: " in out
    assert f"Removing data node {sequencer(5, 5)} (" in out
    assert f"Data point {sequencer(5, 5)}(" in out
    assert f"Data point {sequencer(5, 15)}(" in out
    assert "All data points exist" not in out