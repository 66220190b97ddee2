import itertools

import pytest

from cutilkit.permutations import Permutations


def test_initial_state():
    p = Permutations(8, "ATCG")
    assert str(p) == "A" * 8
    assert p.current() == (0,) * 8
    assert p.alphabet() == "ATCG"
    assert p.alphabet_length() == 4
    assert p.input_size() == 8


def test_inc_moves_last_position():
    p = Permutations(3, "ATCG")
    p.inc()
    assert str(p) == "AAT"
    assert p.current() == (0, 0, 1)


def test_full_sequence_matches_product_order():
    alphabet = "xyz"
    p = Permutations(3, alphabet)
    seen = []
    for _ in range(len(alphabet) ** 3):
        seen.append(str(p))
        p.inc()
    expected = ["".join(t) for t in itertools.product(alphabet, repeat=3)]
    assert seen == expected
    assert len(set(seen)) == 27


def test_wraps_to_start():
    p = Permutations(4, "ab")
    p.add(2 ** 4)
    assert str(p) == "aaaa"
    assert p.current() == (0, 0, 0, 0)


def test_add_equals_repeated_inc():
    a = Permutations(5, "ATCG")
    b = Permutations(5, "ATCG")
    a.add(137)
    for _ in range(137):
        b.inc()
    assert a.current() == b.current()
    assert str(a) == str(b)


def test_add_then_sub_round_trip():
    p = Permutations(6, "ATCG")
    p.add(500)
    state = p.current()
    p.add(321)
    p.sub(321)
    assert p.current() == state


def test_dec_undoes_inc():
    p = Permutations(3, "ATCG")
    p.add(16)
    before = str(p)
    p.inc()
    p.dec()
    assert str(p) == before


def test_dec_borrows_across_positions():
    p = Permutations(3, "ATCG")
    p.add(4)
    p.dec()
    assert p.current() == (0, 0, 3)
    assert str(p) == "AAG"


def test_sub_stops_at_first_state():
    p = Permutations(3, "ATCG")
    p.add(3)
    p.sub(10)
    assert p.current() == (0, 0, 0)
    p.dec()
    assert str(p) == "AAA"


def test_single_position_wraps():
    p = Permutations(1, "abc")
    p.add(4)
    assert str(p) == "b"


@pytest.mark.parametrize("length, alphabet", [(0, "ab"), (3, "")])
def test_invalid_arguments(length, alphabet):
    with pytest.raises(ValueError):
        Permutations(length, alphabet)


def test_negative_counts_rejected():
    p = Permutations(2, "ab")
    with pytest.raises(ValueError):
        p.add(-1)
    with pytest.raises(ValueError):
        p.sub(-1)