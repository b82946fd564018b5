import pytest

from judgeset import arithmetic as ar


def test_return_displacement_symmetry():
    assert ar.return_displacement(5, 2) == ar.return_displacement(2, 5)
    assert ar.return_displacement(5, 2) == ar.return_displacement(10, 1)
    assert ar.return_displacement(7, 0) == 0


def test_crossing_undetermined():
    assert ar.crossing_time_difference(10, 5, 5) is None
    assert ar.crossing_time_difference(10, 6, 5) is None
    assert ar.crossing_time_difference(0, 1, 5) is None
    assert ar.crossing_time_difference(10, 0, 5) is None


def test_crossing_scales_with_distance():
    one = ar.crossing_time_difference(10, 3, 5)
    two = ar.crossing_time_difference(20, 3, 5)
    assert one > 0
    assert two == pytest.approx(2 * one)


def test_bafana_range_and_start():
    assert ar.bafana_pass(5, 2, 0) == 2
    for p in range(20):
        assert 1 <= ar.bafana_pass(5, 3, p) <= 5


def test_lock_zero_spins():
    assert ar.combination_lock_degrees(0, 0, 0, 0) == 720 + 360
    assert ar.combination_lock_degrees(3, 3, 3, 3) == ar.combination_lock_degrees(0, 0, 0, 0)
    assert ar.combination_lock_degrees(0, 1, 1, 1) > 720 + 360


def test_feynman():
    assert ar.feynman_squares(1) == 1
    for n in range(2, 10):
        assert ar.feynman_squares(n) - ar.feynman_squares(n - 1) == n * n


def test_hashmat_symmetric():
    assert ar.hashmat_difference(10, 12) == ar.hashmat_difference(12, 10) == 2


def test_numbering_road():
    assert ar.numbering_road(5, 5) == 0
    assert ar.numbering_road(1000, 1) is None
    with pytest.raises(ValueError):
        ar.numbering_road(5, 0)


def test_compare():
    assert ar.compare(3, 1) == ">"
    assert ar.compare(1, 3) == "<"
    assert ar.compare(2, 2) == "="


def test_nessy():
    assert ar.nessy_sonars(3, 3) == 1
    assert ar.nessy_sonars(2, 100) == 0


def test_three_families_equal_work_scales():
    assert ar.three_families_share(4, 4, 8) == ar.three_families_share(1, 1, 8)


def test_add_without_carry():
    assert ar.add_without_carry(12345, 12345) == 0
    x = ar.add_without_carry(4, 6)
    assert ar.add_without_carry(x, 6) == 4


def test_digit_root():
    assert ar.digit_root(7) == 7
    assert ar.digit_root(19) == 1
    for n in range(1, 200):
        assert 1 <= ar.digit_root(n) <= 9
        assert ar.digit_root(n * 10) == ar.digit_root(n)
    with pytest.raises(ValueError):
        ar.digit_root(0)


def test_cycle_length():
    assert ar.cycle_length(1) == 1
    assert ar.cycle_length(22) == 16
    for n in range(1, 50):
        assert ar.cycle_length(2 * n) == ar.cycle_length(n) + 1
    with pytest.raises(ValueError):
        ar.cycle_length(0)


def test_max_cycle_length_order_free():
    assert ar.max_cycle_length(1, 10) == ar.max_cycle_length(10, 1)
    assert all(ar.max_cycle_length(1, 10) >= ar.cycle_length(n) for n in range(1, 11))


def test_run_collatz_keeps_order():
    out = ar.run("3n+1", "10 1\n")
    assert out == f"10 1 {ar.max_cycle_length(1, 10)}\n"


def test_run_road_and_intermediate():
    assert ar.run("road", "5 5\n0 0\n") == "Case 1: 0\n"
    assert ar.run("road", "1000 1\n0 0\n") == "Case 1: impossible\n"
    assert ar.run("intermediate", "1\n1 5 5\n") == "Case 1: can't determine\n"


def test_run_lock_stops_on_zeros():
    assert ar.run("lock", "1 1 1 1\n0 0 0 0\n5 5 5 5\n") == f"{720 + 360}\n"


def test_run_unknown():
    with pytest.raises(ValueError):
        ar.run("nope", "")