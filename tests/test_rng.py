from core.rng import LcgRng, lcg_next, make_rng

def test_first_draw_from_zero_seed():
    rng = make_rng(0)
    assert rng() == 1013904223 / 0xFFFFFFFF
    assert rng.state == 1013904223

def test_state_update_wraps_at_32_bits():
    s = 0xFFFFFFFF
    assert lcg_next(s) == (1664525 * s + 1013904223) % 2 ** 32
    assert 0 <= lcg_next(s) < 2 ** 32

def test_same_seed_same_sequence():
    a, b = make_rng(12345), make_rng(12345)
    assert [a() for _ in range(100)] == [b() for _ in range(100)]

def test_different_seeds_diverge():
    a, b = make_rng(1), make_rng(2)
    assert [a() for _ in range(5)] != [b() for _ in range(5)]

def test_outputs_are_unit_interval():
    rng = make_rng(99)
    for _ in range(1000):
        v = rng()
        assert 0.0 <= v <= 1.0

def test_seed_reduced_mod_2_32():
    assert make_rng(2 ** 32 + 5).state == 5
    assert make_rng(-1).state == 0xFFFFFFFF

def test_resume_from_state():
    rng = make_rng(42)
    rng(); rng()
    resumed = LcgRng(rng.state)
    assert [rng() for _ in range(10)] == [resumed() for _ in range(10)]

def test_generators_do_not_share_state():
    a, b = make_rng(7), make_rng(7)
    a(); a(); a()
    assert b.state == 7
