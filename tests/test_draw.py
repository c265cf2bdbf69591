"""Tests for drawing uniform variates."""

import numpy as np
import pytest

from unifrng import Engine, GeneratorKind, InvalidParameter, UnimplementedGeneratorKind
from unifrng.generators.base import I2_32M1, clamp_unit

DRAWABLE = [
    GeneratorKind.WICHMANN_HILL,
    GeneratorKind.MARSAGLIA_MULTICARRY,
    GeneratorKind.SUPER_DUPER,
    GeneratorKind.LECUYER_CMRG,
]


def test_marsaglia_multicarry_reference_sequence(engine):
    """Seed 1 reproduces the multiply-with-carry recurrence."""
    engine.select(GeneratorKind.MARSAGLIA_MULTICARRY)
    engine.set_seed(1)
    values = [engine.draw() for _ in range(5)]
    expected = [
        0.006153224270360828,
        0.55323395006201082,
        0.091852440985816616,
        0.64305850366201667,
        0.0096851727016468454,
    ]
    assert values == pytest.approx(expected, rel=1e-12)
    assert engine.state() == [1557987962, 568703548]


def test_wichmann_hill_reference_sequence(engine):
    engine.select(GeneratorKind.WICHMANN_HILL)
    engine.set_seed(42)
    values = [engine.draw() for _ in range(3)]
    expected = [0.25080964353400526, 0.76180334436303976, 0.20390793930585005]
    assert values == pytest.approx(expected, rel=1e-12)


def test_super_duper_reference_sequence(engine):
    engine.select(GeneratorKind.SUPER_DUPER)
    engine.set_seed(42)
    values = [engine.draw() for _ in range(3)]
    expected = [0.77287973015869016, 0.83845173400790685, 0.26114779577151581]
    assert values == pytest.approx(expected, rel=1e-12)


def test_lecuyer_reference_sequence(engine):
    engine.select(GeneratorKind.LECUYER_CMRG)
    engine.set_seed(42)
    values = [engine.draw() for _ in range(3)]
    expected = [0.17384558454153168, 0.55474009676509084, 0.48337712221370116]
    assert values == pytest.approx(expected, rel=1e-12)
    assert engine.state() == [
        1428141413, 1652992521, 4130019427, 681480349, 3565369150, 2053930596,
    ]


@pytest.mark.parametrize("kind", DRAWABLE)
def test_draws_strictly_inside_unit_interval(kind, engine):
    engine.select(kind)
    for seed in (0, 1, 12345, -7):
        engine.set_seed(seed)
        values = engine.draw_many(2000)
        assert values.dtype == np.float64
        assert np.all(values > 0.0)
        assert np.all(values < 1.0)


@pytest.mark.parametrize("kind", DRAWABLE)
def test_draws_roughly_uniform(kind, engine):
    engine.select(kind)
    engine.set_seed(2024)
    values = engine.draw_many(20000)
    assert abs(values.mean() - 0.5) < 0.01
    counts, _ = np.histogram(values, bins=10, range=(0.0, 1.0))
    assert counts.min() > 1800


def test_clamp_unit():
    assert clamp_unit(0.0) == 0.5 * I2_32M1
    assert clamp_unit(-1.0) == 0.5 * I2_32M1
    assert clamp_unit(1.0) == 1.0 - 0.5 * I2_32M1
    assert 0.0 < clamp_unit(0.0) < clamp_unit(1.0) < 1.0
    assert clamp_unit(0.25) == 0.25


def test_degenerate_state_never_yields_zero(engine):
    """An unrepaired all-zero state still draws a positive value."""
    generator = engine.generator(GeneratorKind.MARSAGLIA_MULTICARRY)
    generator.state.assign([0, 0])
    value = generator.draw()
    assert value == 0.5 * I2_32M1


@pytest.mark.parametrize("kind", [
    GeneratorKind.MERSENNE_TWISTER,
    GeneratorKind.KNUTH_TAOCP,
    GeneratorKind.KNUTH_TAOCP2,
])
def test_unwired_kinds_fail_loudly(kind, engine):
    engine.select(kind)
    engine.set_seed(1)
    before = engine.state()
    with pytest.raises(UnimplementedGeneratorKind):
        engine.draw()
    with pytest.raises(NotImplementedError):
        engine.draw_many(3)
    assert engine.state() == before


@pytest.mark.parametrize("kind", [
    GeneratorKind.MERSENNE_TWISTER,
    GeneratorKind.KNUTH_TAOCP,
    GeneratorKind.KNUTH_TAOCP2,
])
def test_unwired_draw_leaves_unseeded_state_alone(kind, engine, fixed_time_seed):
    """A failed draw does not re-seed a never-seeded generator from time."""
    engine.select(kind)
    with pytest.raises(UnimplementedGeneratorKind):
        engine.draw()
    assert not engine.active.seeded
    assert engine.state() == [0] * engine.active.seed_word_count


@pytest.mark.parametrize("kind, words", [
    (GeneratorKind.MERSENNE_TWISTER, [0] + [7] * 624),
    (GeneratorKind.KNUTH_TAOCP, [5] * 100 + [0]),
    (GeneratorKind.KNUTH_TAOCP2, [5] * 100 + [0]),
])
def test_unwired_draw_leaves_loaded_state_alone(kind, words, engine):
    """A failed draw does not repair words that were just loaded."""
    engine.load(kind, "Buggy", words)
    with pytest.raises(UnimplementedGeneratorKind):
        engine.draw()
    assert engine.active.needs_fixup
    assert engine.state() == words


def test_draw_without_seed_reseeds_from_time(engine, fixed_time_seed):
    engine.select(GeneratorKind.WICHMANN_HILL)
    first = engine.draw()

    reference = Engine(GeneratorKind.WICHMANN_HILL)
    reference.set_seed(fixed_time_seed)
    assert first == reference.draw()


def test_draw_many_size(engine):
    engine.set_seed(3)
    assert engine.draw_many(0).shape == (0,)
    assert engine.draw_many(4).shape == (4,)
    with pytest.raises(InvalidParameter):
        engine.draw_many(-1)


def test_draw_many_matches_draw(engine):
    other = Engine()
    engine.set_seed(11)
    other.set_seed(11)
    assert list(engine.draw_many(5)) == [other.draw() for _ in range(5)]
