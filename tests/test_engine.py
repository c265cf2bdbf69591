"""Tests for the engine handle and the process-default engine."""

import logging

import pytest

import unifrng
from unifrng import Engine, GeneratorKind, UnknownGeneratorKind
from unifrng.core import random as default_engine
from unifrng.core.engine import DEFAULT_KIND


def test_default_kind(engine):
    assert engine.active_kind == DEFAULT_KIND == GeneratorKind.LECUYER_CMRG
    assert engine.active.name == "L'Ecuyer-CMRG"
    assert len(engine.descriptors) == 7


def test_select_returns_previous(engine):
    previous = engine.select("Super-Duper")
    assert previous == GeneratorKind.LECUYER_CMRG
    assert engine.active_kind == GeneratorKind.SUPER_DUPER
    assert engine.select(GeneratorKind.WICHMANN_HILL) == GeneratorKind.SUPER_DUPER


def test_select_unknown_keeps_active(engine):
    with pytest.raises(UnknownGeneratorKind):
        engine.select("Ranlux")
    with pytest.raises(UnknownGeneratorKind):
        engine.select(GeneratorKind.USER_UNIF)
    assert engine.active_kind == GeneratorKind.LECUYER_CMRG


def test_engine_rejects_unknown_kind():
    with pytest.raises(UnknownGeneratorKind):
        Engine("Ranlux")


def test_switching_kinds_resumes_state(engine):
    """Other kinds keep their state while a different kind is active."""
    engine.select(GeneratorKind.WICHMANN_HILL)
    engine.set_seed(1)
    engine.draw()
    expected = Engine(GeneratorKind.WICHMANN_HILL)
    expected.set_seed(1)
    expected.draw()

    engine.select(GeneratorKind.MARSAGLIA_MULTICARRY)
    engine.set_seed(2)
    engine.draw_many(10)

    engine.select(GeneratorKind.WICHMANN_HILL)
    assert engine.draw() == expected.draw()


def test_engines_are_independent():
    first, second = Engine(), Engine()
    first.set_seed(10)
    second.set_seed(10)
    first.draw_many(3)
    assert first.state() != second.state()
    second.draw_many(3)
    assert first.state() == second.state()


def test_select_logs_switch(engine, caplog):
    with caplog.at_level(logging.INFO, logger="unifrng.core.engine"):
        engine.select("Wichmann-Hill")
        engine.select("Wichmann-Hill")
    messages = [r.getMessage() for r in caplog.records]
    assert messages == ["Switched generator from LECUYER_CMRG to WICHMANN_HILL"]


def test_default_engine_is_shared():
    assert default_engine.get_engine() is default_engine.get_engine()
    assert unifrng.get_engine() is default_engine.get_engine()


def test_default_engine_draw():
    unifrng.set_seed(1, kind="Marsaglia-Multicarry")
    assert unifrng.draw() == pytest.approx(0.006153224270360828, rel=1e-12)
    assert default_engine.get_engine().active_kind == GeneratorKind.MARSAGLIA_MULTICARRY


def test_default_engine_select():
    assert unifrng.select("Super-Duper") == GeneratorKind.LECUYER_CMRG
    unifrng.set_seed(42)
    assert unifrng.draw() == pytest.approx(0.77287973015869016, rel=1e-12)


def test_set_engine_replaces_default():
    custom = Engine("Wichmann-Hill")
    previous = default_engine.set_engine(custom)
    assert previous is None
    assert unifrng.get_engine() is custom
