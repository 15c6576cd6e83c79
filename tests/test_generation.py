"""Tests for GenerationSpecification construction and derivation."""

import dataclasses

import pytest

from event_catalog.domain.errors import InvalidArgumentError
from event_catalog.domain.event_specs import EventSpecs, by_start
from event_catalog.domain.specification import Specification
from event_catalog.store.generation import GenerationSpecification


class TestDefaults:
    def test_knob_defaults(self) -> None:
        spec = GenerationSpecification()
        assert spec.radius_meters == 10_000
        assert spec.count == 500
        assert spec.max_days_ago == 30
        assert spec.probability_momentary == 0.7
        assert spec.seed is None

    def test_is_a_specification(self) -> None:
        assert isinstance(GenerationSpecification(), Specification)


class TestValidation:
    @pytest.mark.parametrize(
        ("knobs", "argument"),
        [
            ({"radius_meters": 0}, "radius_meters"),
            ({"radius_meters": -1.5}, "radius_meters"),
            ({"radius_meters": float("nan")}, "radius_meters"),
            ({"count": -1}, "count"),
            ({"max_days_ago": 0}, "max_days_ago"),
            ({"max_days_ago": -3}, "max_days_ago"),
            ({"probability_momentary": -0.01}, "probability_momentary"),
            ({"probability_momentary": 1.01}, "probability_momentary"),
            ({"skip": -1}, "skip"),
            ({"take": -1}, "take"),
        ],
    )
    def test_out_of_range_fails_at_construction(self, knobs: dict, argument: str) -> None:
        with pytest.raises(InvalidArgumentError) as exc_info:
            GenerationSpecification(**knobs)
        assert exc_info.value.argument == argument

    def test_derive_validates_too(self) -> None:
        with pytest.raises(InvalidArgumentError):
            GenerationSpecification.derive(EventSpecs.NEWEST_EVENTS, count=-10)

    @pytest.mark.parametrize("p", [0.0, 1.0])
    def test_probability_bounds_inclusive(self, p: float) -> None:
        assert GenerationSpecification(probability_momentary=p).probability_momentary == p

    def test_zero_count_allowed(self) -> None:
        assert GenerationSpecification(count=0).count == 0


class TestDerive:
    def test_copies_directives_verbatim(self) -> None:
        def crit(e):
            return True

        def asc(e):
            return e.id

        base = Specification(criteria=crit, order_by=asc, order_by_descending=by_start, skip=3, take=7)
        spec = GenerationSpecification.derive(base, count=20, seed=1)
        assert spec.criteria is crit
        assert spec.order_by is asc
        assert spec.order_by_descending is by_start
        assert spec.skip == 3
        assert spec.take == 7
        assert spec.count == 20
        assert spec.seed == 1

    def test_base_untouched(self) -> None:
        base = Specification(take=5)
        GenerationSpecification.derive(base, count=1)
        assert base == Specification(take=5)
        assert type(base) is Specification

    def test_from_none(self) -> None:
        spec = GenerationSpecification.derive(None, radius_meters=100)
        assert spec.criteria is None
        assert spec.take is None
        assert spec.radius_meters == 100

    def test_keeps_knobs_of_generation_base(self) -> None:
        base = GenerationSpecification(radius_meters=250, count=9, seed=4)
        spec = GenerationSpecification.derive(base, seed=5)
        assert spec.radius_meters == 250
        assert spec.count == 9
        assert spec.seed == 5
        assert base.seed == 4

    def test_unknown_knob_rejected(self) -> None:
        with pytest.raises(TypeError):
            GenerationSpecification.derive(None, radius=5)

    def test_is_immutable(self) -> None:
        spec = GenerationSpecification()
        with pytest.raises(dataclasses.FrozenInstanceError):
            spec.count = 1
