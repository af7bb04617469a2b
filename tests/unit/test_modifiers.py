"""
Unit tests for modifiers, combiners and domain warping.
"""
import numpy as np
import pytest

from pyfastnoise.fractals import Fbm, RidgedMulti
from pyfastnoise.modifiers import (
    Abs,
    Add,
    Clamp,
    Displace,
    Exponent,
    Max,
    Min,
    Multiply,
    Negate,
    Power,
    ScaleBias,
    Turbulence,
)
from pyfastnoise.noise import Constant, Perlin


class TestUnaryModifiers:
    """Test single-source modifiers."""

    @pytest.mark.unit
    def test_abs(self):
        assert Abs(Constant(-0.75)).evaluate((0.3, 0.4)) == 0.75
        assert Abs(Constant(0.5)).evaluate((0.3, 0.4, 1.0)) == 0.5

    @pytest.mark.unit
    def test_abs_of_perlin(self, random_points):
        perlin = Perlin().with_seed(3)
        module = Abs(perlin)
        for point in random_points[3][:10]:
            assert module.evaluate(point) == abs(perlin.evaluate(point))

    @pytest.mark.unit
    def test_negate_and_scale_bias(self):
        assert Negate(Constant(0.25)).evaluate((1.0, 1.0)) == -0.25
        assert ScaleBias(Constant(0.5), scale=4.0, bias=-1.0).evaluate((0.0, 0.0)) == 1.0

    @pytest.mark.unit
    def test_clamp(self):
        assert Clamp(Constant(3.0)).evaluate((0.5, 0.5)) == 1.0
        assert Clamp(Constant(-3.0), lower=-0.5, upper=0.5).evaluate((0.5, 0.5)) == -0.5
        with pytest.raises(ValueError):
            Clamp(Constant(0.0), lower=1.0, upper=0.0)

    @pytest.mark.unit
    def test_exponent(self):
        assert Exponent(Constant(1.0), exponent=3.0).evaluate((0.1, 0.2)) == 1.0
        assert Exponent(Constant(-1.0), exponent=2.0).evaluate((0.1, 0.2)) == -1.0
        assert Exponent(Constant(0.0), exponent=2.0).evaluate((0.1, 0.2)) == pytest.approx(-0.5)

    @pytest.mark.unit
    def test_source_must_be_module(self):
        with pytest.raises(TypeError):
            Abs(0.5)


class TestCombiners:
    """Test two-source combiners."""

    @pytest.mark.unit
    def test_add(self):
        assert Add(Constant(0.25), Constant(0.5)).evaluate((0.0, 0.0)) == 0.75

    @pytest.mark.unit
    def test_add_of_noise(self, random_points):
        a = Perlin().with_seed(1)
        b = RidgedMulti().with_seed(2)
        module = Add(a, b)
        for point in random_points[2][:10]:
            assert module.evaluate(point) == a.evaluate(point) + b.evaluate(point)

    @pytest.mark.unit
    def test_multiply_min_max_power(self):
        a, b = Constant(0.5), Constant(-2.0)
        point = (0.3, 0.3, 0.3, 0.3)
        assert Multiply(a, b).evaluate(point) == -1.0
        assert Min(a, b).evaluate(point) == -2.0
        assert Max(a, b).evaluate(point) == 0.5
        assert Power(a, b).evaluate(point) == 4.0

    @pytest.mark.unit
    def test_power_nan_for_negative_base(self):
        assert np.isnan(Power(Constant(-0.5), Constant(0.5)).evaluate((0.0, 0.0)))

    @pytest.mark.unit
    def test_combiners_broadcast(self):
        x = np.linspace(0.0, 1.0, 5)
        values = Add(Perlin(), Constant(1.0)).evaluate((x, 0.5))
        assert values.shape == (5,)
        np.testing.assert_array_equal(values, Perlin().evaluate((x, 0.5)) + 1.0)

    @pytest.mark.unit
    def test_sources_must_be_modules(self):
        with pytest.raises(TypeError):
            Add(Perlin(), "noise")


class TestDisplace:
    """Test explicit domain warping."""

    @pytest.mark.unit
    def test_constant_offsets(self):
        source = Perlin().with_seed(6)
        module = Displace(source, (Constant(0.5), Constant(-0.25), Constant(1.0)))
        assert module.evaluate((0.125, 0.5)) == source.evaluate((0.625, 0.25))
        assert module.evaluate((0.125, 0.5, 0.0)) == source.evaluate((0.625, 0.25, 1.0))

    @pytest.mark.unit
    def test_strength(self):
        source = Perlin()
        module = Displace(source, (Constant(0.5), Constant(0.5))).with_strength(2.0)
        assert module.evaluate((0.25, 0.25)) == source.evaluate((1.25, 1.25))

    @pytest.mark.unit
    def test_too_few_displacements_for_point(self):
        module = Displace(Perlin(), (Constant(0.0), Constant(0.0)))
        with pytest.raises(ValueError):
            module.evaluate((0.1, 0.2, 0.3))

    @pytest.mark.unit
    @pytest.mark.parametrize("count", [0, 1, 5])
    def test_displacement_count_validated(self, count):
        with pytest.raises(ValueError):
            Displace(Perlin(), tuple(Constant(0.0) for _ in range(count)))


class TestTurbulence:
    """Test fBm-driven domain warping."""

    @pytest.mark.unit
    def test_defaults(self):
        turb = Turbulence(Perlin())
        assert turb.seed == 0
        assert turb.frequency == 1.0
        assert turb.power == 1.0
        assert turb.roughness == 3
        assert turb.enable_period is False

    @pytest.mark.unit
    def test_distortion_fields(self):
        turb = Turbulence(Perlin(), seed=10, roughness=5, frequency=2.0)
        assert len(turb.distortions) == 4
        assert [d.seed for d in turb.distortions] == [10, 11, 12, 13]
        assert all(isinstance(d, Fbm) for d in turb.distortions)
        assert all(d.octaves == 5 and d.frequency == 2.0 for d in turb.distortions)

    @pytest.mark.unit
    def test_zero_power_is_identity(self, random_points):
        source = RidgedMulti().with_seed(4)
        turb = Turbulence(source).with_power(0.0)
        for dim in (2, 3, 4):
            for point in random_points[dim][:5]:
                assert turb.evaluate(point) == source.evaluate(point)

    @pytest.mark.unit
    def test_displacement_formula(self):
        source = Perlin().with_seed(2)
        turb = Turbulence(source, power=0.5)
        point = (0.3, 1.7)
        dx = turb.distortions[0].evaluate(point)
        dy = turb.distortions[1].evaluate(point)
        expected = source.evaluate((0.3 + dx * 0.5, 1.7 + dy * 0.5))
        assert turb.evaluate(point) == pytest.approx(expected, abs=1e-12)

    @pytest.mark.unit
    def test_warping_changes_output(self, random_points):
        source = Perlin()
        turb = Turbulence(source)
        differing = sum(turb.evaluate(p) != source.evaluate(p) for p in random_points[2])
        assert differing >= 0.9 * len(random_points[2])

    @pytest.mark.unit
    def test_builders(self):
        turb = Turbulence(Perlin())
        assert turb.with_seed(0) is turb
        assert turb.with_power(2.0).distortions is turb.distortions
        assert turb.with_seed(5).distortions[0].seed == 5
        assert turb.with_roughness(2).distortions[0].octaves == 2
        assert turb.with_frequency(4.0).distortions[0].frequency == 4.0
        other = Perlin().with_seed(9)
        assert turb.with_source(other).source is other

    @pytest.mark.unit
    def test_period_forwarded_to_source(self):
        turb = Turbulence(RidgedMulti()).with_period(4)
        assert turb.source.enable_period is True
        assert turb.source.period == 4
        assert all(d.enable_period for d in turb.distortions)

        plain = turb.without_period()
        assert plain.source.enable_period is False
        assert not any(d.enable_period for d in plain.distortions)

    @pytest.mark.unit
    def test_period_skipped_for_plain_source(self):
        source = Abs(Perlin())
        turb = Turbulence(source).with_period(4)
        assert turb.source is source
        assert turb.enable_period is True

    @pytest.mark.unit
    @pytest.mark.parametrize("frequency", [1.0, 2.0])
    def test_periodic_tiling(self, frequency, dyadic_points_2d, point_helper):
        turb = Turbulence(Fbm().with_seed(3), frequency=frequency).with_period(4)
        for point in dyadic_points_2d:
            value = turb.evaluate(point)
            for axis in range(2):
                shifted = turb.evaluate(point_helper.shift(point, axis, 4))
                assert shifted == pytest.approx(value, abs=1e-9)

    @pytest.mark.unit
    def test_period_converted_with_source_frequency(self):
        turb = Turbulence(Fbm().with_frequency(0.5)).with_period((4, 8))
        assert turb.source.period == (2, 4)
        assert turb.period == (4, 8)

        # Non-fractal sources sample at the raw point
        assert Turbulence(Perlin()).with_period(4).source.period == 4

    @pytest.mark.unit
    def test_low_frequency_source_tiles(self, dyadic_points_2d, point_helper):
        turb = Turbulence(Fbm().with_seed(3).with_frequency(0.5)).with_period(4)
        for point in dyadic_points_2d:
            value = turb.evaluate(point)
            for axis in range(2):
                shifted = turb.evaluate(point_helper.shift(point, axis, 4))
                assert shifted == pytest.approx(value, abs=1e-9)

    @pytest.mark.unit
    def test_with_source_keeps_period(self):
        turb = Turbulence(Perlin()).with_period(8)
        swapped = turb.with_source(Fbm().with_frequency(0.25))
        assert swapped.source.enable_period is True
        assert swapped.source.period == 2

    @pytest.mark.unit
    @pytest.mark.parametrize("roughness, expected", [(0, 1), (-4, 1), (3, 3), (100, 32)])
    def test_roughness_clamped(self, roughness, expected):
        turb = Turbulence(Fbm(), roughness=roughness)
        assert turb.roughness == expected
        assert all(d.octaves == expected for d in turb.distortions)
        assert Turbulence(Fbm()).with_roughness(roughness).roughness == expected

    @pytest.mark.unit
    def test_source_must_be_module(self):
        with pytest.raises(TypeError):
            Turbulence(None)
