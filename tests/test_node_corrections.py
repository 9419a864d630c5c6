"""
Unit tests for the node_corrections subpackage.

Tests cover:
- IHO Annex A fundamentals at a reference instant
- Schureman fundamentals on fixed astronomical inputs
- Recursive composition of compound corrections
- Strategy lookup
"""
import math

import pandas as pd
import pytest

SAMPLE_TIME = '2019-10-04T10:15:40.010Z'


def _astro_from_values(**values):
    """AstroData with the given argument values (all others 0)."""
    from tide_predictor.astronomy import AstroArgument, AstroData
    fields = (
        'tau', 's', 'h', 'p', 'N', 'pp', 'ninety',
        'omega', 'i', 'I', 'xi', 'nu', 'nup', 'nupp', 'P',
    )
    return AstroData(
        time=pd.Timestamp('2000-01-01', tz='UTC'),
        **{f: AstroArgument(values.get(f, 0.0), None) for f in fields},
    )


@pytest.fixture
def sample_astro():
    from tide_predictor.astronomy import astro
    return astro(SAMPLE_TIME)


@pytest.fixture
def registry():
    from tide_predictor.constituents import default_registry
    return default_registry()


# -----------------------------------------------------------------------
# IHO tests
# -----------------------------------------------------------------------

class TestIHO:
    """Tests for iho.py formulas."""

    def test_m2_reference(self, sample_astro):
        """M2 f and u at the reference instant."""
        from tide_predictor.node_corrections import iho_strategy
        m2 = iho_strategy.get('M2', sample_astro)
        assert m2.f == pytest.approx(1.00886892008, abs=1e-6)
        assert m2.u == pytest.approx(-2.085704074, abs=1e-5)

    def test_m3_is_m2_to_the_1_5(self, sample_astro):
        """M3 f is f(M2)**1.5 with its own u."""
        from tide_predictor.node_corrections import iho_strategy
        m2 = iho_strategy.get('M2', sample_astro)
        m3 = iho_strategy.get('M3', sample_astro)
        assert m3.f == pytest.approx(math.sqrt(m2.f) ** 3, rel=1e-10)
        assert m3.f == pytest.approx(1.01333283332, abs=1e-6)
        assert m3.u == pytest.approx(-3.128556111, abs=1e-5)

    def test_m1_variants(self, sample_astro):
        """M1 uses the M1C formula; M1A and M1B differ from it."""
        from tide_predictor.node_corrections import iho_strategy
        m1 = iho_strategy.get('M1', sample_astro)
        m1c = iho_strategy.get('M1C', sample_astro)
        assert m1 == m1c
        assert iho_strategy.get('M1A', sample_astro).f != pytest.approx(m1.f, abs=1e-5)
        assert iho_strategy.get('M1B', sample_astro).f != pytest.approx(m1.f, abs=1e-5)

    def test_all_fundamentals_finite(self, sample_astro):
        """Every IHO fundamental gives f > 0 and finite u."""
        from tide_predictor.node_corrections import IHO_FUNDAMENTALS, iho_strategy
        for name in IHO_FUNDAMENTALS:
            corr = iho_strategy.get(name, sample_astro)
            assert corr.f > 0, name
            assert math.isfinite(corr.u), name

    def test_from_sin_cos(self):
        """f sin u / f cos u pairs convert to magnitude and angle."""
        from tide_predictor.node_corrections import from_sin_cos
        corr = from_sin_cos(0.0, 1.0)
        assert corr.f == pytest.approx(1.0)
        assert corr.u == pytest.approx(0.0)
        corr = from_sin_cos(1.0, 1.0)
        assert corr.f == pytest.approx(math.sqrt(2.0))
        assert corr.u == pytest.approx(45.0)


# -----------------------------------------------------------------------
# Schureman tests
# -----------------------------------------------------------------------

class TestSchureman:
    """Tests for schureman.py formulas."""

    @pytest.fixture
    def items(self):
        return _astro_from_values(
            i=5, I=6, omega=3, nu=4, nup=4, nupp=2, P=14, xi=4,
        )

    @pytest.mark.parametrize('name, f, u', [
        ('Mm', 0.999051998091, 0.0),
        ('Mf', 4.00426673883, -8.0),
        ('O1', 2.00076050158, 4.0),
        ('J1', 2.0119685329, -4.0),
        ('OO1', 8.01402871709, -12.0),
        ('M2', 0.999694287563, 0.0),
        ('K1', 1.23843964182, -4.0),
        ('L2', 0.98517860327, -0.449812364499),
        ('K2', 1.09775430048, -4.0),
        ('M1', 3.90313810168, 7.09154172301),
        ('M3', 0.999541466395, 0.0),
    ])
    def test_fundamental(self, items, name, f, u):
        """Schureman f and u on fixed inputs."""
        from tide_predictor.node_corrections import schureman_strategy
        corr = schureman_strategy.get(name, items)
        assert corr.f == pytest.approx(f, abs=1e-4)
        assert corr.u == pytest.approx(u, abs=1e-4)

    def test_all_fundamentals_finite(self, sample_astro):
        """Every Schureman fundamental gives f > 0 and finite u."""
        from tide_predictor.node_corrections import (
            SCHUREMAN_FUNDAMENTALS,
            schureman_strategy,
        )
        for name in SCHUREMAN_FUNDAMENTALS:
            corr = schureman_strategy.get(name, sample_astro)
            assert corr.f > 0, name
            assert math.isfinite(corr.u), name

    def test_close_to_iho(self, sample_astro):
        """Both strategies agree closely on M2 at a real instant."""
        from tide_predictor.node_corrections import iho_strategy, schureman_strategy
        iho = iho_strategy.get('M2', sample_astro)
        schureman = schureman_strategy.get('M2', sample_astro)
        assert schureman.f == pytest.approx(iho.f, abs=5e-3)
        assert schureman.u == pytest.approx(iho.u, abs=0.2)


# -----------------------------------------------------------------------
# Composition tests
# -----------------------------------------------------------------------

class TestComposition:
    """Tests for Strategy.compute over the member graph."""

    @pytest.fixture(params=['iho', 'schureman'])
    def strategy(self, request):
        from tide_predictor.node_corrections import resolve_nodal_strategy
        return resolve_nodal_strategy(request.param)

    def test_direct_member(self, strategy, registry, sample_astro):
        """N2 takes the M2 correction."""
        n2 = strategy.compute(registry['N2'], sample_astro)
        m2 = strategy.compute(registry['M2'], sample_astro)
        assert n2.f == pytest.approx(m2.f, rel=1e-12)
        assert n2.u == pytest.approx(m2.u, abs=1e-12)

    def test_ms4_equals_m2(self, strategy, registry, sample_astro):
        """S2 contributes unity, so MS4 carries the M2 correction."""
        ms4 = strategy.compute(registry['MS4'], sample_astro)
        m2 = strategy.compute(registry['M2'], sample_astro)
        assert ms4.f == pytest.approx(m2.f, rel=1e-12)
        assert ms4.u == pytest.approx(m2.u, abs=1e-12)

    def test_mn4_squares_m2(self, strategy, registry, sample_astro):
        """MN4 = M2 + N2: f multiplies, u adds."""
        mn4 = strategy.compute(registry['MN4'], sample_astro)
        m2 = strategy.compute(registry['M2'], sample_astro)
        assert mn4.f == pytest.approx(m2.f ** 2, rel=1e-12)
        assert mn4.u == pytest.approx(2 * m2.u, abs=1e-12)

    def test_negative_factor(self, strategy, registry, sample_astro):
        """2SM2 = 2 S2 - M2: f still multiplies, u is negated."""
        c = strategy.compute(registry['2SM2'], sample_astro)
        m2 = strategy.compute(registry['M2'], sample_astro)
        assert c.f == pytest.approx(m2.f, rel=1e-12)
        assert c.u == pytest.approx(-m2.u, abs=1e-12)

    def test_msf_code(self, strategy, registry, sample_astro):
        """MSf (code b) is M2 with negated u."""
        c = strategy.compute(registry['MSf'], sample_astro)
        m2 = strategy.compute(registry['M2'], sample_astro)
        assert c.f == pytest.approx(m2.f, rel=1e-12)
        assert c.u == pytest.approx(-m2.u, abs=1e-12)

    def test_2mn2_code(self, strategy, registry, sample_astro):
        """2MN2 (code p) = 2 M2 - N2: f = f(M2)**3, u = u(M2)."""
        c = strategy.compute(registry['2MN2'], sample_astro)
        m2 = strategy.compute(registry['M2'], sample_astro)
        assert c.f == pytest.approx(m2.f ** 3, rel=1e-12)
        assert c.u == pytest.approx(m2.u, abs=1e-12)

    def test_overtide(self, strategy, registry, sample_astro):
        """M6 = 3 M2."""
        c = strategy.compute(registry['M6'], sample_astro)
        m2 = strategy.compute(registry['M2'], sample_astro)
        assert c.f == pytest.approx(m2.f ** 3, rel=1e-12)
        assert c.u == pytest.approx(3 * m2.u, abs=1e-12)

    def test_triple_n2(self, strategy, registry, sample_astro):
        """3N2 = 3 N2, whose correction is that of M2."""
        c = strategy.compute(registry['3N2'], sample_astro)
        m2 = strategy.compute(registry['M2'], sample_astro)
        assert c.f == pytest.approx(m2.f ** 3, rel=1e-12)
        assert c.u == pytest.approx(3 * m2.u, abs=1e-12)

    def test_unity_for_solar(self, strategy, registry, sample_astro):
        """Purely solar constituents are not corrected."""
        from tide_predictor.node_corrections import UNITY
        for name in ('Z0', 'Sa', 'S2', 'P1'):
            assert strategy.compute(registry[name], sample_astro) == UNITY

    def test_unknown_fundamental_is_unity(self, strategy, sample_astro):
        """Names absent from the table give unity."""
        from tide_predictor.node_corrections import UNITY
        assert strategy.get('XYZ9', sample_astro) == UNITY

    def test_memberless_constituent(self, strategy, sample_astro):
        """A constituent with no members and no formula gets unity."""
        from tide_predictor.constituents import define_constituent
        from tide_predictor.node_corrections import UNITY
        c = define_constituent('XX9', 1.0, None, 'z')
        assert strategy.compute(c, sample_astro) == UNITY


# -----------------------------------------------------------------------
# Strategy lookup tests
# -----------------------------------------------------------------------

class TestResolveStrategy:
    """Tests for resolve_nodal_strategy."""

    def test_default_is_iho(self):
        """No name selects IHO."""
        from tide_predictor.node_corrections import iho_strategy, resolve_nodal_strategy
        assert resolve_nodal_strategy() is iho_strategy
        assert resolve_nodal_strategy('') is iho_strategy

    def test_case_insensitive(self):
        """Names are matched case-insensitively."""
        from tide_predictor.node_corrections import (
            resolve_nodal_strategy,
            schureman_strategy,
        )
        assert resolve_nodal_strategy('Schureman') is schureman_strategy
        assert resolve_nodal_strategy('IHO').name == 'iho'

    def test_instance_passthrough(self):
        """A Strategy instance is returned unchanged."""
        from tide_predictor.node_corrections import Strategy, resolve_nodal_strategy
        custom = Strategy('custom', {})
        assert resolve_nodal_strategy(custom) is custom

    def test_unknown_name(self):
        """Unknown names raise UnknownStrategyError."""
        from tide_predictor.errors import UnknownStrategyError
        from tide_predictor.node_corrections import resolve_nodal_strategy
        with pytest.raises(UnknownStrategyError,
                           match='Unknown nodeCorrections strategy: foo'):
            resolve_nodal_strategy('foo')
        with pytest.raises(ValueError):
            resolve_nodal_strategy('foo')
