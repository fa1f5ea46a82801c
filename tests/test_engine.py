import pytest

from inventory_simulation_module.core.engine import step, step_detailed
from inventory_simulation_module.core.random_source import NumpyRandomSource
from inventory_simulation_module.core.state import InventoryState

from conftest import make_params


def test_step_draw_order_and_rounding(params, scripted):
    # price 100.4, demand round(100.2) = 100, production round(120 + 0) = 120
    rng = scripted([(0.4, 0.2, 0.5)])
    state = InventoryState(storage=0)

    result = step_detailed(state, params, rng)

    assert result.price == pytest.approx(100.4)
    assert result.demand == 100
    assert result.production == 120
    assert result.admitted == 120
    assert result.rejected == 0
    assert result.fulfilled == 100
    assert state.storage == 20
    # Imbalance is taken on storage left after sales.
    assert result.delta == 20 - 100
    assert result.revenue == pytest.approx(100 * 100.4)
    assert result.loss == pytest.approx(80 * 100.4)


def test_step_returns_delta_revenue_loss(params, scripted):
    rng = scripted([(0.0, 0.0, 0.5)])
    delta, revenue, loss = step(InventoryState(storage=0), params, rng)
    assert delta == -80
    assert revenue == pytest.approx(10000.0)
    assert loss == pytest.approx(8000.0)


def test_capacity_clipping_charges_rejected_units(params, scripted):
    rng = scripted([(0.0, 0.0, 0.5)])
    state = InventoryState(storage=950)

    result = step_detailed(state, params, rng)

    assert result.admitted == 50
    assert result.rejected == 70
    assert result.rejection_cost == pytest.approx(70 * 100.0)
    assert result.storage_end == 900
    assert result.delta == 800
    assert result.imbalance_cost == pytest.approx(800 * 10.0)
    assert result.loss == pytest.approx(7000.0 + 8000.0)


def test_exact_fit_is_admitted(params, scripted):
    rng = scripted([(0.0, 0.0, 0.5)])
    state = InventoryState(storage=880)
    result = step_detailed(state, params, rng)
    assert result.rejected == 0
    assert result.rejection_cost == 0.0
    assert result.storage_end == 1000 - 100


def test_shortage_sells_everything_on_hand(scripted):
    params = make_params(power=10.0, factor=1.0)
    rng = scripted([(1.0, 0.0, 0.5)])
    state = InventoryState(storage=5)

    result = step_detailed(state, params, rng)

    assert result.production == 10
    assert result.fulfilled == 15
    assert state.storage == 0
    assert result.delta == -100
    assert result.revenue == pytest.approx(15 * 101.0)
    assert result.loss == pytest.approx(100 * 101.0)


def test_zero_delta_costs_nothing(params, scripted):
    rng = scripted([(0.0, 0.0, 0.5)])
    state = InventoryState(storage=80)
    result = step_detailed(state, params, rng)
    assert result.delta == 0
    assert result.loss == 0.0


def test_negative_demand_draw_is_floored(params, scripted):
    rng = scripted([(0.0, -200.0, 0.5)])
    state = InventoryState(storage=0)
    result = step_detailed(state, params, rng)
    assert result.demand == 0
    assert result.fulfilled == 0
    assert result.revenue == 0.0
    assert result.delta == 120
    assert result.loss == pytest.approx(120 * 10.0)


def test_production_noise_bounds(params, scripted):
    low = step_detailed(InventoryState(), params, scripted([(0.0, 0.0, 0.0)]))
    high = step_detailed(InventoryState(), params, scripted([(0.0, 0.0, 0.99)]))
    assert low.production == 118
    assert high.production == 122


def test_storage_stays_within_bounds():
    params = make_params(max_storage=150, power=60.0, factor=50.0, mean_sales=55.0, sigma_sales=40.0)
    rng = NumpyRandomSource(seed=11)
    state = InventoryState(storage=0)
    for _ in range(2000):
        assert 0 <= state.storage <= params.max_storage
        result = step_detailed(state, params, rng)
        assert 0 <= state.storage <= params.max_storage
        assert result.loss >= 0
        assert result.production >= 0
        assert result.demand >= 0
