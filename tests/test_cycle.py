import itertools

import pytest

from inventory_simulation_module.core.cycle import run_cycle
from inventory_simulation_module.core.exceptions import ComputationDegenerate
from inventory_simulation_module.core.random_source import NumpyRandomSource
from inventory_simulation_module.core.state import CycleOutput, InventoryState

from conftest import make_params


PRICE_Z = [0.3, -0.2, 0.1, 0.0, -0.4, 0.25, -0.1, 0.35, -0.3, 0.05]


def test_scripted_cycle_end_to_end(params, scripted):
    rng = scripted([(z, 0.1, 0.5) for z in PRICE_Z])

    out = run_cycle(params, rng)

    assert len(out.deltas) == 10
    first = out.periods[0]
    # Storage right after the first admission.
    assert first.storage_start + first.admitted == min(first.production, 1000)
    assert first.storage_start + first.admitted == 120

    assert out.revenue == pytest.approx(sum(p.fulfilled * p.price for p in out.periods))
    assert out.revenue == pytest.approx(100 * sum(100.0 + z for z in PRICE_Z))

    # 20 units carried over each period, measured against demand of 100.
    assert out.deltas == [20 * k - 100 for k in range(1, 11)]
    assert out.mean == pytest.approx(10.0)
    assert rng.remaining == (0, 0)


def test_cycle_mean_matches_deltas(params):
    out = run_cycle(params, NumpyRandomSource(seed=9))
    assert len(out.deltas) == params.period_len
    assert out.mean == pytest.approx(sum(out.deltas) / params.period_len)


def test_general_loss_is_non_decreasing():
    params = make_params(period_len=200, max_storage=300, power=100.0, factor=60.0, sigma_sales=30.0)
    out = run_cycle(params, NumpyRandomSource(seed=4))
    running = list(itertools.accumulate(p.loss for p in out.periods))
    assert all(b >= a for a, b in zip(running, running[1:]))
    assert out.general_loss == pytest.approx(running[-1])


def test_cycle_resets_storage_regardless_of_prior_state(params):
    state = InventoryState(storage=777, production=5, price=3.0, sales_demand=9)
    state.reset(params.start_storage)
    state.reset(params.start_storage)
    assert state == InventoryState(storage=params.start_storage)

    leftover = InventoryState(storage=999)
    out = run_cycle(params, NumpyRandomSource(seed=2), state=leftover)
    assert out.periods[0].storage_start == params.start_storage


def test_consecutive_cycles_are_independent(params, scripted):
    periods = [(0.0, 0.0, 0.5)] * 10
    rng = scripted(periods + periods)
    first = run_cycle(params, rng)
    second = run_cycle(params, rng)
    assert first.deltas == second.deltas
    assert first.revenue == pytest.approx(second.revenue)


def test_saturation_when_production_exceeds_remaining_capacity():
    params = make_params(start_storage=0, max_storage=100, power=500.0, factor=1.0, mean_sales=10.0)
    out = run_cycle(params, NumpyRandomSource(seed=8))
    for p in out.periods:
        # Warehouse is full after every admission, then sold down by demand.
        assert p.storage_start + p.admitted == params.max_storage
        assert p.storage_end == params.max_storage - p.fulfilled


def test_mean_over_no_periods_is_degenerate():
    with pytest.raises(ComputationDegenerate):
        CycleOutput().compute_mean()
