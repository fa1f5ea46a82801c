import pytest

from inventory_simulation_module.core.params import SimulationParameters
from inventory_simulation_module.core.random_source import ScriptedRandomSource


BASE_FIELDS = dict(
    start_storage=0,
    max_storage=1000,
    period_len=10,
    power=120.0,
    factor=2.0,
    mean_sales=100.0,
    sigma_sales=1.0,
    mean_price=100.0,
    sigma_price=1.0,
    storage_cost_per_unit=10.0,
    shortage_cost_per_unit=100.0,
)


def make_params(**overrides):
    fields = dict(BASE_FIELDS)
    fields.update(overrides)
    return SimulationParameters(**fields)


@pytest.fixture
def params():
    return make_params()


@pytest.fixture
def scripted():
    """Builds a scripted source from per-period (price_z, demand_z, production_u) triples."""
    def _build(periods):
        normals = []
        uniforms = []
        for price_z, demand_z, production_u in periods:
            normals.extend([price_z, demand_z])
            uniforms.append(production_u)
        return ScriptedRandomSource(normals=normals, uniforms=uniforms)
    return _build
