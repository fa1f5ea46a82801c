import json
import logging
from pathlib import Path
from typing import Any, Dict

from . import settings
from ..core.exceptions import InvalidParameter
from ..core.params import SimulationParameters

logger = logging.getLogger(__name__)


def default_parameters() -> Dict[str, Any]:
    return {
        'start_storage': settings.START_STORAGE,
        'max_storage': settings.MAX_STORAGE,
        'period_len': settings.PERIOD_LEN,
        'power': settings.POWER,
        'factor': settings.FACTOR,
        'mean_sales': settings.MEAN_SALES,
        'sigma_sales': settings.SIGMA_SALES,
        'mean_price': settings.MEAN_PRICE,
        'sigma_price': settings.SIGMA_PRICE,
        'storage_cost_per_unit': settings.STORAGE_COST,
        'shortage_cost_per_unit': settings.SHORTAGE_COST,
    }


def load_parameters(path=None, **overrides) -> SimulationParameters:
    """
    Builds SimulationParameters from the defaults, a JSON file and keyword overrides,
    applied in that order.

    Args:
        path (str or Path, optional): JSON object mapping parameter names to values.
        **overrides: Values that win over both the defaults and the file.

    Returns:
        SimulationParameters: Validated parameters.
    """
    values = default_parameters()

    if path is not None:
        path = Path(path)
        try:
            with path.open('r', encoding='utf-8') as fh:
                data = json.load(fh)
        except FileNotFoundError as exc:
            raise InvalidParameter(f"Config file not found: {path}") from exc
        except json.JSONDecodeError as exc:
            raise InvalidParameter(f"Invalid JSON in config {path}: {exc}") from exc

        if not isinstance(data, dict):
            raise InvalidParameter(f"Config {path} must contain a JSON object")
        logger.info("Loaded %d parameter(s) from %s", len(data), path)
        values.update(data)

    values.update({k: v for k, v in overrides.items() if v is not None})
    return SimulationParameters.from_dict(values)
