from .loader import default_parameters, load_parameters

__all__ = [
    'default_parameters',
    'load_parameters',
]
