from .cost_calculator import calculate_summary
from .report import format_cycle_record, format_summary, write_report

__all__ = [
    'calculate_summary',
    'format_cycle_record',
    'format_summary',
    'write_report',
]
