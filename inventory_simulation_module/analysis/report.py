import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Dict

from ..core.simulator import CycleRecord, RunResult, RunSummary

logger = logging.getLogger(__name__)


def format_cycle_record(record: CycleRecord) -> str:
    lines = [
        f"Cycle {record.cycle_index} TOTAL:",
        f"  Revenue: {record.revenue:,.2f} rub",
        f"  General loss: {record.general_loss:,.2f} rub",
        f"  Profit: {record.profit:,.2f} rub",
        f"  Mean delta: {record.mean:.3f} units",
    ]
    if record.deltas:
        lines.append(f"  Deltas: {record.deltas}")
    return "\n".join(lines)


def format_summary(summary: RunSummary) -> str:
    return "\n".join([
        f"=== SUMMARY ({summary.n_cycles} cycles) ===",
        f"Super mean revenue: {summary.super_mean_revenue:,.2f} rub",
        f"Super mean loss: {summary.super_mean_loss:,.2f} rub",
        f"Super mean profit: {summary.super_mean_profit:,.2f} rub",
        f"Super mean delta: {summary.super_mean_delta:.3f} units",
    ])


def write_report(result: RunResult, output_dir, name: str = "simulation_report") -> Dict[str, Path]:
    """
    Writes the run to output_dir as <name>_cycles.csv, <name>_summary.json and <name>.txt.

    Returns:
        dict: Paths keyed by 'cycles', 'summary' and 'text'.
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    paths = {
        'cycles': output_dir / f"{name}_cycles.csv",
        'summary': output_dir / f"{name}_summary.json",
        'text': output_dir / f"{name}.txt",
    }

    result.to_frame().to_csv(paths['cycles'], index=False)

    with paths['summary'].open('w', encoding='utf-8') as fh:
        json.dump(asdict(result.summary), fh, indent=2)

    blocks = [format_cycle_record(r) for r in result.records]
    blocks.append(format_summary(result.summary))
    paths['text'].write_text("\n\n".join(blocks) + "\n", encoding='utf-8')

    logger.info("Report written to %s", output_dir)
    return paths
