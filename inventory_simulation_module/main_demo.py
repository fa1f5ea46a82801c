import argparse
import logging
import sys

from inventory_simulation_module.configs import settings
from inventory_simulation_module.configs.loader import load_parameters
from inventory_simulation_module.core.exceptions import InvalidParameter
from inventory_simulation_module.core.simulator import Simulator
from inventory_simulation_module.analysis.cost_calculator import calculate_summary
from inventory_simulation_module.analysis.report import format_summary, write_report


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Monte Carlo simulation of a production / inventory process')
    parser.add_argument('--config', type=str, default=None, help='JSON file with SimulationParameters fields')
    parser.add_argument('--cycles', type=int, default=settings.N_CYCLES, help='Number of independent cycles')
    parser.add_argument('--seed', type=int, default=settings.RANDOM_SEED, help='Random seed')
    parser.add_argument('--workers', type=int, default=1, help='Cycles simulated concurrently')
    parser.add_argument('--report-dir', type=str, default='', help='Directory for CSV/JSON/text report (empty: none)')
    parser.add_argument('--report-name', type=str, default='simulation_report', help='Base filename of the report')
    parser.add_argument('--progress', action='store_true', help='Show a progress bar')
    parser.add_argument('--verbose', action='store_true', help='Log every period (DEBUG)')
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    print("=== Production / Inventory Simulation ===")

    # 1. Setup Parameters
    try:
        params = load_parameters(args.config)
        sim = Simulator(params, seed=args.seed)
        # 2. Run Cycles
        result = sim.run(args.cycles, progress=args.progress, workers=args.workers)
    except InvalidParameter as e:
        print(f"Error: invalid configuration: {e}")
        return 2

    print(f"Capacity: {params.max_storage} units, start: {params.start_storage} units")
    print(f"Production: {params.power} +/- {params.factor} per period, {params.period_len} periods per cycle")

    # 3. Per-cycle table
    df_records = result.to_frame()
    print("\n=== CYCLES ===")
    print(df_records.to_string(index=False))

    # 4. Summary
    print()
    print(format_summary(result.summary))

    stats = calculate_summary(df_records)
    print(f"Profit 95% CI: [{stats['Profit CI Low']:,.2f}, {stats['Profit CI High']:,.2f}]")
    print(f"Shortage cycles: {stats['Shortage Cycle Rate']:.2%}")

    if args.report_dir:
        paths = write_report(result, args.report_dir, name=args.report_name)
        print("\nReport files:")
        for kind, path in paths.items():
            print(f"  {kind}: {path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
