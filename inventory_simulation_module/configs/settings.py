# Production / Inventory Simulation Defaults
# These only seed SimulationParameters; the simulation core never reads them.

# Storage
START_STORAGE = 0  # Units on hand at the start of every cycle
MAX_STORAGE = 1000  # Warehouse capacity, units

# Production
POWER = 120.0  # Mean units produced per period
FACTOR = 2.0  # Half-width of the uniform production noise, 0 < FACTOR < POWER

# Market
MEAN_SALES = 100.0  # Mean units demanded per period
SIGMA_SALES = 1.0  # Demand volatility
MEAN_PRICE = 100.0  # Mean market price per unit, rubles
SIGMA_PRICE = 1.0  # Price volatility

# Financials
STORAGE_COST = 10.0  # Holding cost per unsold unit per period
SHORTAGE_COST = 100.0  # Production cost of a unit rejected by the warehouse
# Unmet demand is priced at the current market price, not at SHORTAGE_COST.

# Simulation
PERIOD_LEN = 10  # Periods per cycle
N_CYCLES = 100
RANDOM_SEED = 42
