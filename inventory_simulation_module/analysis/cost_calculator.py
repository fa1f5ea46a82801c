import numpy as np
import pandas as pd
from scipy.stats import norm

from ..core.exceptions import ComputationDegenerate


def calculate_summary(df_records: pd.DataFrame, confidence: float = 0.95) -> dict:
    """
    Cross-cycle statistics over the per-cycle records frame (RunResult.to_frame()).

    The profit interval is a normal approximation of the super-mean profit,
    which is reasonable for the hundreds of cycles a run usually has.
    """
    n = len(df_records)
    if n == 0:
        raise ComputationDegenerate("cannot summarize a run with no cycles")

    profit = df_records['profit']
    profit_std = float(profit.std(ddof=1)) if n > 1 else 0.0
    half_width = norm.ppf(0.5 + confidence / 2) * profit_std / np.sqrt(n)

    return {
        "Cycles": n,
        "Super Mean Revenue": df_records['revenue'].mean(),
        "Super Mean Loss": df_records['general_loss'].mean(),
        "Super Mean Profit": profit.mean(),
        "Super Mean Delta": df_records['mean'].mean(),
        "Profit Std": profit_std,
        "Profit CI Low": profit.mean() - half_width,
        "Profit CI High": profit.mean() + half_width,
        "Shortage Cycle Rate": (df_records['mean'] < 0).sum() / n,
    }
