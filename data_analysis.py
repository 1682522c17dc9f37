import argparse
import os
from pathlib import Path

import numpy as np
import pandas as pd
import matplotlib.pyplot as plt
from sklearn.linear_model import LinearRegression

INPUT_CSV = "benchmark_results.csv"
OUT_DIR = "analysis_figures"

ALGO_PALETTE = ["#455A70", "#7E546F", "#87A878", "#D94B6A", "#FFC759"]


def loglog_regression(x, y):
    """
    Fits log(y) = slope * log(x) + intercept over the strictly positive pairs.
    For a runtime that grows like n^k the slope estimates k.
    """
    points = pd.DataFrame({"n": np.asarray(x, dtype=float),
                           "t": np.asarray(y, dtype=float)})
    mask = ((points["n"] > 0) & (points["t"] > 0)).to_numpy()
    fit = {"slope": np.nan, "intercept": np.nan, "r2": np.nan, "mask": mask}
    if mask.sum() < 2:
        return fit

    logs = np.log(points[mask])
    reg = LinearRegression().fit(logs[["n"]], logs["t"])
    fit.update(slope=float(reg.coef_[0]),
               intercept=float(reg.intercept_),
               r2=float(reg.score(logs[["n"]], logs["t"])))
    return fit


def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """
    One row per (model, algorithm) with the log-log slope of mean runtime
    against n and the worst exact rate seen.
    """
    rows = []
    for (model, algo), sub in df.groupby(["model", "algorithm"], sort=True):
        sub = sub.sort_values("n")
        res = loglog_regression(sub["n"].values, sub["mean_time_s"].values)
        rows.append({
            "model": model,
            "algorithm": algo,
            "slope(log-log)": res["slope"],
            "intercept(log-log)": res["intercept"],
            "r2": res["r2"],
            "min_exact_rate": float(sub["exact_rate"].min()) if "exact_rate" in sub else np.nan,
        })
    return pd.DataFrame(rows)


def plot_model_runtime(model: str, df_model: pd.DataFrame, colors: dict, out_path: str):
    """
    Mean runtime against n on log-log axes for one graph model, one series
    per algorithm with its fitted power law dashed on top.
    """
    fig, ax = plt.subplots(figsize=(10, 6), constrained_layout=True)
    ax.set_xscale("log")
    ax.set_yscale("log")

    for algo, sub in df_model.groupby("algorithm", sort=True):
        sub = sub.sort_values("n")
        n = sub["n"].to_numpy(dtype=float)
        t = sub["mean_time_s"].to_numpy(dtype=float)
        res = loglog_regression(n, t)
        mask = res["mask"]
        ax.scatter(n[mask], t[mask], marker="o", s=40, edgecolor="k", linewidth=0.3,
                   color=colors[algo], label=algo, zorder=3)
        if not np.isnan(res["slope"]):
            fitted = np.exp(res["intercept"]) * n[mask] ** res["slope"]
            ax.plot(n[mask], fitted, linestyle="--", linewidth=2.0, color=colors[algo],
                    zorder=4, label=f"{algo} fit n^{res['slope']:.2f} R2={res['r2']:.3f}")

    ax.set_xlabel("Nodes (log scale)")
    ax.set_ylabel("Mean time (s, log scale)")
    ax.set_title(f"Time vs Nodes ({model})")
    ax.legend(frameon=True, facecolor="white", edgecolor="0.8")
    fig.savefig(out_path, dpi=150, bbox_inches="tight")
    plt.close(fig)


def main(input_csv=INPUT_CSV, out_dir=OUT_DIR):
    if not os.path.exists(input_csv):
        raise FileNotFoundError(f"Input CSV not found at '{input_csv}'.")
    df = pd.read_csv(input_csv)
    Path(out_dir).mkdir(parents=True, exist_ok=True)

    algorithms = sorted(df["algorithm"].unique())
    algo_colors = {a: ALGO_PALETTE[i % len(ALGO_PALETTE)]
                   for i, a in enumerate(algorithms)}

    for model, sub in df.groupby("model", sort=True):
        plot_model_runtime(model, sub, algo_colors,
                           os.path.join(out_dir, f"{model}_time_vs_nodes_loglog.png"))

    summary_df = summarize(df)
    summary_path = os.path.join(out_dir, "loglog_summary.csv")
    summary_df.to_csv(summary_path, index=False)

    print(summary_df.to_string(index=False))
    print(f"Outputs written to folder: {out_dir}")
    return summary_df


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Min cut runtime analysis")
    parser.add_argument("--input", type=str, default=INPUT_CSV,
                        help="Benchmark CSV written by main.py benchmark")
    parser.add_argument("--out_dir", type=str, default=OUT_DIR,
                        help="Directory for figures and summary CSV")
    args = parser.parse_args()

    main(args.input, args.out_dir)
