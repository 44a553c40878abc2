# exporters.py
import json
from dataclasses import asdict
from typing import Sequence

import numpy as np
import pandas as pd

from comparison import compare
from simulation import ScenarioResult, SimulationInputs


def trajectory_frame(result: ScenarioResult) -> pd.DataFrame:
    return pd.DataFrame({
        "age": [p.age for p in result.trajectory],
        "nominal": [p.nominal for p in result.trajectory],
        "real": [p.real for p in result.trajectory],
    })


def chart_frame(results: Sequence[ScenarioResult]) -> pd.DataFrame:
    """
    Wide frame for a multi-line chart: one row per age of the first scenario,
    columns '<name>' (nominal) and '<name>_real'. Ages a scenario never
    reaches (e.g. an earlier retirement) are NaN.
    """
    if not results:
        return pd.DataFrame(columns=["age"])
    ages = [p.age for p in results[0].trajectory]
    out = pd.DataFrame({"age": ages})
    for r in results:
        traj = trajectory_frame(r).set_index("age").reindex(ages)
        out[r.name] = traj["nominal"].to_numpy()
        out[f"{r.name}_real"] = traj["real"].to_numpy()
    return out


def export_trajectories(results: Sequence[ScenarioResult]) -> tuple[str, bytes]:
    frames = [trajectory_frame(r).assign(scenario=r.name) for r in results]
    if frames:
        df = pd.concat(frames, ignore_index=True)[["scenario", "age", "nominal", "real"]]
    else:
        df = pd.DataFrame(columns=["scenario", "age", "nominal", "real"])
    return "scenario_trajectories.csv", df.to_csv(index=False).encode()


def export_summary(results: Sequence[ScenarioResult]) -> tuple[str, bytes]:
    df = compare(results).drop(columns=["color"])
    return "scenario_summary.csv", df.to_csv(index=False).encode()


def _json_default(o):
    # numpy scalars sneak in from slider widgets
    if isinstance(o, np.generic):
        return o.item()
    raise TypeError(f"Object of type {o.__class__.__name__} is not JSON serializable")


def export_inputs(inputs: SimulationInputs) -> tuple[str, bytes]:
    blob = json.dumps(asdict(inputs), indent=2, default=_json_default)
    return "inputs.json", blob.encode()
