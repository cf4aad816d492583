# sweeps/rotation.py
import datetime as dt, logging, pathlib
import numpy as np, pandas as pd
import config
from geometry.angle import Angle
from geometry.axis import AXES
from geometry.errors import InvalidArgumentError
from geometry.vector import Vector

logger = logging.getLogger(__name__)

ROTATIONS = {
    "x": lambda v, a, axis, pivot: v.rotate_x(a, pivot),
    "y": lambda v, a, axis, pivot: v.rotate_y(a, pivot),
    "z": lambda v, a, axis, pivot: v.rotate_z(a, pivot),
    "yaw": lambda v, a, axis, pivot: v.yaw(a, axis),
    "pitch": lambda v, a, axis, pivot: v.pitch(a, axis),
    "roll": lambda v, a, axis, pivot: v.roll(a, axis),
}

def sweep_rotation(vector, op="z", start_deg=0.0, stop_deg=360.0, step_deg=15.0,
                   axis=None, pivot=None):
    """
    Rotate `vector` through [start_deg, stop_deg] (stop included) and tabulate the result.
    op: one of x, y, z (fixed axis, optional pivot) or yaw, pitch, roll (axis-relative)
    Returns DataFrame with angle_deg, x, y, z, magnitude.
    """
    if op not in ROTATIONS:
        raise InvalidArgumentError(f"rotation must be one of {', '.join(ROTATIONS)}, got {op!r}")
    if step_deg <= 0:
        raise InvalidArgumentError(f"step must be positive, got {step_deg}")
    axis = axis if axis is not None else AXES["y-up"]
    rotate = ROTATIONS[op]

    rows = []
    for deg in np.arange(start_deg, stop_deg + 1e-9, step_deg):
        r = rotate(vector, Angle.from_degrees(deg), axis, pivot)
        rows.append((float(deg), r.x, r.y, r.z, r.magnitude()))
    logger.debug("swept %d angles for %s", len(rows), op)
    return pd.DataFrame(rows, columns=["angle_deg", "x", "y", "z", "magnitude"])

def save_sweep(df, stem="sweep_rotation", outdir=None):
    outdir = pathlib.Path(outdir) if outdir is not None else config.OUTDIR
    outdir.mkdir(parents=True, exist_ok=True)
    stamp = dt.datetime.now().strftime("%Y%m%d_%H%M%S")
    csv = outdir / f"{stem}_{stamp}.csv"
    df.to_csv(csv, index=False)
    logger.info("Saved sweep: %s", csv.resolve())
    return csv

def plot_sweep(df, png, title="Rotation sweep"):
    import matplotlib; matplotlib.use("Agg"); import matplotlib.pyplot as plt
    fig, ax = plt.subplots()
    for col in ("x", "y", "z"):
        ax.plot(df["angle_deg"], df[col], label=col)
    ax.set_xlabel("Angle (deg)"); ax.set_ylabel("Component"); ax.grid(True, ls=":")
    ax.set_title(title); ax.legend()
    fig.tight_layout(); fig.savefig(png, dpi=150); plt.close(fig)
    logger.info("Saved plot: %s", pathlib.Path(png).resolve())
    return png

if __name__ == "__main__":
    import argparse
    from main import configure_logging
    ap = argparse.ArgumentParser()
    ap.add_argument("--vector", type=float, nargs=3, default=[1.0, 0.0, 0.0])
    ap.add_argument("--op", choices=sorted(ROTATIONS), default="z")
    ap.add_argument("--start", type=float, default=0.0)
    ap.add_argument("--stop", type=float, default=360.0)
    ap.add_argument("--step", type=float, default=15.0)
    ap.add_argument("--axis", choices=sorted(AXES), default="y-up")
    ap.add_argument("--pivot", type=float, nargs=2, default=None)
    ap.add_argument("--plot", action="store_true")
    args = ap.parse_args()
    configure_logging()

    df = sweep_rotation(Vector(args.vector), args.op, args.start, args.stop, args.step,
                        axis=AXES[args.axis], pivot=args.pivot)
    csv = save_sweep(df, stem=f"sweep_{args.op}")
    print("Saved sweep:", csv.resolve())
    if args.plot:
        png = csv.with_suffix(".png")
        plot_sweep(df, png, title=f"Rotation {args.op} of {Vector(args.vector):m}")
        print("Saved plot:", png.resolve())
