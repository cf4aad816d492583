# main.py
import argparse, logging, sys
import config
from geometry.angle import Angle
from geometry.axis import AXES
from geometry.errors import InvalidArgumentError, VectorError
from geometry.formatting import format_number
from geometry.rounding import MidpointRounding
from geometry.vector import Vector

logger = logging.getLogger(__name__)

# -------------------- helpers --------------------

def configure_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else getattr(logging, config.LOG_LEVEL, logging.WARNING)
    logging.basicConfig(level=level, format=config.LOG_FORMAT)

def _operand(args, name: str) -> Vector:
    values = getattr(args, name)
    if values is None:
        raise InvalidArgumentError(f"operation '{args.op}' needs --{name} X Y Z")
    return Vector(values)

def _angle(args) -> Angle:
    return Angle.from_degrees(args.angle)

def _pivot(args):
    return tuple(args.pivot) if args.pivot is not None else None

def _mode(args) -> MidpointRounding:
    return MidpointRounding.AWAY_FROM_ZERO if args.away_from_zero else MidpointRounding.TO_EVEN

# each entry: (args) -> Vector | float | bool | int | Angle | str
OPERATIONS = {
    "magnitude":        lambda a: _operand(a, "a").magnitude(),
    "normalize":        lambda a: _operand(a, "a").normalize(),
    "cross":            lambda a: _operand(a, "a").cross_product(_operand(a, "b")),
    "dot":              lambda a: _operand(a, "a").dot_product(_operand(a, "b")),
    "mixed":            lambda a: _operand(a, "a").mixed_product(_operand(a, "b"), _operand(a, "c")),
    "distance":         lambda a: _operand(a, "a").distance(_operand(a, "b")),
    "angle":            lambda a: _operand(a, "a").angle(_operand(a, "b")),
    "interpolate":      lambda a: _operand(a, "a").interpolate(_operand(a, "b"), a.t, a.extrapolate),
    "rotate-x":         lambda a: _operand(a, "a").rotate_x(_angle(a), _pivot(a)),
    "rotate-y":         lambda a: _operand(a, "a").rotate_y(_angle(a), _pivot(a)),
    "rotate-z":         lambda a: _operand(a, "a").rotate_z(_angle(a), _pivot(a)),
    "yaw":              lambda a: _operand(a, "a").yaw(_angle(a), AXES[a.axis]),
    "pitch":            lambda a: _operand(a, "a").pitch(_angle(a), AXES[a.axis]),
    "roll":             lambda a: _operand(a, "a").roll(_angle(a), AXES[a.axis]),
    "round":            lambda a: _operand(a, "a").round(a.digits, _mode(a)),
    "pow":              lambda a: _operand(a, "a").pow_components(a.power),
    "sqrt":             lambda a: _operand(a, "a").sqrt_components(),
    "sqr":              lambda a: _operand(a, "a").sqr_components(),
    "equals":           lambda a: _operand(a, "a").equals(_operand(a, "b"), a.tolerance),
    "compare":          lambda a: _operand(a, "a").compare_to(_operand(a, "b")),
    "is-unit":          lambda a: _operand(a, "a").is_unit_vector(a.tolerance or 0.0),
    "is-perpendicular": lambda a: _operand(a, "a").is_perpendicular(_operand(a, "b")),
    "is-back-face":     lambda a: _operand(a, "a").is_back_face(_operand(a, "b")),
    "format":           lambda a: _operand(a, "a").to_string(a.format),
}

def render(result, fmt: str) -> str:
    if isinstance(result, Vector):
        return result.to_string(fmt)
    if isinstance(result, Angle):
        return f"{format_number(result.degrees)} deg"
    if isinstance(result, (bool, str)):
        return str(result)
    return format_number(result)

def run(args) -> str:
    """Evaluate ``args.op`` and return the rendered result."""
    logger.info("running %s", args.op)
    result = OPERATIONS[args.op](args)
    return render(result, args.format)

# -------------------- CLI --------------------

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Evaluate a 3D vector operation.")
    p.add_argument("op", choices=sorted(OPERATIONS), help="operation to evaluate")
    p.add_argument("--a", type=float, nargs=3, metavar=("X", "Y", "Z"), required=True,
                   help="first operand")
    p.add_argument("--b", type=float, nargs=3, metavar=("X", "Y", "Z"), help="second operand")
    p.add_argument("--c", type=float, nargs=3, metavar=("X", "Y", "Z"), help="third operand")
    p.add_argument("--angle", type=float, default=0.0, help="rotation angle in degrees")
    p.add_argument("--pivot", type=float, nargs=2, metavar=("A", "B"),
                   help="offsets of the rotation line (rotate-x: y z, rotate-y: x z, rotate-z: x y)")
    p.add_argument("--axis", choices=sorted(AXES), default="y-up",
                   help="axis convention for yaw/pitch/roll")
    p.add_argument("--t", type=float, default=0.5, help="interpolation control")
    p.add_argument("--extrapolate", action="store_true",
                   help="allow interpolation control outside [0, 1]")
    p.add_argument("--tolerance", type=float, default=None, help="comparison tolerance")
    p.add_argument("--digits", type=int, default=None, help="decimals for round")
    p.add_argument("--away-from-zero", action="store_true",
                   help="round midpoints away from zero instead of to even")
    p.add_argument("--power", type=float, default=2.0, help="exponent for pow")
    p.add_argument("--format", default="m", help="vector format string (x, y, z, v, m or a number spec)")
    p.add_argument("--verbose", action="store_true", help="debug logging")
    return p

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    try:
        print(run(args))
    except (VectorError, ValueError) as e:
        logger.debug("operation %s failed", args.op, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 2
    return 0

if __name__ == "__main__":
    sys.exit(main())
