import math
import os
import pathlib
import sys


# === Numeric Constants ===
DEFAULT_TOLERANCE = math.ulp(0.0)   # smallest positive subnormal double
HASH_MODULUS = 2**31 - 1            # Int32 max, keeps hashes in 32-bit range
MAX_ROUND_DIGITS = 15
FLOAT_MAX = sys.float_info.max

# === Formatting ===
DEFAULT_NUMBER_FORMAT = ".15g"      # 15 significant digits, no trailing zeros
UNIT_VECTOR = "Unit vector composing of "
OTHER_VECTOR = "Vector composing of  "       # two spaces
MAGNITUDE = " of magnitude "

# === Error Messages ===
THREE_COMPONENTS = "Array must contain exactly three components, (x,y,z)"
NORMALIZE_0 = "Can not normalize a vector when its magnitude is zero"
INTERPOLATION_RANGE = "Control parameter must be a value between 0 & 1"
NON_VECTOR_COMPARISON = "Cannot compare a Vector to a non-Vector"
ARGUMENT_TYPE = "The argument provided is a type of "
ARGUMENT_VALUE = "The argument provided has a value of "
ROUND_DIGITS = f"Rounding digits must be between 0 and {MAX_ROUND_DIGITS}"
PIVOT_PAIR = "Pivot must contain exactly two offsets"

# === Logging ===
LOG_LEVEL = os.environ.get("VECTOR3_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# === Output ===
OUTDIR = pathlib.Path("out")
