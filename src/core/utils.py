# core/utils.py
import math
import random
from core.vector import Vector3

def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    """
    return v - n * 2 * v.dot(n)

def safe_inverse(x: float) -> float:
    """
    1/x with IEEE semantics: a zero component yields a signed infinity
    instead of raising.
    """
    if x == 0:
        return math.copysign(math.inf, x)
    return 1.0 / x

def random_color(rng: random.Random) -> Vector3:
    """
    Uniform random RGB triple in [0, 1) per channel, drawn r, g, b in order.
    """
    r = rng.random()
    g = rng.random()
    b = rng.random()
    return Vector3(r, g, b)
