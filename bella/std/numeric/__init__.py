from .ieee_math import IEEEMath
from bella.builtin_function import NativeFunction
from bella.environment import Environment
import math


def populate_numeric_environment() -> Environment:
    ieee = IEEEMath()
    numeric_env = Environment(name='numeric')

    numeric_env.declare('sin', NativeFunction('sin', 1, ieee.sin))
    numeric_env.declare('cos', NativeFunction('cos', 1, ieee.cos))
    numeric_env.declare('hypot', NativeFunction('hypot', 2, ieee.hypot))
    numeric_env.declare('sqrt', NativeFunction('sqrt', 1, ieee.sqrt))
    numeric_env.declare('exp', NativeFunction('exp', 1, ieee.exp))
    numeric_env.declare('ln', NativeFunction('ln', 1, ieee.ln))
    numeric_env.declare('π', math.pi)

    return numeric_env
