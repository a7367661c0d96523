from .dumps import dumps
from .loads import load, loads
