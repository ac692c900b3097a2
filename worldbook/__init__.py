"""Convert region/location notes into world book JSON"""

from .parser import parse, ParseError

__version__ = "0.1.0"

__all__ = ["parse", "ParseError", "__version__"]
