# -*- coding: utf-8 -*-
try:  # Python >= 3.8
    from importlib.metadata import PackageNotFoundError, version
except ModuleNotFoundError:  # pragma: no cover - for Python < 3.8
    from importlib_metadata import PackageNotFoundError, version


try:
    __version__ = version("sphregion")
except PackageNotFoundError:  # pragma: no cover - handled when package not installed
    __version__ = "unknown"

from sphregion.errors import RegionError, InvalidArgument, ExpressionError
from sphregion.sampling import linspace, meshgrid
from sphregion.region import RegionBounds, Surface, build, build_region
from sphregion.inputs import ParsedInput, parse_input

__all__ = [
    "__version__",
    "RegionError",
    "InvalidArgument",
    "ExpressionError",
    "linspace",
    "meshgrid",
    "RegionBounds",
    "Surface",
    "build",
    "build_region",
    "ParsedInput",
    "parse_input",
]
