"""
pdfgradients: emit the PDF objects of axial & radial gradients
(interpolation functions, stitching function, shading & shading pattern).
"""

from .enums import ColorSpace, ShadingType
from .errors import (
    AllocationOrderViolation,
    ColorSpaceArityMismatch,
    GradientAlreadyRegistered,
    GradientException,
    GradientSpecError,
    InsufficientStops,
    NonMonotonicOffsets,
)
from .output import (
    GradientEntry,
    GradientRegistry,
    ObjectIdAllocator,
    ObjectStore,
    ShadingPatternEmitter,
)
from .pattern import (
    FunctionChain,
    Pattern,
    SegmentFunction,
    Shading,
    StitchingFunction,
    compile_functions,
)
from .schemas import ColorStop, GradientSpec

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # enums:
    "ColorSpace",
    "ShadingType",
    # input models:
    "ColorStop",
    "GradientSpec",
    # PDF objects:
    "FunctionChain",
    "Pattern",
    "SegmentFunction",
    "Shading",
    "StitchingFunction",
    "compile_functions",
    # document side:
    "GradientEntry",
    "GradientRegistry",
    "ObjectIdAllocator",
    "ObjectStore",
    "ShadingPatternEmitter",
    # errors:
    "AllocationOrderViolation",
    "ColorSpaceArityMismatch",
    "GradientAlreadyRegistered",
    "GradientException",
    "GradientSpecError",
    "InsufficientStops",
    "NonMonotonicOffsets",
]
