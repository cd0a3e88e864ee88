"""
Handles the creation of the PDF objects making up a gradient:
interpolation & stitching functions, shading and shading pattern.

cf. sections 7.10 "Functions" and 8.7.4.5 "Shading Types" of the PDF 1.7 spec
"""

import logging
from typing import NamedTuple, Optional, Sequence

from .config import get_settings
from .enums import ColorSpace, ShadingType
from .errors import ColorSpaceArityMismatch, InsufficientStops, NonMonotonicOffsets
from .schemas import ColorStop
from .syntax import Name, PDFArray, PDFObject, create_list_string as pdf_list
from .util import Number, format_number, format_numbers

LOGGER = logging.getLogger(__name__)


class SegmentFunction(PDFObject):
    """Transition between the colors of 2 adjacent stops"""

    def __init__(
        self,
        c0: Sequence[Number],
        c1: Sequence[Number],
        exponent: Number = 1,
        precision: int = 6,
    ) -> None:
        super().__init__()
        # 0: Sampled function; 2: Exponential interpolation function; 3: Stitching function; 4: PostScript calculator function
        self.function_type = 2
        self.domain = "[0 1]"
        self.c0 = pdf_list(format_numbers(c0, precision))
        self.c1 = pdf_list(format_numbers(c1, precision))
        self.n = format_number(exponent, precision)


class StitchingFunction(PDFObject):
    """A type 3 function, stitching type 2 functions together
    and defining the bounds between each color transition.

    It is built even for a single segment, so that a shading always references
    a stitching function."""

    def __init__(self, functions: Sequence[SegmentFunction], bounds: Sequence[str]):
        super().__init__()
        self.function_type = 3
        self.domain = "[0 1]"
        # rendered as indirect references, once the functions have ids:
        self.functions = PDFArray(functions)
        self.bounds = pdf_list(bounds)
        self.encode = pdf_list("0 1" for _ in functions)


class Shading(PDFObject):
    def __init__(
        self,
        shading_type: ShadingType,
        color_space: ColorSpace,
        coords: Sequence[Number],
        function: StitchingFunction,
        extend: tuple[bool, bool] = (True, True),
        background: Optional[Sequence[Number]] = None,
        anti_alias: bool = False,
        precision: int = 6,
    ) -> None:
        super().__init__()
        self.shading_type = int(shading_type)
        self.color_space = Name(color_space.value)
        self.background = (
            pdf_list(format_numbers(background, precision))
            if background is not None
            else None
        )
        # only written when requested, as false is the default value:
        self.anti_alias = True if anti_alias else None
        self.coords = pdf_list(format_numbers(coords, precision))
        self.domain = "[0 1]"
        self.function = function
        self.extend = f'[{"true" if extend[0] else "false"} {"true" if extend[1] else "false"}]'


class Pattern(PDFObject):
    """
    Represents a PDF Pattern object.

    Only "shading patterns" (pattern_type 2) are supported.
    """

    def __init__(
        self,
        shading: Shading,
        matrix: Optional[Sequence[Number]] = None,
        precision: int = 6,
    ) -> None:
        super().__init__()
        self.type = Name("Pattern")
        # 1 for a tiling pattern or type 2 for a shading pattern:
        self.pattern_type = 2
        self.shading = shading
        self.matrix = (
            pdf_list(format_numbers(matrix, precision)) if matrix is not None else None
        )


class FunctionChain(NamedTuple):
    segments: tuple[SegmentFunction, ...]
    stitching: StitchingFunction
    # color space the C0 & C1 arrays of the segments are expressed in
    color_space: ColorSpace

    def objects(self) -> list[PDFObject]:
        "All function objects, in the order their ids are allocated"
        return [*self.segments, self.stitching]


def compile_functions(
    stops: Sequence[ColorStop],
    color_space: ColorSpace | str,
    precision: Optional[int] = None,
) -> FunctionChain:
    """
    Turn an ordered list of color stops into one type 2 function per pair of
    adjacent stops, plus the type 3 function stitching them together.

    This is a pure transformation: no object id is allocated here.

    Raises:
        InsufficientStops: if there are less than 2 stops
        NonMonotonicOffsets: if offsets are not strictly increasing,
            including once formatted with the given precision
        ColorSpaceArityMismatch: if a stop color does not have as many components as the color space
    """
    if precision is None:
        precision = get_settings().real_precision
    color_space = ColorSpace.coerce(color_space)
    stops = list(stops)
    if len(stops) < 2:
        raise InsufficientStops(len(stops))
    for i in range(1, len(stops)):
        if stops[i].offset <= stops[i - 1].offset:
            raise NonMonotonicOffsets(i, stops[i - 1].offset, stops[i].offset)
    for i, stop in enumerate(stops):
        if len(stop.color) != color_space.arity:
            raise ColorSpaceArityMismatch(
                color_space.value, color_space.arity, len(stop.color), f"color stop {i}"
            )
    offsets = format_numbers((stop.offset for stop in stops), precision)
    for i in range(1, len(offsets)):
        if float(offsets[i]) <= float(offsets[i - 1]):
            raise NonMonotonicOffsets(i, float(offsets[i - 1]), float(offsets[i]))
    if stops[0].offset > 0 or stops[-1].offset < 1:
        LOGGER.warning(
            "Color stops span [%s, %s] instead of [0, 1]:"
            " the gradient will be stretched over its whole domain",
            offsets[0],
            offsets[-1],
        )
    segments = tuple(
        SegmentFunction(
            stops[i - 1].color, stops[i].color, stops[i].exponent, precision
        )
        for i in range(1, len(stops))
    )
    return FunctionChain(
        segments, StitchingFunction(segments, offsets[1:-1]), color_space
    )
