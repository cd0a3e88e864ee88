"""
Input models describing a gradient, validated with pydantic.

Only the shape of each field is checked here (ranges, number of coordinates).
The relations between color stops (count, ordering, arity) are checked when the
gradient functions are compiled, cf. `pdfgradients.pattern.compile_functions`.
"""

from typing import Any, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .config import get_settings
from .enums import ColorSpace, ShadingType


class ColorStop(BaseModel):
    offset: float = Field(ge=0, le=1)
    color: tuple[float, ...]
    # interpolation exponent of the segment ending at this stop
    exponent: float = Field(default=1, gt=0)

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    @field_validator("color", mode="before")
    @classmethod
    def _single_component(cls, value: Any) -> Any:
        if isinstance(value, (int, float)):
            return (value,)
        return value


def _default_extend() -> tuple[bool, bool]:
    extend = get_settings().default_extend
    return (extend, extend)


class GradientSpec(BaseModel):
    kind: ShadingType
    # axial: x0 y0 x1 y1 - radial: x0 y0 r0 x1 y1 r1
    coords: tuple[float, ...]
    stops: tuple[ColorStop, ...]
    color_space: Optional[ColorSpace] = None
    background: Optional[tuple[float, ...]] = None
    antialias: bool = False
    extend: tuple[bool, bool] = Field(default_factory=_default_extend)
    matrix: Optional[tuple[float, float, float, float, float, float]] = None

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    @field_validator("kind", mode="before")
    @classmethod
    def _coerce_kind(cls, value: Any) -> ShadingType:
        return ShadingType.coerce(value)

    @field_validator("color_space", mode="before")
    @classmethod
    def _coerce_color_space(cls, value: Any) -> Optional[ColorSpace]:
        if value is None:
            return None
        return ColorSpace.coerce(value)

    @model_validator(mode="after")
    def _check_coords(self) -> "GradientSpec":
        if len(self.coords) != self.kind.coords_count:
            raise ValueError(
                f"{self.kind.name.lower()} gradients need {self.kind.coords_count}"
                f" coordinates, got {len(self.coords)}"
            )
        return self

    @property
    def resolved_color_space(self) -> ColorSpace:
        "The declared color space, or the configured default one"
        if self.color_space is not None:
            return self.color_space
        return ColorSpace.coerce(get_settings().default_color_space)

    @classmethod
    def axial(
        cls,
        x0: float,
        y0: float,
        x1: float,
        y1: float,
        stops: Sequence[ColorStop | dict[str, Any]],
        **kwargs: Any,
    ) -> "GradientSpec":
        """
        A gradient blending colors along the line going from (x0, y0) to (x1, y1).

        Args:
            x0, y0 (float): starting point, in user space units
            x1, y1 (float): ending point, in user space units
            stops (list): the color stops, as ColorStop instances or dicts
            **kwargs: any other GradientSpec field (color_space, background, antialias, extend, matrix)
        """
        return cls(kind=ShadingType.AXIAL, coords=(x0, y0, x1, y1), stops=stops, **kwargs)

    @classmethod
    def radial(
        cls,
        x0: float,
        y0: float,
        r0: float,
        x1: float,
        y1: float,
        r1: float,
        stops: Sequence[ColorStop | dict[str, Any]],
        **kwargs: Any,
    ) -> "GradientSpec":
        """
        A gradient blending colors from a start circle to an end circle.

        Args:
            x0, y0, r0 (float): center & radius of the start circle, in user space units
            x1, y1, r1 (float): center & radius of the end circle, in user space units
            stops (list): the color stops, as ColorStop instances or dicts
            **kwargs: any other GradientSpec field (color_space, background, antialias, extend, matrix)
        """
        return cls(
            kind=ShadingType.RADIAL,
            coords=(x0, y0, r0, x1, y1, r1),
            stops=stops,
            **kwargs,
        )
