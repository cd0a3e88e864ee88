from enum import Enum, IntEnum


class CoerciveEnum(Enum):
    "An enumeration that provides a helper to coerce strings into enumeration members."

    @classmethod
    def coerce(cls, value, case_sensitive=False):
        """
        Attempt to coerce `value` into a member of this enumeration.

        If value is already a member of this enumeration it is returned unchanged.
        Otherwise, if it is a string, attempt to convert it as an enumeration value. If
        that fails, attempt to convert it (case insensitively, by upcasing) as an
        enumeration name.

        If all different conversion attempts fail, an exception is raised.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                pass
            try:
                return cls[value if case_sensitive else value.upper()]
            except KeyError:
                pass
        raise ValueError(f"{value} is not a valid {cls.__name__}")


class CoerciveIntEnum(IntEnum):
    "An integer enumeration that also accepts member names as strings."

    @classmethod
    def coerce(cls, value):
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.upper()]
            except KeyError:
                pass
            if value.isdigit():
                value = int(value)
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value)
        raise ValueError(f"{value} is not a valid {cls.__name__}")


class ShadingType(CoerciveIntEnum):
    "cf. section 8.7.4.5 'Shading Types' of the PDF 1.7 spec"

    AXIAL = 2
    "Color blends along a line between two points"

    RADIAL = 3
    "Color blends between two circles"

    @property
    def coords_count(self) -> int:
        return 4 if self is ShadingType.AXIAL else 6


class ColorSpace(CoerciveEnum):
    "Device color spaces a gradient can be painted in"

    DEVICEGRAY = "DeviceGray"
    DEVICERGB = "DeviceRGB"
    DEVICECMYK = "DeviceCMYK"

    @property
    def arity(self) -> int:
        "Number of color components expected by this color space"
        return {"DeviceGray": 1, "DeviceRGB": 3, "DeviceCMYK": 4}[self.value]

    @classmethod
    def coerce(cls, value, case_sensitive=False):
        if isinstance(value, str):
            # also accept short forms like "RGB" or "gray"
            short = value.upper()
            if not short.startswith("DEVICE"):
                value = "DEVICE" + short
        return super().coerce(value, case_sensitive)
