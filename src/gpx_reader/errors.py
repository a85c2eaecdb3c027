"""Errors raised while mapping a GPX document."""


class GpxParseError(ValueError):
    """Base class for every failure raised by the GPX mapper."""


class UnsupportedVersionError(GpxParseError):
    def __init__(self, actual: str, expected: str = "1.1"):
        self.actual = actual
        self.expected = expected
        super().__init__(
            f"Unexpected GPX version (expected {expected}, got '{actual}')"
        )


class MalformedNumberError(GpxParseError):
    """A numeric attribute or element holds text that is not a number.

    ``field`` is a dotted location such as ``wpt.lat`` or ``trkpt.sat``.
    """

    def __init__(self, field: str, text: str):
        self.field = field
        self.text = text
        super().__init__(f"Malformed number in {field}: '{text}'")


class UnexpectedRootError(GpxParseError):
    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f"Root element must be <gpx>, got <{tag}>")
