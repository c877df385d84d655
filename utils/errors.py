"""Exceptions raised by the pixel engines."""


class UnsupportedConversionError(NotImplementedError):
    """The active converter cannot convert between the two formats."""

    def __init__(self, source_format, destination_format):
        self.source_format = source_format
        self.destination_format = destination_format
        super().__init__(
            f"Conversion from {source_format.name} to {destination_format.name} is not supported"
        )


class PaletteIndexError(IndexError):
    """A pixel index read from the stream is outside the palette."""

    def __init__(self, index: int, palette_size: int):
        self.index = index
        self.palette_size = palette_size
        super().__init__(f"Palette index {index} out of range for a palette of {palette_size} colours")


class SubImageBoundsError(ValueError):
    """A sub-image rectangle does not fit inside its source image."""

    def __init__(self, parameter: str, message: str):
        self.parameter = parameter
        super().__init__(message)
