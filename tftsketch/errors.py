# tftsketch/errors.py
"""Exceptions raised by the editor core."""


class SketchError(Exception):
    """Base class of every error raised by tftsketch."""


class BitmapError(SketchError, ValueError):
    """A bitmap C array could not be decoded."""


class ParseError(BitmapError):
    """No ``{ ... }`` delimited list of integer literals was found."""


class LengthMismatch(BitmapError):
    """The number of parsed values does not match the declared size."""

    def __init__(self, message, expected=None, found=None):
        super().__init__(message)
        self.expected = expected
        self.found = found


class UnsupportedFormat(BitmapError):
    """Bit depth (or size) the decoder does not handle."""


class NotFound(SketchError, LookupError):
    """History or selection lookup miss."""


class EditorBusy(SketchError, RuntimeError):
    """An edit was attempted while a rebuild or a drag is in progress."""
