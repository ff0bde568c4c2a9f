"""
Failures that stop the watermarking run

Every error carries the exact message shown to the user.
"""


class WatermarkError(Exception):
    """Base class for all user-facing failures"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ImageNotFoundError(WatermarkError):
    def __init__(self, filename: str):
        super().__init__(f"The file {filename} doesn't exist.")


class InvalidFormatError(WatermarkError):
    pass


class SizeMismatchError(WatermarkError):
    def __init__(self):
        super().__init__("The watermark's dimensions are larger.")


class InvalidInputError(WatermarkError):
    pass


class OutOfRangeError(WatermarkError):
    pass


class InvalidModeError(WatermarkError):
    def __init__(self):
        super().__init__("The position method input is invalid.")


class UnsupportedExtensionError(WatermarkError):
    def __init__(self):
        super().__init__('The output file extension isn\'t "jpg" or "png".')
