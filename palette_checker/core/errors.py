"""Error kinds for palette-check.

Every error carries the process exit code the CLI should use for it.
Library code raises these; only palette_checker.__main__ turns them into
messages and exit statuses.
"""

EXIT_FAILURE = 1
EXIT_USAGE = 2


class PaletteCheckError(Exception):
    """Base class for all palette-check failures."""

    exit_code = EXIT_FAILURE


class UsageError(PaletteCheckError):
    """Wrong command-line arguments."""

    exit_code = EXIT_USAGE


class ColourParseError(UsageError, ValueError):
    """Marking colour string is not RRGGBB or RRGGBBAA hex."""


class ImageDecodeError(PaletteCheckError):
    """An input image could not be opened or decoded."""

    role = 'image'

    def __init__(self, path: str, reason: str = ''):
        self.path = path
        self.reason = reason
        msg = f'Cannot load {self.role} file "{path}", requires a Pillow supported image format'
        if reason:
            msg += f' ({reason})'
        super().__init__(msg)


class PaletteDecodeError(ImageDecodeError):
    role = 'palette'


class PictureDecodeError(ImageDecodeError):
    role = 'picture'


class OutputEncodeError(PaletteCheckError):
    """The filtered picture could not be written."""

    def __init__(self, path: str, reason: str = ''):
        self.path = path
        self.reason = reason
        msg = f'Cannot save picture file to "{path}"'
        if reason:
            msg += f' ({reason})'
        super().__init__(msg)
