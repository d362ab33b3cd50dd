class SlidemodelError(Exception):
    pass


class ChapterFormatError(SlidemodelError):
    """Raised when a serialized chapter or slide does not match the model schema."""


class ChapterFileError(SlidemodelError):
    pass


class SettingsError(SlidemodelError):
    pass
