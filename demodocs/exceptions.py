"""Exceptions raised by the documentation build surfaces."""


class DemoDocsError(Exception):
    """Base class for demodocs errors."""


class DocumentBuildError(DemoDocsError):
    """A markdown document could not be read, compiled or written."""

    def __init__(self, source_path, message):
        self.source_path = source_path
        super().__init__(f"{source_path}: {message}")
