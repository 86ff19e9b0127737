"""File enumerations."""

from enum import IntEnum

_BY_PREFIX = (
    ("image/", "IMAGE"),
    ("video/", "VIDEO"),
    ("audio/", "AUDIO"),
    ("text/", "TEXT"),
)

_BY_CONTENT_TYPE = {
    "application/pdf": "DOCUMENT",
    "application/msword": "DOCUMENT",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": "DOCUMENT",
    "application/vnd.ms-excel": "SPREADSHEET",
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet": "SPREADSHEET",
    "text/csv": "SPREADSHEET",
    "application/vnd.ms-powerpoint": "PRESENTATION",
    "application/vnd.openxmlformats-officedocument.presentationml.presentation": "PRESENTATION",
    "application/zip": "ARCHIVE",
    "application/x-7z-compressed": "ARCHIVE",
    "application/x-tar": "ARCHIVE",
    "application/gzip": "ARCHIVE",
}


class FileType(IntEnum):
    DOCUMENT = 1
    IMAGE = 2
    VIDEO = 3
    AUDIO = 4
    ARCHIVE = 5
    SPREADSHEET = 6
    PRESENTATION = 7
    TEXT = 8
    OTHER = 99

    @classmethod
    def from_content_type(cls, content_type: str) -> "FileType":
        """Classify a MIME type.

        Examples:
            >>> FileType.from_content_type("image/png")
            <FileType.IMAGE: 2>
            >>> FileType.from_content_type("text/csv")
            <FileType.SPREADSHEET: 6>
        """
        normalised = (content_type or "").split(";")[0].strip().lower()
        if normalised in _BY_CONTENT_TYPE:
            return cls[_BY_CONTENT_TYPE[normalised]]
        for prefix, name in _BY_PREFIX:
            if normalised.startswith(prefix):
                return cls[name]
        return cls.OTHER
