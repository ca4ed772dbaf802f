"""Domain exceptions."""


class BlogMetaError(Exception):
    """Base exception for blogmeta."""

    pass


class NotFound(BlogMetaError):
    """Requested content source was not found or is not supported."""

    pass


class ParseError(BlogMetaError):
    """A document could not be parsed into a DocumentRecord."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field


class MissingFrontMatter(ParseError):
    """No opening or no matching closing +++ delimiter."""

    def __init__(self, message: str = "Document has no +++ front matter block") -> None:
        super().__init__(message)


class InvalidFieldType(ParseError):
    """A field value does not have the expected literal shape."""

    def __init__(self, field: str | None, message: str) -> None:
        super().__init__(message, field=field)


class MalformedLine(InvalidFieldType):
    """A metadata line is not a sequence of key = value assignments."""

    def __init__(self, line_no: int, line: str) -> None:
        super().__init__(None, f"Malformed metadata on line {line_no}: {line.strip()!r}")
        self.line_no = line_no


class DuplicateField(InvalidFieldType):
    """The same key is assigned more than once."""

    def __init__(self, field: str) -> None:
        super().__init__(field, f"Field {field!r} is assigned more than once")


class InvalidDateFormat(ParseError):
    """date is present but not a YYYY-MM-DDThh:mm:ss±hh:mm timestamp."""

    def __init__(self, value: str) -> None:
        super().__init__(
            f"Invalid date {value!r}, expected YYYY-MM-DDThh:mm:ss+hh:mm",
            field="date",
        )
        self.value = value


class MissingRequiredField(ParseError):
    """A required field is absent or empty."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Missing required field: {field}", field=field)


class InvalidEncoding(ParseError):
    """Raw bytes are not valid UTF-8."""

    pass


class UnreadableDocument(ParseError):
    """A content file could not be read from its source."""

    pass
