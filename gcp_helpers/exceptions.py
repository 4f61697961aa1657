class GCPHelpersError(Exception):
    """Base class for all errors raised by gcp_helpers."""


class URLParseError(GCPHelpersError, ValueError):
    """A BigQuery or Cloud Storage url string could not be parsed."""


class BlankURLError(URLParseError):
    def __init__(self):
        super().__init__("url must not be blank")


class FieldValidationError(URLParseError):
    """
    A single component of a BigQuery url broke one of its rules.

    Args:
        field (str): the offending component (project_id, dataset_id, table_id).
        rule (str): the rule that was violated (too_short, too_long, bad_start,
            bad_end, bad_character).
        message (str): human readable description of the violation.
    """

    def __init__(self, field: str, rule: str, message: str):
        super().__init__(message)
        self.field = field
        self.rule = rule


class MalformedURLError(URLParseError):
    pass


class InvalidSchemeError(URLParseError):
    def __init__(self, scheme: str):
        super().__init__(
            f"Invalid protocol {scheme!r} specified, "
            "the only protocol that is permitted is 'gs'."
        )
        self.scheme = scheme


class MissingBucketError(URLParseError):
    def __init__(self):
        super().__init__("Bucket name is required")


class MissingObjectError(URLParseError):
    def __init__(self):
        super().__init__("Object name is required")


class InvalidURLError(GCPHelpersError):
    """Raised by read_file when the Cloud Storage url is invalid."""

    def __init__(self, url: str, err: Exception):
        super().__init__(url, err)
        # the Cloud Storage url related to the error
        self.url = url
        # the underlying error detailing how the url is invalid
        self.err = err

    def __str__(self):
        return f"invalid url {self.url} {self.err}"


class ReadError(GCPHelpersError):
    """Raised by read_file when an object could not be read from Cloud Storage."""

    def __init__(self, url: str, err: Exception):
        super().__init__(url, err)
        self.url = url
        self.err = err

    def __str__(self):
        return f"unable to read file {self.url}"
