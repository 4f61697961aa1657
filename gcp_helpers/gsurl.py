import re
from dataclasses import dataclass
from typing import Callable
from urllib.parse import SplitResult, quote, unquote, urlsplit

from gcp_helpers.exceptions import (
    InvalidSchemeError,
    MalformedURLError,
    MissingBucketError,
    MissingObjectError,
    URLParseError,
)

SCHEME = "gs"

_control_char_pattern = re.compile(r"[\x00-\x1f\x7f]")
_bad_escape_pattern = re.compile(r"%(?![0-9a-fA-F]{2})")


@dataclass(frozen=True)
class ObjectRef:
    """The information needed to locate an object in Google Cloud Storage."""

    # name of the bucket where the object is located
    bucket: str
    # name and/or path of the object in the bucket, without a leading slash
    object_name: str

    def __str__(self) -> str:
        return f"{SCHEME}://{self.bucket}/{quote(self.object_name, safe='/')}"


def split_url(url: str) -> SplitResult:
    """
    Split a url into its generic components, rejecting strings that are not
    urls at all.

    Args:
        url (str): the url string.

    Returns:
        SplitResult: the scheme, netloc, path, query and fragment of the url.

    Raises:
        ValueError: on control characters, invalid percent escapes, a missing
            scheme in front of ':' or a malformed netloc.
    """
    if _control_char_pattern.search(url):
        raise ValueError("invalid control character in url")
    if url.startswith(":"):
        raise ValueError("missing protocol scheme")
    match = _bad_escape_pattern.search(url)
    if match:
        escape = url[match.start() : match.start() + 3]
        raise ValueError(f"invalid url escape {escape!r}")
    return urlsplit(url)


def parse(
    url: str, *, url_parser: Callable[[str], SplitResult] = split_url
) -> ObjectRef:
    """
    Parse a Google Cloud Storage url string

    with format: "gs://bucket-name/path/to/the/file.ext"

    Args:
        url (str): the Cloud Storage url string.
        url_parser (callable): splits the string into generic url components,
            raising ValueError if it is not a url.

    Returns:
        ObjectRef: the bucket and object name parsed from the url.

    Raises:
        MalformedURLError: if url cannot be parsed as a url.
        InvalidSchemeError: if the scheme is not gs.
        MissingBucketError: if the url has no bucket name.
        MissingObjectError: if the url has no object name.
    """
    try:
        parsed = url_parser(url)
    except ValueError as e:
        raise MalformedURLError(f"Unable to parse url: {url}, {e}") from e

    if parsed.scheme != SCHEME:
        raise InvalidSchemeError(parsed.scheme)

    # the host drops any userinfo but keeps the port
    bucket = parsed.netloc.rpartition("@")[2]
    object_name = unquote(parsed.path).lstrip("/")
    if not bucket:
        raise MissingBucketError()
    if not object_name:
        raise MissingObjectError()

    return ObjectRef(bucket=bucket, object_name=object_name)


def is_valid(url: str) -> bool:
    """Return whether the given string is a valid Cloud Storage url."""
    try:
        parse(url)
    except URLParseError:
        return False
    return True
