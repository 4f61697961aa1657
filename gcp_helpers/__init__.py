from gcp_helpers import bqurl, gsurl, gsutil
from gcp_helpers.bqurl import TableRef
from gcp_helpers.exceptions import (
    BlankURLError,
    FieldValidationError,
    GCPHelpersError,
    InvalidSchemeError,
    InvalidURLError,
    MalformedURLError,
    MissingBucketError,
    MissingObjectError,
    ReadError,
    URLParseError,
)
from gcp_helpers.gsurl import ObjectRef
from gcp_helpers.gsutil import ReadSettings, read_file

__all__ = [
    "bqurl",
    "gsurl",
    "gsutil",
    "TableRef",
    "ObjectRef",
    "ReadSettings",
    "read_file",
    "GCPHelpersError",
    "URLParseError",
    "BlankURLError",
    "FieldValidationError",
    "MalformedURLError",
    "InvalidSchemeError",
    "MissingBucketError",
    "MissingObjectError",
    "InvalidURLError",
    "ReadError",
]
