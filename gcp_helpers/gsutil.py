"""
Helpers for common Google Cloud Storage use cases.

To keep these helpers simple, credentials are resolved through the standard
chain of google-auth (application default credentials), the same chain used
by the google-cloud-storage SDK.
"""

import logging
from contextlib import closing
from dataclasses import dataclass, field
from typing import Callable, Optional, Tuple

import google.auth
from google.cloud import storage

from gcp_helpers import gsurl
from gcp_helpers.exceptions import InvalidURLError, ReadError, URLParseError

READ_ONLY_SCOPE = "https://www.googleapis.com/auth/devstorage.read_only"

logger = logging.getLogger(__name__)


@dataclass
class ReadSettings:
    project: Optional[str] = field(
        default=None,
        metadata={
            "help": "Google Cloud project used for quota and billing, "
            "defaults to the project of the ambient credentials",
        },
    )
    timeout: Optional[float] = field(
        default=60.0,
        metadata={
            "help": "Timeout in seconds applied to each HTTP request made to Cloud "
            "Storage (connect and each socket read), not to the whole read; "
            "None waits forever",
        },
    )
    scopes: Tuple[str, ...] = field(
        default=(READ_ONLY_SCOPE,),
        metadata={"help": "OAuth scopes requested for the storage client"},
    )


def new_client(settings: ReadSettings) -> storage.Client:
    """Return a storage client authenticated with application default credentials."""
    credentials, project = google.auth.default(scopes=list(settings.scopes))
    project = settings.project or project
    logger.debug("creating storage client for project %s", project)
    return storage.Client(project=project, credentials=credentials)


def read_file(
    url: str,
    settings: Optional[ReadSettings] = None,
    *,
    client_factory: Callable[[ReadSettings], storage.Client] = new_client,
) -> bytes:
    """
    Read the contents of a file located in Google Cloud Storage.

    Callers should only load objects of a known size, the whole object is
    held in memory.

    Args:
        url (str): the Cloud Storage url, "gs://the-bucket-name/path/to/file.ext".
        settings (ReadSettings): client settings, defaults to ReadSettings().
        client_factory (callable): builds the storage client from settings.

    Returns:
        bytes: the contents of the object.

    Raises:
        InvalidURLError: if url is not a valid Cloud Storage url.
        ReadError: if the client cannot be created or the object cannot be read,
            including when a request exceeds settings.timeout.
    """
    if settings is None:
        settings = ReadSettings()

    try:
        ref = gsurl.parse(url)
    except URLParseError as e:
        raise InvalidURLError(url, e) from e

    # a non-positive timeout never reaches the network
    if settings.timeout is not None and settings.timeout <= 0:
        err = TimeoutError(f"timeout of {settings.timeout}s already exceeded")
        raise ReadError(url, err) from err

    try:
        with closing(client_factory(settings)) as client:
            blob = client.bucket(ref.bucket).blob(ref.object_name)
            with blob.open("rb", retry=None, timeout=settings.timeout) as reader:
                data = reader.read()
    except Exception as e:
        raise ReadError(url, e) from e

    logger.debug("read %d bytes from %s", len(data), ref)
    return data
