# configures the Cloud Storage backend used by the integration tests, either a
# real bucket or a local emulator (e.g. fake-gcs-server) via STORAGE_EMULATOR_HOST
import os
import time
import uuid
from typing import Optional

import pytest
from google.api_core.exceptions import NotFound
from google.auth.credentials import AnonymousCredentials
from google.cloud import storage

from gcp_helpers.gsutil import ReadSettings, new_client

GSUTIL_TEST_BUCKET = os.getenv("GSUTIL_TEST_BUCKET", "")
STORAGE_EMULATOR_HOST = os.getenv("STORAGE_EMULATOR_HOST", "")
EMULATOR_PROJECT = "test-project"


def emulator_client(settings: Optional[ReadSettings] = None) -> storage.Client:
    # the emulator accepts any request, so credential resolution is skipped
    return storage.Client(project=EMULATOR_PROJECT, credentials=AnonymousCredentials())


@pytest.fixture
def client_factory():
    """Client factory handed to read_file in integration tests."""
    return emulator_client if STORAGE_EMULATOR_HOST else new_client


@pytest.fixture
def test_bucket() -> str:
    if not GSUTIL_TEST_BUCKET:
        pytest.skip("to run integration tests set env var 'GSUTIL_TEST_BUCKET'")
    return GSUTIL_TEST_BUCKET


@pytest.fixture
def test_object(request, test_bucket):
    """Upload a uniquely named object and yield its url, deleting it afterwards."""
    client = emulator_client() if STORAGE_EMULATOR_HOST else storage.Client()
    if STORAGE_EMULATOR_HOST and not client.bucket(test_bucket).exists():
        client.create_bucket(test_bucket)

    path = f"{request.node.name}-{int(time.time())}-{uuid.uuid4().hex}"
    blob = client.bucket(test_bucket).blob(path)
    blob.upload_from_string(b"Hello, World")
    yield f"gs://{test_bucket}/{path}"
    try:
        blob.delete()
    except NotFound:
        pass
    finally:
        client.close()
