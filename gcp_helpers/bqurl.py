import string
from dataclasses import dataclass

from gcp_helpers.exceptions import BlankURLError, FieldValidationError, URLParseError

PROJECT_ID_CHARS = frozenset(string.ascii_lowercase + string.digits + "-")
DATASET_ID_CHARS = frozenset(string.ascii_letters + string.digits + "_")
TABLE_ID_CHARS = DATASET_ID_CHARS


@dataclass(frozen=True)
class TableRef:
    """
    The information needed to identify the location of a BigQuery table.

    Only table_id is required, an empty project_id or dataset_id means that
    part was not supplied.
    """

    # Google Cloud project id: 6 to 30 lowercase letters, digits or hyphens,
    # starting with a letter and not ending with a hyphen.
    project_id: str = ""
    # BigQuery dataset id: up to 1024 letters, digits or underscores.
    dataset_id: str = ""
    # BigQuery table id: 1 to 1024 letters, digits or underscores.
    table_id: str = ""

    def __str__(self) -> str:
        url = self.table_id
        if self.dataset_id:
            url = f"{self.dataset_id}.{url}"
        if self.project_id:
            url = f"{self.project_id}:{url}"
        return url


def parse(url: str) -> TableRef:
    """
    Parse a BigQuery url string

    with format: "[project-id:][dataset-id.]table-id"

    Args:
        url (str): the BigQuery url string.

    Returns:
        TableRef: the validated project, dataset and table ids.

    Raises:
        BlankURLError: if url is empty.
        FieldValidationError: if one of the ids breaks its rules.
    """
    if not url:
        raise BlankURLError()

    project_id, sep, rest = url.partition(":")
    if not sep:
        project_id, rest = "", url
    dataset_id, sep, table_id = rest.partition(".")
    if not sep:
        dataset_id, table_id = "", rest

    validate_project_id(project_id)
    validate_dataset_id(dataset_id)
    validate_table_id(table_id)

    return TableRef(project_id=project_id, dataset_id=dataset_id, table_id=table_id)


def is_valid(url: str) -> bool:
    """Return whether the given string is a valid BigQuery url."""
    try:
        parse(url)
    except URLParseError:
        return False
    return True


def validate_project_id(project_id: str):
    """
    Validate a project id, an empty project id is valid since it is optional.

    Rules:
        - Must be 6 to 30 characters.
        - Must start with a lowercase letter.
        - Must not end with a hyphen.
        - Must only contain lowercase letters, digits, or hyphens.
    """
    if not project_id:
        return
    if len(project_id) < 6:
        raise FieldValidationError(
            "project_id", "too_short", "project_id must be at least 6 characters"
        )
    if len(project_id) > 30:
        raise FieldValidationError(
            "project_id", "too_long", "project_id must be no more than 30 characters"
        )
    if project_id[0] not in string.ascii_lowercase:
        raise FieldValidationError(
            "project_id", "bad_start", "project_id must start with a lowercase letter"
        )
    if project_id.endswith("-"):
        raise FieldValidationError(
            "project_id", "bad_end", "project_id must not end with a hyphen"
        )
    if not PROJECT_ID_CHARS.issuperset(project_id):
        raise FieldValidationError(
            "project_id",
            "bad_character",
            "project_id may only contain lowercase letters, digits, or hyphens",
        )


def validate_dataset_id(dataset_id: str):
    """Validate a dataset id, an empty dataset id is valid since it is optional."""
    if not dataset_id:
        return
    _validate_id("dataset_id", dataset_id, DATASET_ID_CHARS)


def validate_table_id(table_id: str):
    """Validate a table id, it must be between 1 and 1024 characters."""
    if not table_id:
        raise FieldValidationError(
            "table_id", "too_short", "table_id must be at least 1 character"
        )
    _validate_id("table_id", table_id, TABLE_ID_CHARS)


def _validate_id(field: str, value: str, allowed: frozenset):
    if len(value) > 1024:
        raise FieldValidationError(
            field, "too_long", f"{field} must be no more than 1024 characters"
        )
    if not allowed.issuperset(value):
        raise FieldValidationError(
            field,
            "bad_character",
            f"{field} may only contain lowercase letters, uppercase letters, "
            "digits, or underscores",
        )
