"""Schema validation on top of fetched documents.

Validation is delegated to jsonschema; this package only wires the fetching
store into it and reports issues in a flat form.
"""

from .validation import (
    SchemaIssue,
    load_instance,
    validate_document,
)
