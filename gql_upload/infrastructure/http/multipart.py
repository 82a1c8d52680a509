"""
GraphQL Multipart Request Body.

Builds the form for the GraphQL multipart request convention:
https://github.com/jaydenseric/graphql-multipart-request-spec

Parts, in order:
1. operations: JSON payload with every file replaced by null
2. map: {"1": [paths of file 1], "2": [...], ...}
3. one part per file, named by its map index
"""

import json
import logging
from typing import Any, Callable, Optional

from gql_upload.domain.interfaces.link import FormDataFileAppender
from gql_upload.domain.models.extraction import Extraction
from gql_upload.infrastructure.http.form_data import FormData, form_data_append_file
from gql_upload.infrastructure.http.utils import serialize_fetch_parameter

logger = logging.getLogger(__name__)


def build_multipart_form(
    extraction: Extraction,
    append_file: Optional[FormDataFileAppender] = None,
    form_data_class: Callable[[], Any] = FormData,
) -> Any:
    """
    Build a multipart form from an extraction.

    Args:
        extraction: Result of extract_files over the request body
        append_file: Appends one file to the form; defaults to form_data_append_file
        form_data_class: Form factory; must provide append(name, value, ...)

    Returns:
        The populated form
    """
    append_file = append_file or form_data_append_file
    form = form_data_class()

    form.append("operations", serialize_fetch_parameter(extraction.clone, "Payload"))
    form.append("map", json.dumps(extraction.to_map()))

    for index, file in enumerate(extraction.files.keys(), start=1):
        append_file(form, str(index), file)

    logger.debug(f"Built multipart form with {len(extraction.files)} file part(s)")
    return form


__all__ = ["build_multipart_form"]
