"""Derive OpenAPI schemas from Python type annotations."""

import logging

logging.getLogger("openapi_type_schema").addHandler(logging.NullHandler())
