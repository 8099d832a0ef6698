# daizy/api/__init__.py
# Created: 2026-10-19 10:12:41
# Author: Daizy

"""
Client for the Daizy organisation/project REST API.
"""

from .client import (
    APIClient,
    ClientConfig,
    Option,
    RequestMethod,
    with_base_url,
    with_base_path,
    with_timeout
)

from .errors import (
    APIError,
    RequestError,
    DecodeError,
    ResponseError,
    FieldError
)

from .models import (
    Project,
    ProjectListResponse,
    CreateProjectRequest,
    UpdateProjectRequest
)

__all__ = [
    'APIClient',
    'ClientConfig',
    'Option',
    'RequestMethod',
    'with_base_url',
    'with_base_path',
    'with_timeout',
    'APIError',
    'RequestError',
    'DecodeError',
    'ResponseError',
    'FieldError',
    'Project',
    'ProjectListResponse',
    'CreateProjectRequest',
    'UpdateProjectRequest'
]
