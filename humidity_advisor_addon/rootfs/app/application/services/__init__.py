"""Application services for humidity advice.

These services orchestrate domain logic with infrastructure adapters
to fulfill use cases.
"""

from .humidity_application_service import HumidityApplicationService

__all__ = [
    "HumidityApplicationService",
]
