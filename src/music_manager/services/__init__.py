"""Catalog read and write services."""

from music_manager.services.base import (
    BaseService,
    ConstraintViolationError,
    InvalidPageError,
    ServiceError,
)
from music_manager.services.read import DataReadService, get_read_service
from music_manager.services.write import DataWriteService, get_write_service

__all__ = [
    "BaseService",
    "ConstraintViolationError",
    "InvalidPageError",
    "ServiceError",
    "DataReadService",
    "get_read_service",
    "DataWriteService",
    "get_write_service",
]
