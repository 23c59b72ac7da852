"""
Summary: Icon resolution and caching pipeline exports.
Why: Provide one import path for the resolver, its records and its errors.
"""

from .domain.errors import (
    IconError,
    MalformedDocumentError,
    RasterizationError,
    RendererUnavailableError,
    SourceUnreadableError,
    UnrecognizedExtensionError,
    WriteFailedError,
)
from .domain.models import CandidateSource, IconCandidate, IconKind, IconQuery, IconRecord, choose_icon
from .usecases.resolver import IconResolver

__all__ = [
    "CandidateSource",
    "IconCandidate",
    "IconError",
    "IconKind",
    "IconQuery",
    "IconRecord",
    "IconResolver",
    "MalformedDocumentError",
    "RasterizationError",
    "RendererUnavailableError",
    "SourceUnreadableError",
    "UnrecognizedExtensionError",
    "WriteFailedError",
    "choose_icon",
]
