"""Shared CQRS building blocks (requests, results, handlers, dispatcher)."""

from football_network.application.common.dispatcher import (
    Dispatcher,
    DispatcherError,
    HandlerNotFoundError,
    HandlerRegistrationError,
)
from football_network.application.common.handler import RequestHandler
from football_network.application.common.pagination import PagedResult
from football_network.application.common.requests import Command, Query
from football_network.application.common.result import ErrorKind, Result
from football_network.application.common.validation import Validator

__all__ = [
    "Command",
    "Dispatcher",
    "DispatcherError",
    "ErrorKind",
    "HandlerNotFoundError",
    "HandlerRegistrationError",
    "PagedResult",
    "Query",
    "RequestHandler",
    "Result",
    "Validator",
]
