"""Polling and batching helpers for the IoT platform E2E client."""
from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable, Iterable, Mapping, Sequence
from typing import Any, TypeVar, Union

from .const import (
    DEFAULT_CHUNK_SIZE,
    DEFAULT_RETRY_RATE,
    DEFAULT_WAIT_ERROR_MESSAGE,
    DEFAULT_WAIT_TIMEOUT,
)

_LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

Predicate = Callable[[], Union[T, Awaitable[T]]]
Transport = Callable[[Any], Awaitable[Any]]


class ConfigurationError(ValueError):
    """Raised for option or environment values that can never work."""


# --- WAIT UNTIL ----------------------------------------------------------------

async def wait_until(
    predicate: Predicate[T],
    *,
    timeout: float = DEFAULT_WAIT_TIMEOUT,
    retry_rate: float = DEFAULT_RETRY_RATE,
    error_message: str = DEFAULT_WAIT_ERROR_MESSAGE,
    ignore_errors: tuple[type[BaseException], ...] = (),
) -> T:
    """
    Evaluate `predicate` until it returns a truthy value, then return that value.

    The predicate may be sync or async. Between falsy results the loop sleeps
    `retry_rate` seconds; once `timeout` seconds have passed since the first
    evaluation, TimeoutError(error_message) is raised. A timeout <= 0 allows
    exactly one evaluation.

    Exceptions from the predicate propagate at once, unless their type is in
    `ignore_errors`, in which case the attempt counts as falsy.
    """
    if retry_rate < 0:
        raise ConfigurationError(f"retry_rate must not be negative, got {retry_rate}")

    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout
    attempt = 0

    while True:
        attempt += 1
        try:
            result = predicate()
            if inspect.isawaitable(result):
                result = await result
        except ignore_errors as err:
            _LOGGER.debug("Condition attempt %d raised %r, retrying", attempt, err)
            result = None

        if result:
            return result

        if loop.time() >= deadline:
            _LOGGER.debug("Condition not met after %d attempts (%.2fs)", attempt, timeout)
            raise TimeoutError(error_message)

        await asyncio.sleep(retry_rate)


# --- RECORD SEQUENCES ----------------------------------------------------------

def is_record_sequence(value: Any) -> bool:
    """True for an iterable of records, False for a single record (mapping, str, scalar)."""
    return isinstance(value, Iterable) and not isinstance(value, (str, bytes, bytearray, Mapping))


# --- SEND BATCHES --------------------------------------------------------------

async def send_batches(
    payload: Any,
    transport: Transport,
    *,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> Any:
    """
    Submit `payload` through `transport` in chunks of at most `chunk_size`.

    A single record (a mapping or any other non-iterable value) is sent as is
    and its failure propagates. Any other iterable is chunked in order; each
    failing chunk is logged with its contents and skipped, later chunks are
    still sent and nothing is raised. The caller's sequence is left untouched.
    """
    if chunk_size <= 0:
        raise ConfigurationError(f"chunk_size must be positive, got {chunk_size}")

    if not is_record_sequence(payload):
        return await transport(payload)

    records: Sequence[Any] = list(payload)
    total = len(records)
    for offset in range(0, total, chunk_size):
        batch = records[offset:offset + chunk_size]
        try:
            await transport(batch)
        except Exception as err:
            _LOGGER.error(
                "Failed to send batch %d-%d of %d: %s %s",
                offset, offset + len(batch) - 1, total, err, batch,
            )
        else:
            _LOGGER.debug("Sent batch %d-%d of %d", offset, offset + len(batch) - 1, total)
    return None
