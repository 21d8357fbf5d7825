"""Fuel catalog client implementation.

``FuelClient`` owns the in-memory catalog snapshot and drives the cache
synchronization cycle:

1. :meth:`should_refresh` applies the staleness policy to the cache file's
   modification time.
2. :meth:`refresh` pages through ``{url}models?page={n}`` from page 1 until
   the first transport failure, decode failure or empty page, accumulating
   records. A failing page ends pagination without discarding the pages
   already fetched; that is also how the end of the catalog is detected.
3. A non-empty result replaces the held snapshot in one assignment and is
   optionally written to the cache file.
4. The query helpers project whichever snapshot is currently held.

Concurrency
-----------
One in-flight refresh per instance is assumed; there is no internal locking.
Readers of ``models`` see the old snapshot until the refresh completes.
Instances (including ``with_token`` copies) that share a cache file race on
writes and the last writer wins.
"""

from __future__ import annotations

import asyncio
import copy
import logging
from datetime import datetime, timedelta, timezone
from pathlib import Path
from time import perf_counter
from typing import Dict, List, Optional, Union

from ...config import get_client_config
from ...config.defaults import FUEL_FIRST_PAGE, FUEL_MODELS_ENDPOINT, FUEL_TOKEN_HEADER
from .. import cache, query
from ..errors import ErrorCode, FuelError, wrap_exception
from ..http import HttpxTransport
from ..interfaces import ProgressSink, Transport
from ..logging import LogContext, get_logger, log_event
from ..models import FuelModel, RefreshResult, decode_catalog

_logger = get_logger("fuel.client")


class FuelClient:
    """Client for the Fuel model catalog with a local JSON cache.

    Attributes:
        url: Service base URL, always ending in ``/``.
        cache_path: Cache file location, or ``None`` when no platform cache
            directory could be resolved and none was configured.
        token: Optional value for the ``Private-token`` request header.
        models: Currently held snapshot, ``None`` until loaded or fetched.
    """

    def __init__(
        self,
        url: Optional[str] = None,
        cache_path: Optional[Union[str, Path]] = None,
        token: Optional[str] = None,
        transport: Optional[Transport] = None,
        load_cache: bool = True,
    ) -> None:
        """Initialize the client.

        Args:
            url: Base URL override; defaults to the configured service URL.
            cache_path: Cache file override; defaults to the configured path
                or the platform default location.
            token: Private token override; defaults to ``FUEL_TOKEN``.
            transport: Injected transport; defaults to :class:`HttpxTransport`.
            load_cache: When True, initialise ``models`` from the cache file.
        """
        cfg = get_client_config(
            {"url": url, "token": token, "cache_path": str(cache_path) if cache_path else None}
        )
        self.url: str = cfg["url"]
        self.token: Optional[str] = cfg.get("token")
        self.cache_path: Optional[Path] = (
            Path(cfg["cache_path"]) if cfg.get("cache_path") else cache.resolve_default_location()
        )
        self._transport: Transport = transport or HttpxTransport(timeout=cfg["http_timeout_seconds"])
        self.models: Optional[List[FuelModel]] = cache.load(self.cache_path) if load_cache else None

    def with_token(self, token: str) -> "FuelClient":
        """Return a copy of this client sending ``token`` as ``Private-token``."""
        clone = copy.copy(self)
        clone.token = token
        return clone

    # Staleness
    def last_updated(self) -> Optional[datetime]:
        """Return the cache file's modification time, or ``None`` if there is none."""
        return cache.last_modified(self.cache_path)

    def should_refresh(self, threshold: Optional[timedelta] = None) -> bool:
        """Decide whether the catalog should be re-fetched.

        Without cache metadata a refresh is always due. With metadata and no
        ``threshold`` the existing cache is trusted however old it is.
        Otherwise a refresh is due when the cache is older than ``threshold``.
        """
        last = self.last_updated()
        if last is None:
            return True
        if threshold is None:
            return False
        age = datetime.now(timezone.utc) - last
        # A cache stamped in the future is never stale.
        if age < timedelta(0):
            return False
        return age > threshold

    # Fetching
    def _page_url(self, page: int) -> str:
        return f"{self.url}{FUEL_MODELS_ENDPOINT}?page={page}"

    def _headers(self) -> Dict[str, str]:
        return {FUEL_TOKEN_HEADER: self.token} if self.token else {}

    def _emit(self, progress: Optional[ProgressSink], model: FuelModel) -> None:
        """Offer one record to the progress sink, ignoring any failure."""
        if progress is None:
            return
        try:
            progress(model)
        except Exception as e:  # noqa: BLE001 - sink failures never affect the fetch
            log_event(_logger, "progress.sink_error", level=logging.DEBUG, error=repr(e))

    async def refresh(self, persist: bool = True, progress: Optional[ProgressSink] = None) -> RefreshResult:
        """Re-fetch the whole catalog starting at page 1.

        Args:
            persist: When True, write a successfully fetched snapshot to
                ``cache_path``. A failed write is reported on the result and
                does not undo the in-memory update.
            progress: Optional callback receiving each record in order.

        Returns:
            A :class:`RefreshResult`. ``result.models`` is ``None`` when no
            record was fetched, in which case the held snapshot is unchanged.
        """
        t0 = perf_counter()
        ctx = LogContext(base_url=self.url, cache_path=str(self.cache_path) if self.cache_path else None)
        log_event(_logger, "refresh.start", ctx, token=bool(self.token))

        accumulated: List[FuelModel] = []
        headers = self._headers()
        page = FUEL_FIRST_PAGE
        pages_fetched = 0
        stop_error: Optional[FuelError] = None
        while True:
            ctx.page = page
            url = self._page_url(page)
            try:
                body = await self._transport.get(url, headers)
            except Exception as e:  # noqa: BLE001 - any transport failure ends pagination
                stop_reason = ErrorCode.TRANSPORT
                stop_error = wrap_exception(e, url=url, page=page, code=ErrorCode.TRANSPORT)
                break
            try:
                fetched = decode_catalog(body, url=url, page=page)
            except FuelError as e:
                stop_reason = ErrorCode.DECODE
                stop_error = e
                break
            if not fetched:
                stop_reason = ErrorCode.EXHAUSTED
                break
            for model in fetched:
                self._emit(progress, model)
                accumulated.append(model)
            pages_fetched += 1
            log_event(_logger, "refresh.page", ctx, level=logging.DEBUG, count=len(fetched))
            page += 1

        log_event(
            _logger,
            "refresh.stop",
            ctx,
            stop_reason=stop_reason.value,
            error=stop_error.message if stop_error else None,
        )

        if not accumulated:
            log_event(_logger, "refresh.empty", ctx, level=logging.WARNING, error_code=ErrorCode.EMPTY_RESULT.value)
            return RefreshResult(
                models=None,
                pages_fetched=pages_fetched,
                stop_reason=stop_reason,
                stop_error=stop_error,
                error=ErrorCode.EMPTY_RESULT,
                duration_ms=(perf_counter() - t0) * 1000.0,
            )

        self.models = accumulated
        result = RefreshResult(
            models=accumulated,
            pages_fetched=pages_fetched,
            stop_reason=stop_reason,
            stop_error=stop_error,
        )
        if persist:
            self._persist_into(result)
        result.duration_ms = (perf_counter() - t0) * 1000.0
        log_event(_logger, "refresh.done", ctx, **result.to_dict())
        return result

    def _persist_into(self, result: RefreshResult) -> None:
        """Write the fetched snapshot and record the outcome on ``result``."""
        if self.cache_path is None:
            result.persisted = False
            result.persist_error = FuelError(
                code=ErrorCode.PERSISTENCE, message="no cache location could be resolved"
            )
            return
        try:
            cache.persist(self.cache_path, result.models or [])
        except FuelError as e:
            result.persisted = False
            result.persist_error = e
            return
        result.persisted = True

    def blocking_refresh(self, persist: bool = True, progress: Optional[ProgressSink] = None) -> RefreshResult:
        """Run :meth:`refresh` to completion on the calling thread.

        Raises:
            RuntimeError: When called from a thread with a running event loop;
                ``await refresh()`` there instead.
        """
        return asyncio.run(self.refresh(persist=persist, progress=progress))

    # Queries
    def _snapshot(self, models: Optional[List[FuelModel]]) -> Optional[List[FuelModel]]:
        return models if models is not None else self.models

    def models_by_owner(self, owner: str, models: Optional[List[FuelModel]] = None) -> Optional[List[FuelModel]]:
        """Filter ``models`` (or the held snapshot) by exact owner."""
        snap = self._snapshot(models)
        return None if snap is None else query.by_owner(snap, owner)

    def models_by_private(self, private: bool, models: Optional[List[FuelModel]] = None) -> Optional[List[FuelModel]]:
        """Filter ``models`` (or the held snapshot) by the ``private`` flag."""
        snap = self._snapshot(models)
        return None if snap is None else query.by_private(snap, private)

    def models_by_tag(self, tag: str, models: Optional[List[FuelModel]] = None) -> Optional[List[FuelModel]]:
        """Filter ``models`` (or the held snapshot) by tag membership."""
        snap = self._snapshot(models)
        return None if snap is None else query.by_tag(snap, tag)

    def get_owners(self, models: Optional[List[FuelModel]] = None) -> Optional[List[str]]:
        """Return distinct owners of ``models`` (or the held snapshot)."""
        snap = self._snapshot(models)
        return None if snap is None else query.distinct_owners(snap)

    def get_tags(self, models: Optional[List[FuelModel]] = None) -> Optional[List[str]]:
        """Return distinct tags of ``models`` (or the held snapshot)."""
        snap = self._snapshot(models)
        return None if snap is None else query.distinct_tags(snap)


__all__ = ["FuelClient"]
