"""Cache refresh orchestration.

The `clear_cache` command is a two-step flow: get a bearer token from XSUAA,
then ask Work Zone to invalidate the HTML5 provider cache. The CLI delegates
that sequence to `run_cache_refresh` and only reacts to the hooks, which
keeps printing out of the core logic and lets tests drive the flow with fakes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from core.domain.models import CacheClearResult, WorkZoneConfig
from core.interfaces.cache import CacheInvalidator, TokenProvider

logger = logging.getLogger(__name__)


@dataclass
class RefreshHooks:
    """Optional callbacks for UI layers (progress messages)."""

    token_requested: Callable[[], None] | None = None
    token_obtained: Callable[[], None] | None = None
    cache_clear_started: Callable[[], None] | None = None


async def run_cache_refresh(
    config: WorkZoneConfig,
    *,
    authenticator: TokenProvider,
    invalidator: CacheInvalidator,
    hooks: RefreshHooks | None = None,
) -> CacheClearResult:
    """Authenticate, then clear the cache. Errors propagate to the caller."""

    hooks = hooks or RefreshHooks()

    if hooks.token_requested:
        hooks.token_requested()
    access_token = await authenticator.get_access_token(config)
    if hooks.token_obtained:
        hooks.token_obtained()

    if hooks.cache_clear_started:
        hooks.cache_clear_started()
    result = await invalidator.clear_cache(config, access_token)

    logger.info(
        "Cache refresh finished for subaccount %s: %s",
        config.subaccount_id,
        result.status_code,
    )
    return result
