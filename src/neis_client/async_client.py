"""
Async NEIS client.

Same surface as NeisClient, with every dataset method returning an
awaitable. Independent calls may run concurrently over the one shared
transport; pages within a call are still fetched in order.
"""

from __future__ import annotations
import logging
from typing import Optional, Union

from .client import ResourceMethods, _build_paginator, _resolve_config
from .config import ClientConfig
from .pagination import afetch_all
from .resources import Resource
from .transport.aio import AiohttpTransport
from .transport.base import AsyncTransport
from .types import QueryParams


class AsyncNeisClient(ResourceMethods):
    """
    Async NEIS client.

    Example:
        ```python
        async with AsyncNeisClient(api_key) as client:
            schools, meals = await asyncio.gather(
                client.school_info(SchoolInfoParams.by_school_code("7010959")),
                client.meal_service(MealServiceParams.for_school("B10", "7010959")),
            )
        ```
    """

    def __init__(self, config: Union[str, ClientConfig], transport: Optional[AsyncTransport] = None):
        self.config = _resolve_config(config)

        self.logger = logging.getLogger(__name__)
        if self.config.debug:
            logging.getLogger("neis_client").setLevel(logging.DEBUG)

        self._owns_transport = transport is None
        self.transport = transport or AiohttpTransport(
            timeout=self.config.timeout,
            user_agent=self.config.user_agent,
        )

    async def request(
        self,
        resource: Union[Resource, str],
        params: Optional[QueryParams] = None,
        page_size: Optional[int] = None,
    ) -> list:
        """Async counterpart of NeisClient.request()."""
        paginator = _build_paginator(self.config, resource, params, page_size)
        items = await afetch_all(self.transport, paginator)
        self.logger.debug(
            f"{paginator.resource.tag}: {len(items)} rows in {paginator.requests} requests"
        )
        return items

    async def close(self) -> None:
        """Close the transport if owned by this client."""
        if self._owns_transport:
            await self.transport.close()

    async def __aenter__(self) -> AsyncNeisClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
