"""
NEIS Open API client.

Provides one method per dataset, all delegating to the shared paginated
fetch in neis_client.pagination.

Example:
    ```python
    from neis_client import NeisClient, ClientConfig
    from neis_client.types import MealServiceParams

    with NeisClient(ClientConfig.from_env()) as client:
        params = MealServiceParams.for_school("B10", "7031115", mlsv_from_ymd="20250101")
        meals = client.meal_service(params)
    ```
"""

from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from typing import Awaitable, List, Optional, TypeVar, Union

from .config import ClientConfig
from .pagination import Paginator, fetch_all
from .resources import Resource
from .transport.base import Transport
from .transport.http import RequestsTransport
from .types import (
    AcademyInfoItem,
    AcademyInfoParams,
    ClassInfoItem,
    ClassInfoParams,
    ClassRoomInfoItem,
    ClassRoomInfoParams,
    ElsTimetableItem,
    ElsTimetableParams,
    HisTimetableItem,
    HisTimetableParams,
    MealServiceItem,
    MealServiceParams,
    MisTimetableItem,
    MisTimetableParams,
    QueryParams,
    SchoolAflcoInfoItem,
    SchoolAflcoInfoParams,
    SchoolInfoItem,
    SchoolInfoParams,
    SchoolMajorInfoItem,
    SchoolMajorInfoParams,
    SchoolScheduleItem,
    SchoolScheduleParams,
    SpsTimetableItem,
    SpsTimetableParams,
)

T = TypeVar("T")

# Rows on the blocking client, an awaitable of rows on the async one
Rows = Union[List[T], Awaitable[List[T]]]


class ResourceMethods(ABC):
    """
    Per-dataset entry points.

    Each method hands its params to ``self.request``; on the async client
    the return value is therefore awaitable.
    """

    @abstractmethod
    def request(
        self,
        resource: Union[Resource, str],
        params: Optional[QueryParams] = None,
        page_size: Optional[int] = None,
    ) -> Rows:
        """Fetch every row of a resource matching ``params``."""

    def school_info(self, params: Optional[SchoolInfoParams] = None) -> Rows[SchoolInfoItem]:
        """학교기본정보: school basic information."""
        return self.request(Resource.SCHOOL_INFO, params)

    def class_info(self, params: ClassInfoParams) -> Rows[ClassInfoItem]:
        """학급정보: classes of a school."""
        return self.request(Resource.CLASS_INFO, params)

    def school_major_info(self, params: SchoolMajorInfoParams) -> Rows[SchoolMajorInfoItem]:
        """학교학과정보: departments."""
        return self.request(Resource.SCHOOL_MAJOR_INFO, params)

    def school_aflco_info(self, params: SchoolAflcoInfoParams) -> Rows[SchoolAflcoInfoItem]:
        """학교계열정보: tracks."""
        return self.request(Resource.SCHOOL_AFLCO_INFO, params)

    def school_schedule(self, params: SchoolScheduleParams) -> Rows[SchoolScheduleItem]:
        """학사일정: academic calendar."""
        return self.request(Resource.SCHOOL_SCHEDULE, params)

    def els_timetable(self, params: ElsTimetableParams) -> Rows[ElsTimetableItem]:
        """초등학교시간표: elementary school timetable."""
        return self.request(Resource.ELS_TIMETABLE, params)

    def mis_timetable(self, params: MisTimetableParams) -> Rows[MisTimetableItem]:
        """중학교시간표: middle school timetable."""
        return self.request(Resource.MIS_TIMETABLE, params)

    def his_timetable(self, params: HisTimetableParams) -> Rows[HisTimetableItem]:
        """고등학교시간표: high school timetable."""
        return self.request(Resource.HIS_TIMETABLE, params)

    def sps_timetable(self, params: SpsTimetableParams) -> Rows[SpsTimetableItem]:
        """특수학교시간표: special school timetable."""
        return self.request(Resource.SPS_TIMETABLE, params)

    def class_room_info(self, params: ClassRoomInfoParams) -> Rows[ClassRoomInfoItem]:
        """시간표강의실정보: classrooms."""
        return self.request(Resource.CLASS_ROOM_INFO, params)

    def academy_info(self, params: AcademyInfoParams) -> Rows[AcademyInfoItem]:
        """학원교습소정보: private academies."""
        return self.request(Resource.ACADEMY_INFO, params)

    def meal_service(self, params: MealServiceParams) -> Rows[MealServiceItem]:
        """급식식단정보: school meal menus."""
        return self.request(Resource.MEAL_SERVICE, params)


def _resolve_config(config: Union[str, ClientConfig]) -> ClientConfig:
    if isinstance(config, str):
        return ClientConfig(api_key=config)
    return config


def _build_paginator(
    config: ClientConfig,
    resource: Union[Resource, str],
    params: Optional[QueryParams],
    page_size: Optional[int],
) -> Paginator:
    return Paginator(
        api_key=config.api_key,
        resource=Resource(resource),
        query=params.to_query_string() if params is not None else "",
        page_size=page_size if page_size is not None else config.page_size,
        base_url=config.base_url,
        strict_results=config.strict_results,
    )


class NeisClient(ResourceMethods):
    """
    Blocking NEIS client.

    Args:
        config: API key string or a ClientConfig
        transport: Optional transport; defaults to a RequestsTransport owned
            by this client
    """

    def __init__(self, config: Union[str, ClientConfig], transport: Optional[Transport] = None):
        self.config = _resolve_config(config)

        self.logger = logging.getLogger(__name__)
        if self.config.debug:
            logging.getLogger("neis_client").setLevel(logging.DEBUG)

        self._owns_transport = transport is None
        self.transport = transport or RequestsTransport(
            timeout=self.config.timeout,
            user_agent=self.config.user_agent,
        )

    def request(
        self,
        resource: Union[Resource, str],
        params: Optional[QueryParams] = None,
        page_size: Optional[int] = None,
    ) -> list:
        """
        Fetch every row of a resource matching ``params``.

        Args:
            resource: Resource or its wire tag
            params: Resource parameters; None sends no resource filters
            page_size: Rows per page; defaults to the configured page size

        Returns:
            Records in response order

        Raises:
            FetchError: On transport, status or decode failure
        """
        paginator = _build_paginator(self.config, resource, params, page_size)
        items = fetch_all(self.transport, paginator)
        self.logger.debug(
            f"{paginator.resource.tag}: {len(items)} rows in {paginator.requests} requests"
        )
        return items

    def close(self) -> None:
        """Close the transport if owned by this client."""
        if self._owns_transport:
            self.transport.close()

    def __enter__(self) -> NeisClient:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
