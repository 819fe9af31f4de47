"""Response shapes returned by the portal backend and the chart provider."""

from typing import Any, Generic, TypeAlias, TypeVar

from pydantic import BaseModel

T = TypeVar("T")

# Audit records are defined by the backend schema; the client never inspects them.
AuditLogModel: TypeAlias = dict[str, Any]


class PageDataResponse(BaseModel, Generic[T]):
    items: list[T]
    total: int
    page: int
    page_size: int


class Pixel(BaseModel):
    x1: float
    y1: float
    x2: float
    y2: float


class LatLng(BaseModel):
    lng1: float
    lat1: float
    lng2: float
    lat2: float


class BoundingBox(BaseModel):
    pixels: Pixel
    latlng: LatLng | None = None  # only set on georeferenced charts


class ChartBoundingBoxes(BaseModel):
    planview: BoundingBox
    minimums: BoundingBox
    header: BoundingBox
    insets: list[BoundingBox]


class AirportChartIndex(BaseModel):
    id: str
    icao_airport_identifier: str
    type_code: str
    category: str
    precision_approach: bool | None = None
    index_number: str
    name: str
    revision_date: str
    is_georeferenced: bool
    width: int
    height: int
    bounding_boxes: ChartBoundingBoxes | None = None
    procedures: list[str]
    runways: list[str]
    image_day: str
    image_night: str
    thumb_day: str
    thumb_night: str
    image_day_url: str
    image_night_url: str
    thumb_day_url: str
    thumb_night_url: str
    local_url: str | None = None
    dark_mode: bool


class AirportChartsIndexResponse(BaseModel):
    charts: list[AirportChartIndex]


class EmailCodeRequest(BaseModel):
    email: str
    cid: int
