"""
Map generation request/response models
"""
from typing import Any, List, Optional, Union

from pydantic import AliasChoices, AwareDatetime, BaseModel, ConfigDict, Field, field_validator

from .common import LatLng


class WarningAreaCircle(BaseModel):
    """Storm or gale warning area, radius in meters"""
    center: LatLng
    radius: float = Field(gt=0, strict=True, allow_inf_nan=False)


class WarningAreaArc(BaseModel):
    """Warning area given as an arc: [center, radius, [start, end]]. Not drawn."""
    arc: List[Any]


WarningArea = Union[WarningAreaCircle, WarningAreaArc]


class TyphoonTrack(BaseModel):
    """Positions before and after the system became a typhoon"""
    model_config = ConfigDict(populate_by_name=True)

    pre_typhoon: List[LatLng] = Field(default_factory=list, alias="preTyphoon")
    typhoon: List[LatLng] = Field(default_factory=list)


class GenMapRequest(BaseModel):
    """Request to render and publish a typhoon position map"""
    model_config = ConfigDict(populate_by_name=True)

    typhoon_number: str = Field(alias="typhoonNumber")
    validtime: AwareDatetime
    center: LatLng = Field(validation_alias=AliasChoices("center", "latLng"))
    track: Optional[TyphoonTrack] = None
    storm_warning_area: Optional[WarningArea] = Field(default=None, alias="stormWarningArea")
    gale_warning_area: Optional[WarningArea] = Field(default=None, alias="galeWarningArea")

    @field_validator("validtime", mode="before")
    @classmethod
    def reject_epoch_validtime(cls, value):
        # Timestamps must be RFC 3339 strings (or datetimes), not epoch numbers
        if isinstance(value, (int, float)):
            raise ValueError("validtime must be an RFC 3339 timestamp")
        return value


class GenMapResponse(BaseModel):
    """Public URL of the uploaded map image"""
    url: str
