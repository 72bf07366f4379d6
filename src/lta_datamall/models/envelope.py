"""Response wrappers shared by every DataMall endpoint.

Almost every DataMall list endpoint answers with the same OData envelope:

    {"odata.metadata": "...", "value": [ {...}, {...} ]}

so one generic Envelope[T] replaces a hand-written wrapper per endpoint.
Bulk dataset endpoints use the same envelope around a single DownloadLink.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_pascal

T = TypeVar("T")


class LTAModel(BaseModel):
    """Base for DataMall records.

    Attributes are snake_case; the wire keys are PascalCase. Fields whose key
    doesn't follow plain PascalCase (CarParkID, WD_FirstBus, ...) declare an
    explicit alias. Both names are accepted when constructing a model.
    """

    model_config = ConfigDict(alias_generator=to_pascal, populate_by_name=True)


class Envelope(BaseModel, Generic[T]):
    """The `{"value": [...]}` wrapper around a page of records.

    Second-hop dataset files capitalize the key (`Value`), so both spellings
    are accepted.
    """

    value: list[T] = Field(validation_alias=AliasChoices("value", "Value"))


class DownloadLink(LTAModel):
    """Single entry of a bulk dataset's metadata response."""

    link: str = ""
