"""Parameter models for every tool.

Each tool's arguments are validated into one member of the ``ToolParams``
union, discriminated by the ``tool`` field, before any catalog logic runs.
"""

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, TypeAdapter

from ..catalog.kinds import KindFilter, VersionedCollection


class _Params(BaseModel):
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True, frozen=True)


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


# Optional text where an empty string means "not given".
OptionalText = Annotated[Optional[str], BeforeValidator(_blank_to_none)]


class FindResourcesParams(_Params):
    tool: Literal["find_resources"] = "find_resources"
    type: KindFilter = "all"
    search: OptionalText = None
    cursor: OptionalText = None


class FindResourceParams(_Params):
    tool: Literal["find_resource"] = "find_resource"
    id: str = Field(min_length=1)
    type: VersionedCollection
    version: OptionalText = None


class FindOwnersParams(_Params):
    tool: Literal["find_owners"] = "find_owners"
    id: str = Field(min_length=1)


class GetSchemaParams(_Params):
    tool: Literal["get_schema"] = "get_schema"
    id: str = Field(min_length=1)
    version: str = Field(min_length=1)
    type: VersionedCollection
    specification: OptionalText = None


class ReviewSchemaChangesParams(_Params):
    model_config = ConfigDict(populate_by_name=True)

    tool: Literal["review_schema_changes"] = "review_schema_changes"
    id: str = Field(min_length=1)
    version: str = Field(min_length=1)
    type: VersionedCollection
    old_schema: str = Field(alias="oldSchema")
    new_schema: str = Field(alias="newSchema")


class ExplainUbiquitousLanguageParams(_Params):
    tool: Literal["explain_ubiquitous_language_terms"] = "explain_ubiquitous_language_terms"
    domain: str = Field(min_length=1)


class EventstormParams(_Params):
    tool: Literal["eventstorm_to_eventcatalog"] = "eventstorm_to_eventcatalog"
    photo: str


class CreateFlowParams(_Params):
    tool: Literal["create_flow"] = "create_flow"
    description: str


class NoParams(_Params):
    tool: Literal["find_producers_and_consumers", "create_eventcatalog"]


ToolParams = Annotated[
    Union[
        FindResourcesParams,
        FindResourceParams,
        FindOwnersParams,
        GetSchemaParams,
        ReviewSchemaChangesParams,
        ExplainUbiquitousLanguageParams,
        EventstormParams,
        CreateFlowParams,
        NoParams,
    ],
    Field(discriminator="tool"),
]

_adapter: TypeAdapter[ToolParams] = TypeAdapter(ToolParams)


def parse_params(tool: str, arguments: Optional[dict[str, Any]] = None) -> ToolParams:
    """Validate raw tool arguments.

    ``None`` values are treated as omitted so optional handler arguments can
    be forwarded as-is.

    Raises:
        pydantic.ValidationError: If the tool is unknown or an argument is
            missing, unexpected or out of range
    """
    payload = {k: v for k, v in (arguments or {}).items() if v is not None}
    payload["tool"] = tool
    return _adapter.validate_python(payload)
