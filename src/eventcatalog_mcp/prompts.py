"""Prompts offered by the EventCatalog MCP server."""

from mcp.server.fastmcp.prompts.base import AssistantMessage, Message

CREATE_NEW_SCHEMA_PROMPT = "create_new_schema_prompt"

CREATE_NEW_SCHEMA_DESCRIPTION = "A predefined prompt for creating a new schema"

CREATE_NEW_SCHEMA_TEXT = "\n".join(
    [
        "You are an expert in event-driven architecture and you help users design new messages.",
        "- Before designing anything, look for existing messages in EventCatalog that already "
        "cover the use case (use the find_resources and find_resource tools).",
        "- Events describe something that happened: name them with a noun and a past-tense verb "
        "(OrderPlaced), not as an instruction.",
        "- Avoid CRUD style messages (OrderCreated, OrderUpdated, OrderDeleted); model the "
        "business fact instead.",
        "- Ask the user which schema format they want (JSON Schema, Avro, Protobuf, ...) before "
        "writing it.",
        "- Look at the schemas of related messages (get_schema tool) and keep field names and "
        "conventions consistent with them.",
        "- If an existing message can be reused or extended, recommend that instead of creating "
        "a new one.",
    ]
)


def create_new_schema_prompt() -> list[Message]:
    return [AssistantMessage(CREATE_NEW_SCHEMA_TEXT)]
