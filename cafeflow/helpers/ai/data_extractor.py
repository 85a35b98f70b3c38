from typing import Any

from cafeflow.helpers.ai.base import LLMHelper
from cafeflow.helpers.ai.parsing import parse_llm_json
from cafeflow.helpers.ai.schemas import ExtractionResult

FIELDS_PROMPT = """Extract the following fields from the text below.
Respond ONLY with a valid JSON object in this exact format, nothing else:
{{"fields": {{{fields}}}, "entities": ["list", "of", "named", "entities", "found"], "confidence": 0.95}}

The "fields" object must contain all requested fields. Use empty string if not found.
The "entities" array should list proper nouns, names, organizations, dates found.
The "confidence" is a number between 0.0 and 1.0.

Text:
{text}"""

ENTITIES_PROMPT = """Extract all named entities from the following text.
Named entities include: people names, organization names, locations, dates, monetary values.
Respond ONLY with a JSON array of strings, nothing else.
Example: ["John Doe", "Google", "New York", "January 2024", "$5000"]

Text:
{text}"""

KEY_VALUES_PROMPT = """Extract all key-value pairs from the following text.
Identify any structured data like names, dates, amounts, IDs, addresses, etc.
Respond ONLY with a valid JSON object mapping field names to values, nothing else.
Example: {{"name": "John", "date": "2024-01-15", "amount": "$500"}}

Text:
{text}"""

ACTION_ITEMS_PROMPT = """Extract all action items, tasks, and to-dos from the following text.
An action item is something someone needs to do.
Respond ONLY with a JSON array of strings, each being one action item.
Example: ["Review the proposal by Friday", "Send invoice to client", "Schedule follow-up meeting"]

Text:
{text}"""


class DataExtractorHelper(LLMHelper):
    """Pulls structured data (fields, entities, key-values, action items) out of free text."""

    service_name = 'data_extractor'

    async def extract_fields(self, text: str, field_names: list[str]) -> ExtractionResult:
        """Extract the named fields; missing or unparseable output yields an empty result."""

        async def work() -> ExtractionResult:
            fields = ', '.join(f'"{name}": "extracted value or empty string"' for name in field_names)
            response = await self._send(FIELDS_PROMPT.format(fields=fields, text=text))
            return parse_llm_json(response, ExtractionResult, ExtractionResult())

        return await self._aexecute('extract_fields', work)

    async def extract_entities(self, text: str) -> list[str]:
        async def work() -> list[str]:
            response = await self._send(ENTITIES_PROMPT.format(text=text))
            return parse_llm_json(response, list[str], [], array=True)

        return await self._aexecute('extract_entities', work)

    async def extract_key_values(self, text: str) -> dict[str, Any]:
        """Useful for invoices, forms and receipts."""

        async def work() -> dict[str, Any]:
            response = await self._send(KEY_VALUES_PROMPT.format(text=text))
            return parse_llm_json(response, dict[str, Any], {})

        return await self._aexecute('extract_key_values', work)

    async def extract_action_items(self, text: str) -> list[str]:
        async def work() -> list[str]:
            response = await self._send(ACTION_ITEMS_PROMPT.format(text=text))
            return parse_llm_json(response, list[str], [], array=True)

        return await self._aexecute('extract_action_items', work)
