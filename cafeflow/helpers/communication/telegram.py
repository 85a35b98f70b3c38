import logging
from typing import Any

import httpx

from cafeflow.core.base import BaseHelper
from cafeflow.core.configs import app_config

logger = logging.getLogger(__name__)


class TelegramHelper(BaseHelper):
    """Telegram Bot API client.

    Without `TELEGRAM_BOT_TOKEN` the helper stays constructible but every
    method is a logged no-op.
    """

    service_name = 'telegram'

    def __init__(self, token: str | None = None, api_url: str | None = None) -> None:
        self._token = token if token is not None else app_config.TELEGRAM_BOT_TOKEN
        self._api_url = api_url or app_config.TELEGRAM_API_URL
        self._client: httpx.AsyncClient | None = None

        if self.is_configured:
            logger.info('TelegramHelper initialized successfully.')
        else:
            logger.warning('Telegram bot token is missing. TelegramHelper will not be functional.')

    @property
    def is_configured(self) -> bool:
        return bool(self._token and self._token.strip())

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(base_url=f'{self._api_url}/bot{self._token}', timeout=30.0)
        return self._client

    async def _call(self, method: str, payload: dict[str, Any]) -> dict[str, Any]:
        client = await self._get_client()
        response = await client.post(f'/{method}', json=payload)
        data = response.json()
        if not data.get('ok'):
            raise Exception(f'Telegram API error: {data.get("description", response.status_code)}')
        return data

    def _skip(self, operation: str) -> bool:
        if self.is_configured:
            return False
        logger.warning(f'Skipping telegram.{operation}: bot token not configured')
        return True

    async def send_message(self, chat_id: str, text: str) -> None:
        if self._skip('send_message'):
            return
        await self._aexecute('send_message', lambda: self._call('sendMessage', {'chat_id': chat_id, 'text': text}))

    async def send_message_with_inline_menu(self, chat_id: str, text: str, buttons: dict[str, str]) -> None:
        """Send a message with one row of inline buttons (`{label: callback_data}`)."""
        if self._skip('send_message_with_inline_menu'):
            return
        keyboard = [[{'text': label, 'callback_data': data} for label, data in buttons.items()]]
        payload = {'chat_id': chat_id, 'text': text, 'reply_markup': {'inline_keyboard': keyboard}}
        await self._aexecute('send_message_with_inline_menu', lambda: self._call('sendMessage', payload))

    async def edit_message(self, chat_id: str, message_id: str | int, new_text: str) -> None:
        if self._skip('edit_message'):
            return

        async def work() -> None:
            payload = {'chat_id': chat_id, 'message_id': int(message_id), 'text': new_text}
            await self._call('editMessageText', payload)

        await self._aexecute('edit_message', work)

    async def send_notification(self, chat_id: str, text: str) -> None:
        await self.send_message(chat_id, f'🔔 {text}')

    async def close(self) -> None:
        if self._client:
            await self._client.aclose()
            self._client = None
