"""Notification activities (Telegram)."""

from temporalio import activity

from cafeflow.helpers import get_helpers
from cafeflow.temporal.schemas import TelegramMessageInput


@activity.defn
async def send_telegram_message(input: TelegramMessageInput) -> None:
    """Send a Telegram message, optionally as a notification.

    Without a bot token the helper skips the call and logs a warning, so this
    activity succeeds as a no-op.
    """
    activity.logger.info(f'Sending Telegram message to chat {input.chat_id}')

    telegram = get_helpers().get_or_raise('telegram')
    if input.notification:
        await telegram.send_notification(input.chat_id, input.text)
    else:
        await telegram.send_message(input.chat_id, input.text)
