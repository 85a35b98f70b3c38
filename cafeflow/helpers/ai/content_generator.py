from cafeflow.helpers.ai.base import LLMHelper

TWEET_MAX_LENGTH = 280


def _bullets(items: list[str]) -> str:
    return '\n'.join(f'- {item}' for item in items)


class ContentGeneratorHelper(LLMHelper):
    """Generates emails, social posts, tweets and reports."""

    service_name = 'content_generator'

    async def generate(self, instruction: str) -> str:
        """Free-form generation: the caller controls the whole prompt."""
        return await self._aexecute('generate', lambda: self._send(instruction))

    async def generate_email(self, topic: str, recipient_context: str, key_points: list[str]) -> str:
        """Write an email body (no subject, greeting or signature)."""
        prompt = (
            'Write a professional email body about the following topic.\n'
            'Do NOT include subject line, greeting, or signature. Only the body paragraphs.\n\n'
            f'Topic: {topic}\n'
            f'Recipient context: {recipient_context}\n'
            f'Key points to cover:\n{_bullets(key_points)}'
        )
        return await self._aexecute('generate_email', lambda: self._send(prompt))

    async def generate_social_post(self, platform: str, topic: str, tone: str) -> str:
        prompt = (
            f'Write a {platform} post about the following topic.\n'
            f'Tone: {tone}\n'
            f'Follow {platform} conventions and best practices (hashtags, length, formatting).\n'
            'Return ONLY the post text, ready to publish.\n\n'
            f'Topic: {topic}'
        )
        return await self._aexecute(f'generate_social_post({platform})', lambda: self._send(prompt))

    async def generate_tweet(self, content: str) -> str:
        """Write a tweet; replies over 280 characters are cut to 277 plus `...`."""

        async def work() -> str:
            prompt = (
                f'Create a tweet (maximum {TWEET_MAX_LENGTH} characters) based on the following content.\n'
                'Include relevant hashtags. Return ONLY the tweet text.\n\n'
                f'Content: {content}'
            )
            tweet = await self._send(prompt)
            if len(tweet) > TWEET_MAX_LENGTH:
                return tweet[: TWEET_MAX_LENGTH - 3] + '...'
            return tweet

        return await self._aexecute('generate_tweet', work)

    async def generate_report(self, title: str, data_points: list[str]) -> str:
        """Turn raw data points into a short executive report."""
        prompt = (
            'Write a concise executive report based on the following data.\n'
            'Use clear sections with headers. Be factual and objective.\n\n'
            f'Report title: {title}\n'
            f'Data points:\n{_bullets(data_points)}'
        )
        return await self._aexecute('generate_report', lambda: self._send(prompt))

    async def rewrite_in_tone(self, text: str, tone: str) -> str:
        prompt = (
            f'Rewrite the following text in a {tone} tone.\n'
            'Keep the same meaning but change the style. Return ONLY the rewritten text.\n\n'
            f'Text:\n{text}'
        )
        return await self._aexecute(f'rewrite_in_tone({tone})', lambda: self._send(prompt))
