from cafeflow.helpers.ai.base import LLMHelper


class TextTranslatorHelper(LLMHelper):
    """Translates text and detects its language."""

    service_name = 'text_translator'

    async def translate(self, text: str, target_language: str, source_language: str | None = None) -> str:
        """Translate `text` to `target_language`, optionally from a known `source_language`.

        Returns only the translated text.
        """
        if source_language:
            operation = f'translate({source_language}->{target_language})'
            direction = f'from {source_language} to {target_language}'
        else:
            operation = f'translate({target_language})'
            direction = f'to {target_language}'

        prompt = (
            f'Translate the following text {direction}.\n'
            'Return ONLY the translated text, nothing else. No explanations, no notes.\n\n'
            f'Text:\n{text}'
        )
        return await self._aexecute(operation, lambda: self._send(prompt))

    async def translate_batch(self, texts: list[str], target_language: str) -> list[str]:
        async def work() -> list[str]:
            translations = []
            for text in texts:
                prompt = (
                    f'Translate the following text to {target_language}.\n'
                    'Return ONLY the translated text, nothing else.\n\n'
                    f'Text:\n{text}'
                )
                translations.append(await self._send(prompt))
            return translations

        return await self._aexecute(f'translate_batch({target_language})', work)

    async def detect_language(self, text: str) -> str:
        """Return the language name in English, e.g. `Portuguese`."""

        async def work() -> str:
            prompt = (
                'Detect the language of the following text.\n'
                'Return ONLY the language name in English (e.g., "English", "Portuguese", "Spanish").\n'
                'Nothing else.\n\n'
                f'Text:\n{text}'
            )
            return (await self._send(prompt)).strip().replace('"', '')

        return await self._aexecute('detect_language', work)
