"""Tests for protected execution."""

import asyncio
import logging

import pytest

from cafeflow.core.base import BaseHelper, arun_value, arun_void, run_value, run_void
from cafeflow.core.exceptions import HelperError, LLMNotConfiguredError


def _raise(exc: Exception):
    raise exc


class TestRunValue:
    """Tests for run_value / run_void."""

    def test_returns_result_unchanged(self):
        result = {'posts': [1, 2, 3]}
        assert run_value('reddit', 'fetch', lambda: result) is result

    def test_none_result_is_passed_through(self):
        assert run_value('reddit', 'fetch', lambda: None) is None

    def test_failure_is_wrapped(self):
        """A failing call raises HelperError naming the service and operation."""
        cause = OSError('timeout')

        with pytest.raises(HelperError) as exc_info:
            run_value('reddit', 'fetch', lambda: _raise(cause))

        error = exc_info.value
        assert error.service_name == 'reddit'
        assert error.operation == 'fetch'
        assert error.cause is cause
        assert error.__cause__ is cause
        assert str(error) == 'Failed to execute reddit.fetch'

    def test_run_void_wraps_failure(self):
        with pytest.raises(HelperError) as exc_info:
            run_void('email', 'send_text_email', lambda: _raise(ValueError('bad address')))

        assert exc_info.value.operation == 'send_text_email'
        assert isinstance(exc_info.value.cause, ValueError)

    def test_success_logs_no_error(self, caplog):
        with caplog.at_level(logging.DEBUG, logger='cafeflow.core.base.executor'):
            run_value('reddit', 'fetch', lambda: 1)

        messages = [r.getMessage() for r in caplog.records]
        assert 'Executing reddit.fetch' in messages
        assert 'Successfully executed reddit.fetch' in messages
        assert not [r for r in caplog.records if r.levelno >= logging.ERROR]

    def test_failure_is_logged_at_error(self, caplog):
        with caplog.at_level(logging.DEBUG, logger='cafeflow.core.base.executor'), pytest.raises(HelperError):
            run_value('reddit', 'fetch', lambda: _raise(OSError('timeout')))

        errors = [r for r in caplog.records if r.levelno == logging.ERROR]
        assert len(errors) == 1
        assert errors[0].getMessage() == 'Failed to execute reddit.fetch: timeout'
        assert 'Successfully executed reddit.fetch' not in [r.getMessage() for r in caplog.records]


class TestAsyncRun:
    """Tests for arun_value / arun_void."""

    async def test_returns_awaited_result(self):
        async def work():
            return ['a', 'b']

        assert await arun_value('text_summarizer', 'summarize_batch', work) == ['a', 'b']

    async def test_failure_is_wrapped(self):
        cause = ConnectionError('reset by peer')

        async def work():
            raise cause

        with pytest.raises(HelperError) as exc_info:
            await arun_void('telegram', 'send_message', work)

        assert exc_info.value.service_name == 'telegram'
        assert exc_info.value.operation == 'send_message'
        assert exc_info.value.cause is cause

    async def test_cancellation_is_not_wrapped(self):
        async def work():
            raise asyncio.CancelledError()

        with pytest.raises(asyncio.CancelledError):
            await arun_value('reddit', 'fetch_top_posts', work)

    async def test_helper_error_from_work_is_wrapped_once_more(self):
        """Errors are not inspected: an inner HelperError becomes the cause."""
        inner = LLMNotConfiguredError()

        async def work():
            raise inner

        with pytest.raises(HelperError) as exc_info:
            await arun_value('text_summarizer', 'summarize', work)

        assert exc_info.value.service_name == 'text_summarizer'
        assert exc_info.value.cause is inner


class TestBaseHelper:
    """Tests for BaseHelper plumbing."""

    class EchoHelper(BaseHelper):
        service_name = 'echo'

        def echo(self, value):
            return self._execute('echo', lambda: value)

        def explode(self):
            return self._execute('explode', lambda: _raise(RuntimeError('boom')))

        async def aecho(self, value):
            async def work():
                return value

            return await self._aexecute('aecho', work)

    def test_execute_uses_service_name(self):
        helper = self.EchoHelper()

        assert helper.echo(42) == 42
        with pytest.raises(HelperError) as exc_info:
            helper.explode()
        assert (exc_info.value.service_name, exc_info.value.operation) == ('echo', 'explode')

    async def test_aexecute(self):
        assert await self.EchoHelper().aecho('hi') == 'hi'

    async def test_close_is_noop_by_default(self):
        await self.EchoHelper().close()

    def test_repr(self):
        assert repr(self.EchoHelper()) == "EchoHelper(service_name='echo')"


class TestExceptions:
    """Tests for exception types."""

    def test_defaults(self):
        error = HelperError()
        assert (error.service_name, error.operation, error.cause) == ('unknown', 'unknown', None)
        assert str(error) == 'Failed to execute unknown.unknown'

    def test_from_message(self):
        cause = KeyError('x')
        error = HelperError.from_message('Something went wrong', cause)
        assert str(error) == 'Something went wrong'
        assert error.cause is cause

    def test_llm_not_configured(self):
        error = LLMNotConfiguredError()
        assert isinstance(error, HelperError)
        assert 'GEMINI_API_KEY' in str(error)
        assert 'GROQ_API_KEY' in str(error)
