import asyncio
import unittest

from backend.seo import Found, NotFound, Unavailable, guarded_lookup


class TestGuardedLookup(unittest.IsolatedAsyncioTestCase):
    async def test_value_is_found(self) -> None:
        async def call() -> str | None:
            return "row"

        self.assertEqual(await guarded_lookup("test", call), Found("row"))

    async def test_none_is_not_found(self) -> None:
        async def call() -> str | None:
            return None

        with self.assertNoLogs("backend.seo.lookup", level="WARNING"):
            result = await guarded_lookup("test", call)

        self.assertEqual(result, NotFound())

    async def test_exception_is_unavailable(self) -> None:
        async def call() -> str | None:
            raise ValueError("malformed response")

        with self.assertLogs("backend.seo.lookup", level="WARNING"):
            result = await guarded_lookup("test", call)

        self.assertEqual(result, Unavailable(reason="malformed response"))

    async def test_timeout_is_unavailable(self) -> None:
        async def call() -> str | None:
            await asyncio.sleep(1.0)
            return "late"

        with self.assertLogs("backend.seo.lookup", level="WARNING"):
            result = await guarded_lookup("test", call, timeout=0.01)

        self.assertEqual(result, Unavailable(reason="timeout"))

    async def test_collaborator_timeout_without_deadline_is_plain_failure(self) -> None:
        async def call() -> str | None:
            raise TimeoutError("upstream read timed out")

        with self.assertLogs("backend.seo.lookup", level="WARNING") as logs:
            result = await guarded_lookup("test", call)

        self.assertEqual(result, Unavailable(reason="upstream read timed out"))
        self.assertTrue(any("failed, using fallback" in line for line in logs.output))
        self.assertFalse(any("timed out after" in line for line in logs.output))
