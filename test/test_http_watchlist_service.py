import asyncio
import sys
import unittest
from pathlib import Path

_CLIENT_ROOT = Path(__file__).resolve().parents[1] / "client"
if str(_CLIENT_ROOT) not in sys.path:
    sys.path.insert(0, str(_CLIENT_ROOT))

from aiohttp import web
from aiohttp.test_utils import TestServer

from application.screens import MovieDetailScreen
from domain.errors import MalformedResponse, NetworkFailure, RemoteRejection
from domain.session import UserSession
from domain.watchlist import MovieDetails, MovieSummary
from infrastructure.watchlist import HttpWatchlistService

MOVIE = MovieSummary(
    id=42,
    title="Interstellar",
    poster_path="/poster.jpg",
    vote_average=8.4,
    release_date="2014-11-05",
)


def _reply(body: str | bytes, status: int) -> web.Response:
    if isinstance(body, bytes):
        return web.Response(body=body, status=status, content_type="application/json")
    return web.Response(text=body, status=status, content_type="application/json")


class _FakeWatchlistBackend:
    """Minimal aiohttp app speaking the watchlist REST contract."""

    def __init__(self) -> None:
        self.requests: list[dict] = []
        self.list_payload: object = []
        self.list_status = 200
        self.check_payload: object = {"saved": False}
        self.save_status = 200
        self.save_body = '{"message": "Movie saved to watchlist"}'
        self.remove_status = 200
        self.remove_body = '{"message": "Movie removed from watchlist"}'
        self.delay_s = 0.0

    def app(self) -> web.Application:
        app = web.Application()
        app.router.add_get("/api/watchlist/check", self._check)
        app.router.add_post("/api/watchlist/save", self._save)
        app.router.add_delete("/api/watchlist/remove", self._remove)
        app.router.add_get("/api/watchlist/{user_id}", self._list)
        return app

    async def _list(self, request: web.Request) -> web.Response:
        self.requests.append({"op": "list", "user_id": request.match_info["user_id"]})
        if self.delay_s:
            await asyncio.sleep(self.delay_s)
        if self.list_status >= 400:
            return web.json_response({"message": "service unavailable"}, status=self.list_status)
        return web.json_response(self.list_payload)

    async def _check(self, request: web.Request) -> web.Response:
        self.requests.append({"op": "check", **dict(request.query)})
        return web.json_response(self.check_payload)

    async def _save(self, request: web.Request) -> web.Response:
        self.requests.append({"op": "save", "body": await request.json()})
        return _reply(self.save_body, self.save_status)

    async def _remove(self, request: web.Request) -> web.Response:
        self.requests.append({"op": "remove", "body": await request.json()})
        return _reply(self.remove_body, self.remove_status)


class _StubMetadata:
    async def fetch_movie_details(self, movie_id: int) -> MovieDetails:
        return MovieDetails(id=movie_id, title=MOVIE.title, poster_path=MOVIE.poster_path)

    async def close(self) -> None:
        return None


class _RecordingNotifier:
    def __init__(self) -> None:
        self.messages: list[tuple[str, str]] = []

    def notify(self, title: str, message: str) -> None:
        self.messages.append((title, message))


class TestHttpWatchlistService(unittest.IsolatedAsyncioTestCase):
    async def asyncSetUp(self) -> None:
        self.backend = _FakeWatchlistBackend()
        self.server = TestServer(self.backend.app())
        await self.server.start_server()
        self.service = HttpWatchlistService(base_url=str(self.server.make_url("/api")), timeout_s=2.0)

    async def asyncTearDown(self) -> None:
        await self.service.close()
        await self.server.close()

    async def test_list_parses_entries(self):
        self.backend.list_payload = [
            {
                "user_id": 1,
                "movie_id": 42,
                "title": "Interstellar",
                "poster_path": "/poster.jpg",
                "vote_average": "8.4",
                "release_date": "2014-11-05",
                "created_at": "2024-01-01T00:00:00Z",
            },
            {"movie_id": 27205, "title": "Inception", "vote_average": None},
        ]
        entries = await self.service.list_watchlist(user_id="1")
        self.assertEqual([e.movie_id for e in entries], [42, 27205])
        self.assertEqual(entries[0].user_id, "1")
        self.assertAlmostEqual(entries[0].vote_average, 8.4)
        self.assertEqual(entries[1].user_id, "1")
        self.assertEqual(entries[1].vote_average, 0.0)
        self.assertEqual(self.backend.requests[-1], {"op": "list", "user_id": "1"})

    async def test_list_accepts_data_envelope(self):
        self.backend.list_payload = {"data": [{"movie_id": 1, "title": "A"}]}
        entries = await self.service.list_watchlist(user_id="u1")
        self.assertEqual(len(entries), 1)

    async def test_list_escapes_user_id(self):
        await self.service.list_watchlist(user_id="a b")
        self.assertEqual(self.backend.requests[-1]["user_id"], "a b")

    async def test_list_non_2xx_is_rejection(self):
        self.backend.list_status = 503
        with self.assertRaises(RemoteRejection) as ctx:
            await self.service.list_watchlist(user_id="1")
        self.assertEqual(ctx.exception.status, 503)
        self.assertEqual(ctx.exception.message, "service unavailable")
        self.assertEqual(ctx.exception.operation, "watchlist.list")

    async def test_list_wrong_shape_is_malformed(self):
        self.backend.list_payload = {"saved": True}
        with self.assertRaises(MalformedResponse):
            await self.service.list_watchlist(user_id="1")

        self.backend.list_payload = [{"title": "no id"}]
        with self.assertRaises(MalformedResponse):
            await self.service.list_watchlist(user_id="1")

    async def test_check_sends_user_and_movie(self):
        self.backend.check_payload = {"saved": True}
        self.assertTrue(await self.service.is_saved(user_id="1", movie_id=42))
        self.assertEqual(self.backend.requests[-1], {"op": "check", "user_id": "1", "movie_id": "42"})

        self.backend.check_payload = {"saved": False}
        self.assertFalse(await self.service.is_saved(user_id="1", movie_id=42))

    async def test_check_without_saved_field_is_malformed(self):
        self.backend.check_payload = {"ok": True}
        with self.assertRaises(MalformedResponse):
            await self.service.is_saved(user_id="1", movie_id=42)

    async def test_save_sends_denormalized_movie(self):
        message = await self.service.save(user_id="1", movie=MOVIE)
        self.assertEqual(message, "Movie saved to watchlist")
        self.assertEqual(
            self.backend.requests[-1]["body"],
            {
                "user_id": "1",
                "movie_id": 42,
                "title": "Interstellar",
                "poster_path": "/poster.jpg",
                "vote_average": 8.4,
                "release_date": "2014-11-05",
            },
        )

    async def test_save_rejection_carries_server_message(self):
        self.backend.save_status = 500
        self.backend.save_body = '{"message":"db error"}'
        with self.assertRaises(RemoteRejection) as ctx:
            await self.service.save(user_id="1", movie=MOVIE)
        self.assertEqual(ctx.exception.status, 500)
        self.assertEqual(ctx.exception.message, "db error")
        self.assertEqual(ctx.exception.body, '{"message":"db error"}')

    async def test_save_plain_text_rejection(self):
        self.backend.save_status = 400
        self.backend.save_body = "missing title"
        with self.assertRaises(RemoteRejection) as ctx:
            await self.service.save(user_id="1", movie=MOVIE)
        self.assertEqual(ctx.exception.message, "missing title")

    async def test_save_success_without_message(self):
        self.backend.save_status = 201
        self.backend.save_body = ""
        self.assertEqual(await self.service.save(user_id="1", movie=MOVIE), "")

    async def test_remove_sends_key(self):
        message = await self.service.remove(user_id="1", movie_id=42)
        self.assertEqual(message, "Movie removed from watchlist")
        self.assertEqual(self.backend.requests[-1], {"op": "remove", "body": {"user_id": "1", "movie_id": 42}})

    async def test_remove_rejection(self):
        self.backend.remove_status = 404
        self.backend.remove_body = '{"message":"not found"}'
        with self.assertRaises(RemoteRejection) as ctx:
            await self.service.remove(user_id="1", movie_id=42)
        self.assertEqual(ctx.exception.message, "not found")

    async def test_undecodable_rejection_body_is_still_rejection(self):
        self.backend.save_status = 500
        self.backend.save_body = b"\xff\xfe db error"
        with self.assertRaises(RemoteRejection) as ctx:
            await self.service.save(user_id="1", movie=MOVIE)
        self.assertEqual(ctx.exception.status, 500)
        self.assertIn("db error", ctx.exception.message)

    async def test_undecodable_success_body_still_confirms(self):
        self.backend.remove_body = b"\xff\xfe ok"
        self.assertEqual(await self.service.remove(user_id="1", movie_id=42), "")

    async def test_undecodable_save_failure_is_notified(self):
        self.backend.save_status = 500
        self.backend.save_body = b"\xff\xfe db error"
        notifier = _RecordingNotifier()
        screen = MovieDetailScreen(
            movie_id=42,
            session=UserSession(user_id="1", username="demo"),
            metadata=_StubMetadata(),
            service=self.service,
            notifier=notifier,
        )
        await screen.mount()

        outcome = await screen.press_save()
        self.assertFalse(outcome.succeeded)
        self.assertIsInstance(outcome.error, RemoteRejection)
        self.assertFalse(screen.toggle.is_saved)
        self.assertEqual(len(notifier.messages), 1)
        title, text = notifier.messages[0]
        self.assertEqual(title, "Failed")
        self.assertIn("db error", text)

    async def test_timeout_is_network_failure(self):
        self.backend.delay_s = 1.0
        service = HttpWatchlistService(base_url=str(self.server.make_url("/api")), timeout_s=0.1)
        try:
            with self.assertRaises(NetworkFailure):
                await service.list_watchlist(user_id="1")
        finally:
            await service.close()

    async def test_unreachable_server_is_network_failure(self):
        dead = TestServer(web.Application())
        await dead.start_server()
        url = str(dead.make_url("/api"))
        await dead.close()

        service = HttpWatchlistService(base_url=url, timeout_s=1.0)
        try:
            with self.assertRaises(NetworkFailure):
                await service.is_saved(user_id="1", movie_id=42)
        finally:
            await service.close()

    async def test_save_failure_end_to_end_keeps_not_saved(self):
        self.backend.check_payload = {"saved": False}
        self.backend.save_status = 500
        self.backend.save_body = '{"message":"db error"}'
        notifier = _RecordingNotifier()
        screen = MovieDetailScreen(
            movie_id=42,
            session=UserSession(user_id="1", username="demo"),
            metadata=_StubMetadata(),
            service=self.service,
            notifier=notifier,
        )
        await screen.mount()
        self.assertEqual(screen.button_label, "Save")

        await screen.press_save()
        self.assertFalse(screen.toggle.is_saved)
        self.assertEqual(screen.button_label, "Save")
        self.assertTrue(any("db error" in text for _, text in notifier.messages))


if __name__ == "__main__":
    unittest.main()
