import sys
import unittest
from pathlib import Path

_CLIENT_ROOT = Path(__file__).resolve().parents[1] / "client"
if str(_CLIENT_ROOT) not in sys.path:
    sys.path.insert(0, str(_CLIENT_ROOT))

from aiohttp import web
from aiohttp.test_utils import TestServer

from domain.errors import MalformedResponse, RemoteRejection
from infrastructure.metadata import TMDBClient

_INTERSTELLAR = {
    "id": 157336,
    "title": "Interstellar",
    "overview": "A team travels through a wormhole.",
    "poster_path": "/gEU2QniE6E77NI6lCU6MxlNBvIx.jpg",
    "release_date": "2014-11-05",
    "runtime": 169,
    "vote_average": 8.4,
    "vote_count": 36000,
    "budget": 165000000,
    "revenue": 701729206,
    "genres": [{"id": 12, "name": "Adventure"}, {"id": 18, "name": "Drama"}],
    "production_companies": [{"id": 923, "name": "Legendary Pictures"}],
    "tagline": "Mankind was born on Earth.",
}


class TestTMDBClient(unittest.IsolatedAsyncioTestCase):
    async def asyncSetUp(self) -> None:
        self.seen: list[dict] = []
        self.payloads: dict[str, tuple[int, dict]] = {"157336": (200, _INTERSTELLAR)}

        async def movie(request: web.Request) -> web.Response:
            self.seen.append(
                {
                    "id": request.match_info["movie_id"],
                    "query": dict(request.query),
                    "authorization": request.headers.get("Authorization"),
                }
            )
            status, body = self.payloads.get(
                request.match_info["movie_id"],
                (404, {"success": False, "status_code": 34, "status_message": "The resource you requested could not be found."}),
            )
            return web.json_response(body, status=status)

        app = web.Application()
        app.router.add_get("/3/movie/{movie_id}", movie)
        self.server = TestServer(app)
        await self.server.start_server()
        self.base_url = str(self.server.make_url("/3"))

    async def asyncTearDown(self) -> None:
        await self.server.close()

    async def test_bearer_token_is_sent_as_header(self):
        client = TMDBClient(base_url=self.base_url, api_token="tok", api_key="", language="en-US")
        try:
            details = await client.fetch_movie_details(157336)
        finally:
            await client.close()

        self.assertEqual(details.title, "Interstellar")
        self.assertEqual(details.runtime, 169)
        self.assertEqual(details.genres, ("Adventure", "Drama"))
        self.assertEqual(details.production_companies, ("Legendary Pictures",))
        self.assertEqual(details.release_year, "2014")
        self.assertEqual(self.seen[-1]["authorization"], "Bearer tok")
        self.assertEqual(self.seen[-1]["query"], {"language": "en-US"})

    async def test_api_key_used_without_token(self):
        client = TMDBClient(base_url=self.base_url, api_token="", api_key="k3y", language="fr-FR")
        try:
            await client.fetch_movie_details(157336)
        finally:
            await client.close()

        self.assertIsNone(self.seen[-1]["authorization"])
        self.assertEqual(self.seen[-1]["query"], {"language": "fr-FR", "api_key": "k3y"})

    async def test_not_found_is_rejection_with_tmdb_message(self):
        client = TMDBClient(base_url=self.base_url, api_token="tok", api_key="")
        try:
            with self.assertRaises(RemoteRejection) as ctx:
                await client.fetch_movie_details(1)
        finally:
            await client.close()

        self.assertEqual(ctx.exception.status, 404)
        self.assertEqual(ctx.exception.message, "The resource you requested could not be found.")
        self.assertEqual(ctx.exception.operation, "tmdb.movie_details")

    async def test_nulls_are_tolerated(self):
        self.payloads["7"] = (
            200,
            {"id": 7, "title": "Sparse", "budget": None, "genres": None, "runtime": None, "overview": None},
        )
        client = TMDBClient(base_url=self.base_url, api_token="tok", api_key="")
        try:
            details = await client.fetch_movie_details(7)
        finally:
            await client.close()

        self.assertEqual(details.budget, 0)
        self.assertEqual(details.genres, ())
        self.assertIsNone(details.runtime)
        self.assertEqual(details.overview, "")

    async def test_record_without_id_is_malformed(self):
        self.payloads["8"] = (200, {"title": "No id"})
        client = TMDBClient(base_url=self.base_url, api_token="tok", api_key="")
        try:
            with self.assertRaises(MalformedResponse):
                await client.fetch_movie_details(8)
        finally:
            await client.close()

    async def test_missing_credentials_are_logged(self):
        with self.assertLogs("infrastructure.metadata.tmdb_client", level="WARNING"):
            client = TMDBClient(base_url=self.base_url, api_token="", api_key="")
        await client.close()


if __name__ == "__main__":
    unittest.main()
