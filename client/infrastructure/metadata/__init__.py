from .tmdb_client import TMDBClient

__all__ = ["TMDBClient"]
