"""
Mock TMDB API responses for testing.

Contains realistic responses from the TMDB API for the search and
external ids endpoints. These fixtures are used with respx to mock httpx
calls in tests.
"""

# GET /search/movie?query=Carol&year=2015
TMDB_SEARCH_RESPONSE = {
    "page": 1,
    "results": [
        {
            "adult": False,
            "backdrop_path": "/cSbGFB5HIzKPqwPOYvMnCsXhqzn.jpg",
            "genre_ids": [18, 10749],
            "id": 258480,
            "original_language": "en",
            "original_title": "Carol",
            "overview": "In 1950s New York, a department-store clerk...",
            "popularity": 32.1,
            "poster_path": "/cJeled7EyPdur6TnCA5GYg0UVna.jpg",
            "release_date": "2015-11-20",
            "title": "Carol",
            "video": False,
            "vote_average": 7.2,
            "vote_count": 4300,
        },
        {
            "adult": False,
            "genre_ids": [99],
            "id": 401234,
            "original_language": "en",
            "original_title": "Carol: Behind the Scenes",
            "overview": "",
            "popularity": 0.6,
            "release_date": "",
            "title": "Carol: Behind the Scenes",
            "video": False,
            "vote_average": 0.0,
            "vote_count": 0,
        },
    ],
    "total_pages": 1,
    "total_results": 2,
}

TMDB_SEARCH_EMPTY_RESPONSE = {
    "page": 1,
    "results": [],
    "total_pages": 0,
    "total_results": 0,
}

# GET /movie/258480/external_ids
TMDB_EXTERNAL_IDS_RESPONSE = {
    "id": 258480,
    "imdb_id": "tt2402927",
    "wikidata_id": "Q18208934",
    "facebook_id": "CarolMovie",
    "instagram_id": None,
    "twitter_id": None,
}

TMDB_NOT_FOUND_RESPONSE = {
    "success": False,
    "status_code": 34,
    "status_message": "The resource you requested could not be found.",
}
