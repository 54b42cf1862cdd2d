"""
Mock Agregarr API v1 responses for testing.
"""

# GET /api/v1/collections
AGREGARR_COLLECTIONS_RESPONSE = {
    "collectionConfigs": [
        {
            "id": "a1",
            "name": "Metrograph: Old Series",
            "type": "radarrtag",
            "subtype": "metrograph-111",
            "mediaType": "movie",
        },
        {
            "id": "b2",
            "name": "Unrelated",
            "type": "trakt",
            "subtype": "trending",
            "mediaType": "movie",
        },
    ]
}

# POST /api/v1/collections/create
AGREGARR_CREATE_RESPONSE = {
    "collectionConfigs": [
        {
            "id": "c3",
            "name": "Metrograph: Carol and Friends",
            "type": "radarrtag",
            "subtype": "metrograph-12345",
        }
    ]
}
