from __future__ import annotations

import os
from typing import Optional

from pymongo import MongoClient
from pymongo.errors import PyMongoError

from django.conf import settings

_client: Optional[MongoClient] = None


def get_client() -> MongoClient:
    global _client
    if _client is None:
        uri = getattr(settings, "MONGO_URI", os.getenv("MONGO_URI"))
        timeout = getattr(settings, "MONGO_TIMEOUT_MS", 2000)
        _client = MongoClient(uri, serverSelectionTimeoutMS=timeout)
    return _client


def get_db():
    client = get_client()
    name = getattr(settings, "MONGO_DB_NAME", os.getenv("MONGO_DB_NAME", "regdesk"))
    return client[name]


def get_collection(name: str):
    return get_db()[name]


def health_check() -> bool:
    try:
        client = get_client()
        client.admin.command("ping")
        return True
    except PyMongoError:
        return False


def ensure_indexes() -> None:
    # Registrants are addressed by email for every update
    get_collection(settings.PARTICIPANTS_COLLECTION).create_index("email", unique=True)
