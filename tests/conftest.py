import os

import dotenv
import pytest
from bson import ObjectId
from pymongo import MongoClient

from bulkwrite import UpsertRecord

dotenv.load_dotenv()


@pytest.fixture()
def upserts():
    return [
        UpsertRecord(index=0, generated_id=ObjectId()),
        UpsertRecord(index=3, generated_id=ObjectId()),
    ]


@pytest.fixture(scope="session")
def mongo_client():
    database_uri = os.environ.get("MONGODB_URI")
    if not database_uri:
        pytest.skip("MONGODB_URI not set")

    client = MongoClient(database_uri)
    yield client
    client.close()


@pytest.fixture()
def mongo_collection(mongo_client):
    collection = mongo_client.get_database("bulkwrite_tests")["outcomes"]
    collection.delete_many({})
    yield collection
    collection.drop()
