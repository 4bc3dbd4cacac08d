from .results import from_batch, from_pymongo
