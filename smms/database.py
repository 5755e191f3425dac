import logging
from pymongo import ASCENDING, DESCENDING
from pymongo.errors import PyMongoError
from smms.extensions import mongo

logger = logging.getLogger(__name__)

SEED_SUBJECTS = [
    "Mathematics",
    "Science",
    "Web Development",
    "Artificial Intelligence",
]


def users_collection():
    return mongo.db["users"]


def subjects_collection():
    return mongo.db["subjects"]


def materials_collection():
    return mongo.db["coursematerials"]


def quizzes_collection():
    return mongo.db["quizzes"]


def results_collection():
    return mongo.db["results"]


def ensure_indexes():
    users_collection().create_index([("email", ASCENDING)], unique=True)
    subjects_collection().create_index([("name", ASCENDING)], unique=True)
    materials_collection().create_index([("subject", ASCENDING)])
    quizzes_collection().create_index([("subject", ASCENDING)])
    results_collection().create_index([("student", ASCENDING), ("date", DESCENDING)])


def seed_subjects():
    for name in SEED_SUBJECTS:
        subjects_collection().update_one(
            {"name": name},
            {"$setOnInsert": {"name": name}},
            upsert=True,
        )
    logger.info("Subject database check complete (%d subjects)", len(SEED_SUBJECTS))


def init_db():
    """Create indexes and seed the fixed subject list.

    Returns False when the database could not be reached; the app still starts
    and individual requests will fail with a 500 until MongoDB is available.
    """
    try:
        ensure_indexes()
        seed_subjects()
        logger.info("MongoDB connection successful.")
        return True
    except PyMongoError as e:
        logger.error("MongoDB connection failed: %s", e)
        return False
