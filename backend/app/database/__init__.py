from app.database.mongo import init_mongo, close_mongo, ensure_indexes, get_mongo_db

__all__ = ["init_mongo", "close_mongo", "ensure_indexes", "get_mongo_db"]
