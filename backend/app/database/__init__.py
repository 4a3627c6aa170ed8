from app.database.mongo import init_mongo, close_mongo, get_database
