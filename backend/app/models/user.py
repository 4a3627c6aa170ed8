from beanie import Document, Indexed


class User(Document):
    username: Indexed(str, unique=True)
    password: str  # bcrypt hash, never the plain password

    class Settings:
        name = "users"
