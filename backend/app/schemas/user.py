from pydantic import BaseModel

# Register / login payload
class UserCredentials(BaseModel):
    username: str
    password: str

class UserPublic(BaseModel):
    username: str

class LoginResponse(BaseModel):
    message: str
    user: UserPublic
