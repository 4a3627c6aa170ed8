from .job import Job
from .user import User
from .counter import ReferenceCounter, VisitorCounter

document_models = [Job, User, ReferenceCounter, VisitorCounter]
