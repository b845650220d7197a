from .store import Store, NotFoundError, DocumentNotFound, IssueNotFound, VersionNotFound
from .ids import IdGenerator

__version__ = "1.0.0"
