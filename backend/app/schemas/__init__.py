# Common schemas
from .common import ObjectIdStr, SuccessResponse, InsertResult, UpdateResult, DeleteResult

# Auth schemas
from .auth import TokenRequest

# Job related schemas
from .job import Buyer, JobCreate, JobUpdate, JobResponse
from .bid_job import BidJobCreate, BidStatusUpdate, BidJobResponse

__all__ = [
    # Common
    "ObjectIdStr", "SuccessResponse", "InsertResult", "UpdateResult", "DeleteResult",
    # Auth
    "TokenRequest",
    # Job related
    "Buyer", "JobCreate", "JobUpdate", "JobResponse",
    "BidJobCreate", "BidStatusUpdate", "BidJobResponse",
]
