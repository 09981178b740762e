# Job related schemas
from .job import JobBase, JobCreate, JobUpdate

# Application related schemas
from .application import ApplicationCreate, ApplicationStatusUpdate

# Store acknowledgements
from .results import InsertAck, UpdateAck, DeleteAck, SuccessResponse
