from job_portal.database.mongo import (
    APPLICATIONS_COLLECTION,
    JOBS_COLLECTION,
    close_mongo,
    get_mongo_db,
    init_mongo,
)
