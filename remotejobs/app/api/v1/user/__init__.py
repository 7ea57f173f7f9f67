"""User API module - profile, resume and saved-job endpoints."""
from remotejobs.app.api.v1.user.profile import router as profile_router
from remotejobs.app.api.v1.user.resume import router as resume_router
from remotejobs.app.api.v1.user.saved_jobs import router as saved_jobs_router

__all__ = ["profile_router", "resume_router", "saved_jobs_router"]
