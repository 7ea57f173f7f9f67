from remotejobs.app.models.user import User
from remotejobs.app.models.saved_job import SavedJob
from remotejobs.app.models.email_subscription import EmailSubscription
