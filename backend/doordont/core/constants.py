"""
Application constants
"""

# Operating modes
APP_ENV_PRODUCTION = "production"
APP_ENV_TESTING = "testing"

# Store backends
STORE_BACKEND_SUPABASE = "supabase"
STORE_BACKEND_MEMORY = "memory"

# Notifications
GOAL_UPDATE_EMAIL_SUBJECT = "Goal update"

# Scheduler
EVALUATION_JOB_ID_PREFIX = "goal_evaluation"
EVALUATION_MISFIRE_GRACE_SECONDS = 60 * 60

# Password hashing (PBKDF2-SHA256)
PASSWORD_HASH_ALGORITHM = "sha256"
PASSWORD_HASH_ITERATIONS = 260_000
PASSWORD_SALT_BYTES = 16
