"""API constants."""

# Base URL and revision
URL_BASE = "https://api.wanikani.com/v2"
API_REVISION = "20170710"
REVISION_HEADER = "Wanikani-Revision"

# Endpoint paths
SUMMARY_PATH = "summary"
USER_PATH = "user"
VOICE_ACTOR_PATH = "voice_actors"
LEVEL_PROGRESSION_PATH = "level_progressions"
RESET_PATH = "resets"
REVIEW_STATISTIC_PATH = "review_statistics"
STUDY_MATERIAL_PATH = "study_materials"
SUBJECT_PATH = "subjects"
ASSIGNMENT_PATH = "assignments"
ASSIGNMENT_START_SEGMENT = "start"

# Rate limit headers
RATE_LIMIT_LIMIT_HEADER = "RateLimit-Limit"
RATE_LIMIT_REMAINING_HEADER = "RateLimit-Remaining"
RATE_LIMIT_RESET_HEADER = "Ratelimit-Reset"

# Requests per minute granted when the server does not say otherwise
DEFAULT_RATE_LIMIT = 60
DEFAULT_MAX_RATE_LIMIT_RETRIES = 3

# Timeouts (in seconds)
DEFAULT_REQUEST_TIMEOUT = 30.0
RATE_LIMIT_RESET_PADDING = 1.0

# Characters left unescaped when encoding filter values
QUERY_SAFE_CHARS = ",:"
