"""Application-wide constants.

Field lengths, pagination limits and token settings shared by models,
schemas and services.
"""

# String field lengths
MAX_EMAIL_LENGTH = 255
MAX_NAME_LENGTH = 255
MAX_IPV6_LENGTH = 45
MAX_USER_AGENT_LENGTH = 512
MAX_URL_LENGTH = 2048
MAX_ROLE_NAME_LENGTH = 100
MAX_PERMISSION_MODULE_LENGTH = 100
MAX_PERMISSION_ACTION_LENGTH = 50
MAX_DESCRIPTION_LENGTH = 255
MAX_SETTING_KEY_LENGTH = 100

# Password requirements
MIN_PASSWORD_LENGTH = 6
MAX_PASSWORD_LENGTH = 128
BCRYPT_ROUNDS = 12

# Pagination defaults
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100

# Token settings
ACCESS_TOKEN_JTI_LENGTH = 32

# Secret key requirements
MIN_SECRET_KEY_LENGTH = 32
DEFAULT_INSECURE_SECRET = "change-me-in-production"

# Job posting requirements
MAX_TITLE_LENGTH = 255
MIN_JOB_TITLE_LENGTH = 3
MIN_JOB_DESCRIPTION_LENGTH = 10
MIN_JOB_POSITION_LENGTH = 2

# Form builder
MAX_FIELD_NAME_LENGTH = 255
MAX_CSS_CLASS_LENGTH = 255
DEFAULT_FIELD_WIDTH = "100%"

# Application intake
MAX_FILE_NAME_LENGTH = 255
MAX_REMARKS_LENGTH = 5000

# Email templates
MAX_EMAIL_SUBJECT_LENGTH = 255
