"""
Catalog settings.

Values come from the environment with sensible defaults.
"""
import os

LOG_LEVEL = os.environ.get('CATALOG_LOG_LEVEL', 'INFO').upper()

LOG_FORMAT = os.environ.get(
    'CATALOG_LOG_FORMAT',
    '{levelname} {asctime} {module} {message}',
)

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': LOG_FORMAT,
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'verbose',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': 'WARNING',
    },
    'loggers': {
        'apps': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
        'shared': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
    },
}
