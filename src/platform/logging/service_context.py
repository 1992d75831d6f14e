"""
Service context extraction for log lines.

Identifies which process wrote a line, since several cashier processes may
log into the same directory even though only one may own the data files.
"""

import os
from functools import lru_cache


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'cinema-catalog')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')
    return f'{service_name}@{deploy_env}:{os.getpid()}'
