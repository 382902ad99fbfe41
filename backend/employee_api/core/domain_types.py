"""Domain Types — identity and pattern types shared across the codebase.

Invariants:
    - EmployeeId wraps the storage-assigned integer key
    - EMAIL_PATTERN is matched against the whole address (fullmatch)
"""

import re
from typing import NewType

EmployeeId = NewType("EmployeeId", int)

# local-part@domain.tld, tld 2-6 letters
EMAIL_PATTERN = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,6}")
