"""ORM Models — declarative description of the persisted tables.

Invariants:
    - All models inherit from Base (db/base.py)
    - Models describe layout only; request handling talks SQL through the gateway
"""

from users_api.models.user import User  # noqa: F401
