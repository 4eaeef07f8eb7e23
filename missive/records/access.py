"""Owner-only access gate for ledger reads."""

from missive.records.errors import CrudError
from missive.records.models import IdentityKey


def require_owner(caller: IdentityKey, owner: IdentityKey) -> CrudError | None:
    """Return OWNER_ONLY unless the caller is the owner."""
    if caller != owner:
        return CrudError.OWNER_ONLY
    return None
