"""Application-wide FastAPI dependencies."""

from typing import Annotated

from fastapi import Depends

from mediashelf.exceptions import RegistrationClosedError
from mediashelf.feature_flags import FeatureFlags, get_feature_flags


def ensure_registrations_open(
    flags: Annotated[FeatureFlags, Depends(get_feature_flags)],
) -> None:
    """
    Route guard for account creation.

    Attach with ``dependencies=[Depends(ensure_registrations_open)]``; raises
    RegistrationClosedError (HTTP 403) while the registration flag is off.
    """
    if not flags.user_registrations:
        raise RegistrationClosedError
