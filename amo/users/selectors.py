"""
Read-only queries over the user account store.

Lookups take the users slice (:class:`.UsersState`); permission checks take
the whole :class:`.AppState`, since they are used to gate features across
the application. Nothing here raises for a missing user: lookups return
``None`` and permission checks return ``False``.
"""

from typing import Any, Optional, Union

from . import index
from .domain import AppState, Permission, Permissions, UserRecord, \
    UsersState
from .permissions import REVIEWER_RELATED_PERMISSIONS


def get_current_user(state: UsersState) -> Optional[UserRecord]:
    """The authenticated user, or ``None`` if nobody is logged in."""
    if state.current_user_id is None:
        return None
    return state.by_id.get(state.current_user_id)


def get_user_by_id(state: UsersState, user_id: Any) -> Optional[UserRecord]:
    try:
        return state.by_id.get(user_id)
    except TypeError:  # Unhashable, so it cannot be a loaded id.
        return None


def get_user_by_username(state: UsersState,
                         username: str) -> Optional[UserRecord]:
    """Find a loaded user by username, ignoring case."""
    key = index.normalize(username)
    if key is None or key not in state.by_username:
        return None
    return state.by_id.get(state.by_username[key])


def _current_permissions(state: AppState) -> Optional[Permissions]:
    user = get_current_user(state.users)
    if user is None:
        return None
    return Permissions.from_codes(user.get('permissions'))


def has_permission(state: AppState,
                   permission: Union[str, Permission]) -> bool:
    """
    Check whether the current user holds ``permission``.

    Parameters
    ----------
    state : :class:`.AppState`
    permission : str or :class:`.Permission`
        See :mod:`amo.users.permissions`.

    Returns
    -------
    bool
        ``False`` if nobody is logged in or the user has no permissions.
        ``True`` for any permission if the user holds
        :data:`.permissions.ALL_SUPER_POWERS`.

    """
    permissions = _current_permissions(state)
    if permissions is None:
        return False
    return permissions.grants(permission)


def has_any_reviewer_related_permission(state: AppState) -> bool:
    """Check whether the current user can use any add-on reviewer tools."""
    permissions = _current_permissions(state)
    if permissions is None:
        return False
    return permissions.grants_any(REVIEWER_RELATED_PERMISSIONS)
