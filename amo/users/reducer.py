"""
State transitions for the user account store.

:func:`reduce` folds one :class:`.Action` into a :class:`.UsersState` and
returns a new snapshot. It never changes the snapshot it was given, never
raises, and returns the very same snapshot for actions it does not handle.
"""

import logging
from typing import Any, Callable, Dict, Mapping, Optional

from . import config, index
from .actions import EDIT_USER_ACCOUNT, FINISH_EDIT_USER_ACCOUNT, \
    LOAD_CURRENT_USER_ACCOUNT, LOAD_USER_ACCOUNT, LOAD_USER_NOTIFICATIONS, \
    LOG_OUT_USER
from .domain import Action, AppState, EditRequest, UsersState, \
    initial_state

logger = logging.getLogger(__name__)

INITIAL_STATE = initial_state()


def _is_hashable(value: Any) -> bool:
    try:
        hash(value)
    except TypeError:
        return False
    return True


def _add_user(state: UsersState, user: Mapping[str, Any]) -> UsersState:
    """Replace the record for ``user`` and index its username."""
    if not isinstance(user, Mapping):
        logger.warning('Ignoring user payload of type %s',
                       type(user).__name__)
        return state
    user_id = user.get('id')
    if not _is_hashable(user_id):
        logger.warning('Ignoring user with id of type %s',
                       type(user_id).__name__)
        return state
    previous = state.by_id.get(user_id)
    by_id = dict(state.by_id)
    # Notifications are only ever loaded by LOAD_USER_NOTIFICATIONS.
    by_id[user_id] = {**user, 'notifications': None}
    by_username = index.reindex(
        state.by_username, by_id, user_id, user.get('username'),
        previous_username=previous.get('username') if previous else None
    )

    if config.CHECK_USERNAME_INDEX:
        for problem in index.find_inconsistencies(by_id, by_username):
            logger.error('Username index out of sync: %s', problem)
    return state._replace(by_id=by_id, by_username=by_username)


def _load_user_account(state: UsersState, payload: Mapping) -> UsersState:
    return _add_user(state, payload.get('user'))


def _load_current_user_account(state: UsersState,
                               payload: Mapping) -> UsersState:
    user = payload.get('user')
    new_state = _add_user(state, user)
    if new_state is state:
        return state
    return new_state._replace(current_user_id=user.get('id'))


def _load_user_notifications(state: UsersState, payload: Mapping) -> UsersState:
    key = index.normalize(payload.get('username'))
    user_id = state.by_username.get(key) if key is not None else None
    if user_id is None or user_id not in state.by_id:
        logger.debug('No loaded user for notifications; ignoring')
        return state

    by_id = dict(state.by_id)
    by_id[user_id] = {**by_id[user_id],
                      'notifications': payload.get('notifications')}
    return state._replace(by_id=by_id)


def _edit_user_account(state: UsersState, payload: Mapping) -> UsersState:
    return state._replace(
        is_updating=True,
        edit=EditRequest(error_handler_id=payload.get('error_handler_id'),
                         user_fields=payload.get('user_fields'),
                         user_id=payload.get('user_id'))
    )


def _finish_edit_user_account(state: UsersState,
                              payload: Mapping) -> UsersState:
    return state._replace(is_updating=False, edit=None)


def _log_out_user(state: UsersState, payload: Mapping) -> UsersState:
    return state._replace(current_user_id=None)


_TRANSITIONS: Dict[str, Callable[[UsersState, Mapping], UsersState]] = {
    LOAD_USER_ACCOUNT: _load_user_account,
    LOAD_CURRENT_USER_ACCOUNT: _load_current_user_account,
    LOAD_USER_NOTIFICATIONS: _load_user_notifications,
    EDIT_USER_ACCOUNT: _edit_user_account,
    FINISH_EDIT_USER_ACCOUNT: _finish_edit_user_account,
    LOG_OUT_USER: _log_out_user,
}


def reduce(state: Optional[UsersState], action: Action) -> UsersState:
    """
    Apply ``action`` to ``state``.

    Parameters
    ----------
    state : :class:`.UsersState`
        The current snapshot. If ``None``, starts from :data:`INITIAL_STATE`.
    action : :class:`.Action`

    Returns
    -------
    :class:`.UsersState`
        A new snapshot, or ``state`` itself if the action is not one that
        this reducer handles.

    """
    if state is None:
        state = INITIAL_STATE
    transition = _TRANSITIONS.get(action.type)
    if transition is None:
        return state
    logger.debug('Applying %s', action.type)
    payload = action.payload
    if not isinstance(payload, Mapping):
        payload = {}
    return transition(state, payload)


def reduce_app(state: Optional[AppState], action: Action) -> AppState:
    """Apply ``action`` to the users slice of the application state."""
    if state is None:
        return AppState(users=reduce(None, action))
    users = reduce(state.users, action)
    if users is state.users:
        return state
    return state._replace(users=users)
