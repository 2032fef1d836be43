"""
Maintenance of the username index.

:attr:`.UsersState.by_username` maps a lowercased username to a user id. It is
derived from :attr:`.UsersState.by_id` and is updated in the same transition
that changes a user record, so that for every key ``u``::

    by_id[by_username[u]]['username'].lower() == u

"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from .domain import UserRecord
from .exceptions import IndexOutOfSync

logger = logging.getLogger(__name__)


def normalize(username: Any) -> Optional[str]:
    """
    Get the index key for ``username``.

    Returns ``None`` if ``username`` is not a string, in which case the user
    cannot be indexed.
    """
    if not isinstance(username, str):
        return None
    return username.lower()


def reindex(by_username: Mapping[str, int], by_id: Mapping[int, UserRecord],
            user_id: int, username: Any,
            previous_username: Any = None) -> Dict[str, int]:
    """
    Index ``user_id`` under ``username``.

    If the user was previously indexed under a different name, the old key is
    dropped as long as it still refers to this user. A later load of another
    user under the same name may have claimed it in the meantime. If another
    loaded user still carries the old name, the key is handed over to them.

    Parameters
    ----------
    by_username : dict
        The current index. Not modified.
    by_id : dict
        The user records, already including the record being stored.
    user_id : int
    username : str
        The username in the record being stored.
    previous_username : str
        The username of the record being replaced, if any.

    Returns
    -------
    dict
        A new index.

    """
    index = dict(by_username)
    key = normalize(username)
    previous_key = normalize(previous_username)
    if previous_key is not None and previous_key != key \
            and index.get(previous_key) == user_id:
        del index[previous_key]
        for other_id, record in by_id.items():
            if other_id != user_id \
                    and normalize(record.get('username')) == previous_key:
                index[previous_key] = other_id

    if key is None:
        logger.warning('User %s has no usable username; not indexed',
                       user_id)
    else:
        index[key] = user_id
    return index


def find_inconsistencies(by_id: Mapping[int, UserRecord],
                         by_username: Mapping[str, int]) -> List[str]:
    """Describe every index entry that does not agree with ``by_id``."""
    problems = []
    for key, user_id in by_username.items():
        record = by_id.get(user_id)
        if record is None:
            problems.append(f'{key!r} refers to unknown user {user_id}')
        elif normalize(record.get('username')) != key:
            problems.append(
                f'{key!r} refers to user {user_id} named'
                f' {record.get("username")!r}'
            )
    return problems


def verify(by_id: Mapping[int, UserRecord],
           by_username: Mapping[str, int]) -> None:
    """
    Check that the username index agrees with the user records.

    Raises
    ------
    :class:`.IndexOutOfSync`

    """
    problems = find_inconsistencies(by_id, by_username)
    if problems:
        raise IndexOutOfSync('; '.join(problems))
