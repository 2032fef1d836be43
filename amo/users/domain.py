"""Defines user account concepts for the client-side account store."""

from typing import Any, Dict, FrozenSet, Iterable, Mapping, NamedTuple, \
    Optional, Union

from .exceptions import InvalidSnapshot

UserRecord = Dict[str, Any]
"""
A user account as delivered by the accounts API.

Only ``id``, ``username``, ``permissions`` and ``notifications`` are
interpreted by this package. All other profile fields are carried as-is.
"""


class Permission(NamedTuple):
    """A permission code granted to a user, e.g. ``Addons:Review``."""

    app: str
    """The part of the site to which the permission applies."""

    action: str
    """An action within ``app``."""

    def __repr__(self) -> str:
        """Return this permission as a :-delimited code."""
        return f'{self.app}:{self.action}'

    def __str__(self) -> str:
        """Return this permission as a :-delimited code."""
        return f'{self.app}:{self.action}'

    @classmethod
    def from_code(cls, code: str) -> 'Permission':
        """Parse a :-delimited permission code."""
        app, _, action = code.partition(':')
        return cls(app, action)

    class apps:
        """Known permission apps."""

        ANY = '*'
        ADDONS = 'Addons'
        ADMIN_TOOLS = 'AdminTools'
        COLLECTIONS = 'Collections'
        LANGUAGE_PACK = 'LanguagePack'
        PERSONAS = 'Personas'
        """Themes. The server still uses the legacy name."""
        REVIEWER_TOOLS = 'ReviewerTools'
        STATS = 'Stats'
        USERS = 'Users'

    class actions:
        """Known permission actions."""

        ANY = '*'
        CONTENT_REVIEW = 'ContentReview'
        EDIT = 'Edit'
        POST_REVIEW = 'PostReview'
        REVIEW = 'Review'
        SUBMIT = 'Submit'
        VIEW = 'View'


class Permissions(NamedTuple):
    """The set of permission codes held by a user."""

    codes: FrozenSet[str] = frozenset()

    override: str = '*:*'
    """Holding this code satisfies every permission check."""

    @classmethod
    def from_codes(cls, codes: Optional[Iterable[Union[str, Permission]]]
                   ) -> Optional['Permissions']:
        """
        Build a :class:`.Permissions` from a record's ``permissions`` field.

        Returns ``None`` if ``codes`` is ``None``, which means that no
        permissions have been granted.
        """
        if codes is None:
            return None
        return cls(frozenset(str(code) for code in codes))

    @property
    def is_admin(self) -> bool:
        """Whether the admin override is held."""
        return self.override in self.codes

    def grants(self, permission: Union[str, Permission]) -> bool:
        """
        Check whether ``permission`` is granted.

        The admin override is checked first, so an admin is granted every
        permission whether or not it is listed.

        Parameters
        ----------
        permission : str or :class:`.Permission`

        Returns
        -------
        bool

        """
        return self.is_admin or str(permission) in self.codes

    def grants_any(self, permissions: Iterable[Union[str, Permission]]
                   ) -> bool:
        """Check whether at least one of ``permissions`` is granted."""
        if self.is_admin:
            return True
        return any(str(permission) in self.codes
                   for permission in permissions)


class EditRequest(NamedTuple):
    """Describes an edit of a user account that is in flight."""

    error_handler_id: str
    """Identifies the error handler that reports a failed submission."""

    user_fields: Mapping[str, Any]
    """The profile fields being changed."""

    user_id: int
    """The user being edited."""


class UsersState(NamedTuple):
    """
    A snapshot of all known user accounts.

    Snapshots are never changed in place. The reducer returns a new
    snapshot for every transition.
    """

    by_id: Dict[int, UserRecord]
    """User records keyed by user id."""

    by_username: Dict[str, int]
    """User ids keyed by lowercased username. Derived from ``by_id``."""

    current_user_id: Optional[int] = None
    """The authenticated user, if any."""

    is_updating: bool = False
    """Whether an account edit is in flight."""

    edit: Optional[EditRequest] = None
    """The in-flight edit. Only set while ``is_updating`` is ``True``."""


class AppState(NamedTuple):
    """Application-level state. Each field is a slice with its own reducer."""

    users: UsersState


class Action(NamedTuple):
    """Something that happened, to be folded into the state by a reducer."""

    type: str
    payload: Optional[Mapping[str, Any]] = None


def initial_state() -> UsersState:
    """An empty snapshot: no users, nobody logged in, nothing being edited."""
    return UsersState(by_id={}, by_username={})


# Helpers and private functions.


def to_dict(obj: tuple) -> dict:
    """
    Generate a dict representation of a NamedTuple instance.

    This just uses the built-in ``_asdict`` method on the instance, but also
    calls this on any child NamedTuple instances (recursively) so that the
    entire tree is cast to ``dict``.

    Parameters
    ----------
    obj : tuple
        A NamedTuple instance.

    Returns
    -------
    dict

    """
    if not hasattr(obj, '_asdict'):  # NamedTuple-generated classes have this.
        return {}
    return {key: _cast(value) for key, value in obj._asdict().items()}


def _cast(obj: Any) -> Any:
    if hasattr(obj, '_asdict'):
        return to_dict(obj)
    if isinstance(obj, Mapping):
        return {key: _cast(value) for key, value in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_cast(o) for o in obj]
    return obj


def _as_id(value: Any) -> Any:
    """JSON object keys are always strings; user ids are ints."""
    if isinstance(value, str) and value.isdigit():
        return int(value)
    return value


def users_state_from_dict(data: Mapping[str, Any]) -> UsersState:
    """
    Load a :class:`.UsersState` from its :func:`to_dict` representation.

    The data may have been through JSON, in which case the keys of
    ``by_id`` and the values of ``by_username`` are restored to ``int``.

    Parameters
    ----------
    data : dict

    Returns
    -------
    :class:`.UsersState`

    Raises
    ------
    :class:`.InvalidSnapshot`
        If ``data`` lacks the ``by_id`` or ``by_username`` mappings.

    """
    by_id = data.get('by_id')
    by_username = data.get('by_username')
    if not isinstance(by_id, Mapping) or not isinstance(by_username, Mapping):
        raise InvalidSnapshot('Expected by_id and by_username mappings')

    edit = data.get('edit')
    if isinstance(edit, Mapping):
        edit = EditRequest(error_handler_id=edit.get('error_handler_id'),
                           user_fields=edit.get('user_fields'),
                           user_id=_as_id(edit.get('user_id')))

    return UsersState(
        by_id={_as_id(key): dict(record) for key, record in by_id.items()},
        by_username={key: _as_id(value)
                     for key, value in by_username.items()},
        current_user_id=_as_id(data.get('current_user_id')),
        is_updating=bool(data.get('is_updating', False)),
        edit=edit
    )
