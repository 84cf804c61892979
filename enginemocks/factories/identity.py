"""Factories for users, groups and authorizations."""

from enginemocks import catalog
from enginemocks.core.models import (
    ANY,
    Authentication,
    Authorization,
    AuthorizationType,
    Group,
    Permission,
    User,
)


def create_mock_group() -> Group:
    return Group(
        id=catalog.EXAMPLE_GROUP_ID,
        name=catalog.EXAMPLE_GROUP_NAME,
        type=catalog.EXAMPLE_GROUP_TYPE,
    )


def create_mock_group_update() -> Group:
    """The example group after a rename; the update carries no type."""
    return Group(id=catalog.EXAMPLE_GROUP_ID, name=catalog.EXAMPLE_GROUP_NAME_UPDATE)


def create_mock_groups() -> list[Group]:
    return [create_mock_group()]


def create_mock_user() -> User:
    return User(
        id=catalog.EXAMPLE_USER_ID,
        first_name=catalog.EXAMPLE_USER_FIRST_NAME,
        last_name=catalog.EXAMPLE_USER_LAST_NAME,
        email=catalog.EXAMPLE_USER_EMAIL,
        password=catalog.EXAMPLE_USER_PASSWORD,
    )


def create_mock_user_update() -> User:
    return User(
        id=catalog.EXAMPLE_USER_ID,
        first_name=catalog.EXAMPLE_USER_FIRST_NAME_UPDATE,
        last_name=catalog.EXAMPLE_USER_LAST_NAME_UPDATE,
        email=catalog.EXAMPLE_USER_EMAIL_UPDATE,
        password=catalog.EXAMPLE_USER_PASSWORD,
    )


def create_mock_users() -> list[User]:
    return [create_mock_user()]


def create_mock_authentication() -> Authentication:
    return Authentication(user_id=catalog.EXAMPLE_USER_ID)


# ============================================================================
# Authorizations
# ============================================================================


def _authorization(
    authorization_type: AuthorizationType, user_id: str, permissions: tuple[Permission, ...]
) -> Authorization:
    return Authorization(
        id=catalog.EXAMPLE_AUTHORIZATION_ID,
        authorization_type=authorization_type,
        user_id=user_id,
        resource_type=catalog.EXAMPLE_RESOURCE_TYPE_ID,
        resource_id=catalog.EXAMPLE_RESOURCE_ID,
        permissions=permissions,
    )


def create_mock_global_authorization() -> Authorization:
    """Global authorizations apply to every user."""
    return _authorization(
        AuthorizationType.GLOBAL, ANY, catalog.EXAMPLE_GRANT_PERMISSION_VALUES
    )


def create_mock_grant_authorization() -> Authorization:
    return _authorization(
        AuthorizationType.GRANT, catalog.EXAMPLE_USER_ID, catalog.EXAMPLE_GRANT_PERMISSION_VALUES
    )


def create_mock_revoke_authorization() -> Authorization:
    return _authorization(
        AuthorizationType.REVOKE, catalog.EXAMPLE_USER_ID, catalog.EXAMPLE_REVOKE_PERMISSION_VALUES
    )


def create_mock_authorizations() -> list[Authorization]:
    """One authorization of each type: global, grant, revoke."""
    return [
        create_mock_global_authorization(),
        create_mock_grant_authorization(),
        create_mock_revoke_authorization(),
    ]


def create_mock_global_authorizations() -> list[Authorization]:
    return [create_mock_global_authorization()]


def create_mock_grant_authorizations() -> list[Authorization]:
    return [create_mock_grant_authorization()]


def create_mock_revoke_authorizations() -> list[Authorization]:
    return [create_mock_revoke_authorization()]
