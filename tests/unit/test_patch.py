import pytest

from guacamole_client.utils import patch


@pytest.mark.parametrize(
    "builder,op,identifier,path",
    [
        (patch.add_connection_permission, "add", "5", "/connectionPermissions/5"),
        (patch.remove_connection_permission, "remove", "5", "/connectionPermissions/5"),
        (patch.add_connection_group_permission, "add", "7", "/connectionGroupPermissions/7"),
        (patch.remove_connection_group_permission, "remove", "7", "/connectionGroupPermissions/7"),
        (patch.add_sharing_profile_permission, "add", "3", "/sharingProfilePermissions/3"),
        (patch.remove_sharing_profile_permission, "remove", "3", "/sharingProfilePermissions/3"),
        (patch.add_user_permission, "add", "bob", "/userPermissions/bob"),
        (patch.remove_user_permission, "remove", "bob", "/userPermissions/bob"),
        (patch.add_user_group_permission, "add", "ops", "/userGroupPermissions/ops"),
        (patch.remove_user_group_permission, "remove", "ops", "/userGroupPermissions/ops"),
    ],
)
def test_object_permission_builders(builder, op, identifier, path):
    operation = builder(identifier, "READ")

    assert operation.op == op
    assert operation.path == path
    assert operation.value == "READ"


@pytest.mark.parametrize(
    "builder,op",
    [(patch.add_system_permission, "add"), (patch.remove_system_permission, "remove")],
)
def test_system_permission_builders(builder, op):
    operation = builder("CREATE_CONNECTION")

    assert operation.model_dump() == {"op": op, "path": "/systemPermissions", "value": "CREATE_CONNECTION"}


@pytest.mark.parametrize(
    "builder,op",
    [(patch.add_group_membership, "add"), (patch.remove_group_membership, "remove")],
)
def test_membership_builders(builder, op):
    operation = builder("alice")

    assert operation.model_dump() == {"op": op, "path": "/", "value": "alice"}


def test_identifier_is_used_verbatim_in_path():
    # The API expects the raw identifier inside the patch path.
    operation = patch.add_user_permission("bob@example.com", "UPDATE")
    assert operation.path == "/userPermissions/bob@example.com"
