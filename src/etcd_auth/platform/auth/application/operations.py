"""Auth operation table.

Each operation pairs a request builder with a response translator. The
client runs every operation through the same validate, build, invoke,
bridge pipeline, so adding an RPC only means adding a row here.
"""

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Tuple

from ..core.exceptions import InvalidArgument
from ..core.value_objects import ByteSequence
from ..infrastructure import builders, translators

# (argument name, required type or None for a presence check only)
Argument = Tuple[str, Optional[type]]


@dataclass(frozen=True)
class AuthOperation:
    """One Auth service operation.

    ``name`` is also the stub method that issues the call.
    """

    name: str
    arguments: Tuple[Argument, ...]
    build_request: Callable[..., Any]
    translate_response: Callable[[Any], Any]

    def validate(self, values: Mapping[str, Any]) -> None:
        """Check that every argument is present and well typed.

        Raises:
            InvalidArgument: On the first missing or mistyped argument
        """
        for argument, expected in self.arguments:
            value = values.get(argument)
            if value is None:
                raise InvalidArgument.missing(argument, self.name)
            if expected is not None and not isinstance(value, expected):
                raise InvalidArgument.wrong_type(argument, expected, value, self.name)


_USER = ("user", ByteSequence)
_PASSWORD = ("password", ByteSequence)
_ROLE = ("role", ByteSequence)
_KEY = ("key", ByteSequence)
_RANGE_END = ("range_end", ByteSequence)
# Unknown kinds are translated to UNRECOGNIZED, so only presence is checked
_KIND = ("kind", None)


AUTH_ENABLE = AuthOperation(
    "auth_enable", (),
    builders.build_auth_enable_request, translators.to_auth_enable_response,
)
AUTH_DISABLE = AuthOperation(
    "auth_disable", (),
    builders.build_auth_disable_request, translators.to_auth_disable_response,
)
AUTHENTICATE = AuthOperation(
    "authenticate", (_USER, _PASSWORD),
    builders.build_authenticate_request, translators.to_authenticate_response,
)
USER_ADD = AuthOperation(
    "user_add", (_USER, _PASSWORD),
    builders.build_user_add_request, translators.to_user_add_response,
)
USER_DELETE = AuthOperation(
    "user_delete", (_USER,),
    builders.build_user_delete_request, translators.to_user_delete_response,
)
USER_CHANGE_PASSWORD = AuthOperation(
    "user_change_password", (_USER, _PASSWORD),
    builders.build_user_change_password_request, translators.to_user_change_password_response,
)
USER_GET = AuthOperation(
    "user_get", (_USER,),
    builders.build_user_get_request, translators.to_user_get_response,
)
USER_LIST = AuthOperation(
    "user_list", (),
    builders.build_user_list_request, translators.to_user_list_response,
)
USER_GRANT_ROLE = AuthOperation(
    "user_grant_role", (_USER, _ROLE),
    builders.build_user_grant_role_request, translators.to_user_grant_role_response,
)
USER_REVOKE_ROLE = AuthOperation(
    "user_revoke_role", (_USER, _ROLE),
    builders.build_user_revoke_role_request, translators.to_user_revoke_role_response,
)
ROLE_ADD = AuthOperation(
    "role_add", (_ROLE,),
    builders.build_role_add_request, translators.to_role_add_response,
)
ROLE_GRANT_PERMISSION = AuthOperation(
    "role_grant_permission", (_ROLE, _KEY, _RANGE_END, _KIND),
    builders.build_role_grant_permission_request, translators.to_role_grant_permission_response,
)
ROLE_GET = AuthOperation(
    "role_get", (_ROLE,),
    builders.build_role_get_request, translators.to_role_get_response,
)
ROLE_LIST = AuthOperation(
    "role_list", (),
    builders.build_role_list_request, translators.to_role_list_response,
)
ROLE_REVOKE_PERMISSION = AuthOperation(
    "role_revoke_permission", (_ROLE, _KEY, _RANGE_END),
    builders.build_role_revoke_permission_request, translators.to_role_revoke_permission_response,
)
ROLE_DELETE = AuthOperation(
    "role_delete", (_ROLE,),
    builders.build_role_delete_request, translators.to_role_delete_response,
)
