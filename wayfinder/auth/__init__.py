"""Admin and department authentication."""

from wayfinder.auth.admin import check_admin_password, require_admin
from wayfinder.auth.department import (
    DepartmentToken,
    DepartmentTokenError,
    create_department_token,
    decode_department_token,
    generate_department_id,
    generate_password,
    hash_password,
    require_department,
    require_department_access,
    verify_password,
)

__all__ = [
    "DepartmentToken",
    "DepartmentTokenError",
    "check_admin_password",
    "create_department_token",
    "decode_department_token",
    "generate_department_id",
    "generate_password",
    "hash_password",
    "require_admin",
    "require_department",
    "require_department_access",
    "verify_password",
]
