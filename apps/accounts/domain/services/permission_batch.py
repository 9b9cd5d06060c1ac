"""
Permission batch decoding.

The admin permission matrix posts every role's permission set at once, as a
JSON array of ``{"id": <role id>, "permissions": [<key>, ...]}`` objects.
Decoding is all or nothing: one bad entry rejects the whole batch.
"""
import json
from typing import Any, List, Tuple

from shared.application import UseCaseResult
from ..value_objects.permission_assignment import PermissionAssignment

MALFORMED_INPUT = "MALFORMED_INPUT"


def _decode_entry(index: int, entry: Any) -> PermissionAssignment:
    if not isinstance(entry, dict):
        raise ValueError(f"entry {index} is not an object")

    role_id = entry.get('id')
    if not isinstance(role_id, str) or not role_id.strip():
        raise ValueError(f"entry {index} has no role id")

    permissions = entry.get('permissions')
    if not isinstance(permissions, list):
        raise ValueError(f"entry {index} permissions is not a list")
    if not all(isinstance(p, str) for p in permissions):
        raise ValueError(f"entry {index} permissions must be strings")

    return PermissionAssignment(role_id=role_id.strip(), permissions=tuple(permissions))


def decode_permission_batch(raw: Any) -> UseCaseResult[Tuple[PermissionAssignment, ...]]:
    """
    Decode a raw permission batch.

    Args:
        raw: JSON text (str or bytes) or an already parsed list.

    Returns:
        UseCaseResult: ``ok`` with the assignments in input order, or ``fail``
        with error code MALFORMED_INPUT.
    """
    if isinstance(raw, (bytes, bytearray)):
        try:
            raw = raw.decode('utf-8')
        except UnicodeDecodeError:
            return UseCaseResult.fail("payload is not valid UTF-8", MALFORMED_INPUT)

    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except json.JSONDecodeError as e:
            return UseCaseResult.fail(f"payload is not valid JSON ({e.msg})", MALFORMED_INPUT)

    if not isinstance(raw, list):
        return UseCaseResult.fail("payload must be a list of role entries", MALFORMED_INPUT)

    assignments: List[PermissionAssignment] = []
    for index, entry in enumerate(raw):
        try:
            assignments.append(_decode_entry(index, entry))
        except ValueError as e:
            return UseCaseResult.fail(str(e), MALFORMED_INPUT)

    return UseCaseResult.ok(tuple(assignments))
