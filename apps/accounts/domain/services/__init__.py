# Domain services
from .permission_batch import MALFORMED_INPUT, decode_permission_batch

__all__ = ['MALFORMED_INPUT', 'decode_permission_batch']
