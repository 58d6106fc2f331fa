from .value_type import ValueType, TYPE_NAMES
from .variable import Variable
from .error_log import ErrorLog

__all__ = ['ValueType', 'TYPE_NAMES', 'Variable', 'ErrorLog']
