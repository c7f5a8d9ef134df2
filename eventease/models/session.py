"""
User session model and its typed data bag
"""

import uuid
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field

from eventease.core.errors import SessionDataTypeError, UnsupportedSessionValueError

class ValueKind(str, Enum):
    """Kinds of value the session data bag can hold"""
    STR = "str"
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"
    DATETIME = "datetime"
    LIST = "list"
    DICT = "dict"

# bool must be tested before int since bool subclasses int
_KIND_BY_TYPE = [
    (bool, ValueKind.BOOL),
    (int, ValueKind.INT),
    (float, ValueKind.FLOAT),
    (str, ValueKind.STR),
    (datetime, ValueKind.DATETIME),
    (list, ValueKind.LIST),
    (dict, ValueKind.DICT),
]

def kind_of_type(value_type: type) -> ValueKind:
    """Map a Python type to its value kind"""
    for candidate, kind in _KIND_BY_TYPE:
        if value_type is candidate:
            return kind
    raise UnsupportedSessionValueError(value_type)

class SessionValue(BaseModel):
    """A session data value tagged with its kind"""
    kind: ValueKind
    value: Any

    @classmethod
    def wrap(cls, value: Any) -> "SessionValue":
        for candidate, kind in _KIND_BY_TYPE:
            if isinstance(value, candidate):
                return cls(kind=kind, value=value)
        raise UnsupportedSessionValueError(type(value))

    def unwrap(self, key: str, expected_type: Optional[type] = None) -> Any:
        """Return the value, checking it against expected_type when given"""
        if expected_type is None:
            return self.value
        expected = kind_of_type(expected_type)
        if expected is not self.kind:
            raise SessionDataTypeError(key, expected.value, self.kind.value)
        return self.value

class UserSession(BaseModel):
    session_id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    user_email: str = ""
    user_name: str = ""
    session_start_time: datetime = Field(default_factory=datetime.now)
    last_activity_time: datetime = Field(default_factory=datetime.now)
    is_active: bool = True
    session_data: Dict[str, SessionValue] = Field(default_factory=dict)
    viewed_events: List[int] = Field(default_factory=list)
    registered_events: List[int] = Field(default_factory=list)
