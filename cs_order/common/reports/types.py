from typing import NewType

MessageCode = NewType("MessageCode", str)
SeverityLevel = NewType("SeverityLevel", str)
