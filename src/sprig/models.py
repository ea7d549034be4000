from pydantic import BaseModel

__all__ = ["Entity", "Record", "HandleRecord", "Element"]


class Entity(BaseModel):
    """
    Any of the plain data types passed between sprig's components.
    Not used as the base model for the node wrappers.
    """


class Record(Entity, frozen=True):
    """
    An immutable entity. Two records are equal when all their fields are equal.
    """


class HandleRecord(Record, arbitrary_types_allowed=True):
    """
    An immutable record that carries lxml handles, which pydantic can store but not
    validate.
    """


class Element(Entity, frozen=True, arbitrary_types_allowed=True):
    """
    Base model for Leaf and Bunch, the two node wrappers.
    """
