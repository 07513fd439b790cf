"""Composite day, month, and year date entry."""

from simpledate.model.date_field import SimpleDateField
from simpledate.model.subfields import FieldOrder, MessageCast, MessageType, Slot

__all__ = ["FieldOrder", "MessageCast", "MessageType", "SimpleDateField", "Slot"]
