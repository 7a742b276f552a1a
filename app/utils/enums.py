"""Closed enumerations and their display labels."""
import enum
from typing import Optional


class HolidayType(str, enum.Enum):
    NATIONAL = "national"
    LOCAL = "local"


class CalendarEventType(str, enum.Enum):
    HOLIDAY = "Holiday"
    BRIDGE_DAY = "BridgeDay"
    RECESS = "Recess"
    OPTIONAL_DAY = "OptionalDay"

    @classmethod
    def parse(cls, value) -> "CalendarEventType":
        """
        Parse an event type the way the calendar backend does:
        case-insensitive, unknown values fall back to HOLIDAY.
        Integer codes 1-4 are accepted as well.
        """
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower() if value is not None else ""
        return _EVENT_TYPE_ALIASES.get(text, cls.HOLIDAY)

    @property
    def label(self) -> str:
        return _EVENT_TYPE_LABELS[self]


_EVENT_TYPE_ALIASES = {
    "holiday": CalendarEventType.HOLIDAY,
    "1": CalendarEventType.HOLIDAY,
    "bridgeday": CalendarEventType.BRIDGE_DAY,
    "2": CalendarEventType.BRIDGE_DAY,
    "recess": CalendarEventType.RECESS,
    "3": CalendarEventType.RECESS,
    "optionalday": CalendarEventType.OPTIONAL_DAY,
    "4": CalendarEventType.OPTIONAL_DAY,
}

_EVENT_TYPE_LABELS = {
    CalendarEventType.HOLIDAY: "Feriado",
    CalendarEventType.BRIDGE_DAY: "Dia Ponte",
    CalendarEventType.RECESS: "Recesso",
    CalendarEventType.OPTIONAL_DAY: "Ponto Facultativo",
}


class EmployeeRole(str, enum.Enum):
    MANAGER = "MANAGER"
    COORDINATOR = "COORDINATOR"
    ANALYST = "ANALYST"
    CONSULTANT = "CONSULTANT"
    OTHER = "OTHER"

    @classmethod
    def parse(cls, value) -> "EmployeeRole":
        """
        Normalize any legacy role spelling into the enum.

        The dashboard and backend historically used "1", "Manager" and
        "Gerente" interchangeably for managers; gendered Portuguese titles
        ("Coordenadora", "Analista") are also accepted. Anything unknown
        becomes OTHER.
        """
        if isinstance(value, cls):
            return value
        if value is None:
            return cls.OTHER
        text = str(value).strip().lower()
        if not text:
            return cls.OTHER
        role = _ROLE_ALIASES.get(text)
        if role is not None:
            return role
        # Titles such as "Analista Contábil Sênior" carry the role as first word
        return _ROLE_ALIASES.get(text.split()[0], cls.OTHER)

    @property
    def label(self) -> str:
        return _ROLE_LABELS[self]

    @property
    def is_manager(self) -> bool:
        return self is EmployeeRole.MANAGER


_ROLE_ALIASES = {
    "1": EmployeeRole.MANAGER,
    "manager": EmployeeRole.MANAGER,
    "gerente": EmployeeRole.MANAGER,
    "2": EmployeeRole.COORDINATOR,
    "coordinator": EmployeeRole.COORDINATOR,
    "coordenador": EmployeeRole.COORDINATOR,
    "coordenadora": EmployeeRole.COORDINATOR,
    "3": EmployeeRole.ANALYST,
    "analyst": EmployeeRole.ANALYST,
    "analista": EmployeeRole.ANALYST,
    "4": EmployeeRole.CONSULTANT,
    "consultant": EmployeeRole.CONSULTANT,
    "consultor": EmployeeRole.CONSULTANT,
    "consultora": EmployeeRole.CONSULTANT,
    "other": EmployeeRole.OTHER,
}

_ROLE_LABELS = {
    EmployeeRole.MANAGER: "Gerente",
    EmployeeRole.COORDINATOR: "Coordenador(a)",
    EmployeeRole.ANALYST: "Analista",
    EmployeeRole.CONSULTANT: "Consultor(a)",
    EmployeeRole.OTHER: "Outro",
}


def role_label(role: Optional[object]) -> str:
    """Display label for any role value (enum or legacy string)"""
    return EmployeeRole.parse(role).label
