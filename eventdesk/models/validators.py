from datetime import date, datetime, timezone


def parse_event_date(value):
    """
    Приводит дату мероприятия к UTC.

    Принимает ISO дату-время или просто дату YYYY-MM-DD (полночь).
    Значение без смещения считается UTC, значение со смещением
    переводится в UTC без потери момента времени.
    """
    if isinstance(value, str):
        value = datetime.fromisoformat(value.replace("Z", "+00:00"))
    elif isinstance(value, date) and not isinstance(value, datetime):
        value = datetime.combine(value, datetime.min.time())

    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    return value


def reject_null(value):
    """Поле можно не передавать при обновлении, но нельзя обнулить"""
    if value is None:
        raise ValueError("Field cannot be null")
    return value
