from datetime import date, datetime, time


def cell_to_text(value: object) -> str:
    """Render a spreadsheet cell the way it reads in the sheet."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, datetime):
        return value.strftime("%Y-%m-%d %H:%M:%S")
    if isinstance(value, (date, time)):
        return value.isoformat()
    return str(value)


def header_names(cells: list[object]) -> list[str]:
    """Turn header cells into unique column names; blanks get positional names."""
    names: list[str] = []
    for index, cell in enumerate(cells):
        name = cell_to_text(cell).strip() or f"__EMPTY_{index}"
        while name in names:
            name = f"{name}_{index}"
        names.append(name)
    return names
