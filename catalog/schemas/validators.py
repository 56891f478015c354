def empty_str_to_none(value: str):
    return None if value == '' else value
