"""CSV line tokenizer."""

QUOTE = '"'
SEPARATOR = ","


def split_line(line: str) -> list[str]:
    """
    Split one CSV line into raw fields.

    Quotes toggle an "inside quotes" state and are never copied into the
    output; a comma inside quotes is literal content. Doubled quotes are not
    treated as escapes. The trailing field is always emitted, so the result
    has at least one element.
    """
    fields = []
    current = []
    inside_quotes = False

    for char in line:
        if char == QUOTE:
            inside_quotes = not inside_quotes
        elif char == SEPARATOR and not inside_quotes:
            fields.append("".join(current))
            current = []
        else:
            current.append(char)

    fields.append("".join(current))
    return fields
