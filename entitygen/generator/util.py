"""Naming helpers shared by the emitters."""


def to_pascal_case(text: str) -> str:
    """Convert snake_case to PascalCase, keeping the case of other letters."""
    return "".join(part[:1].upper() + part[1:] for part in text.split("_") if part)


def doc_lines(text: str) -> list[str]:
    return [line.rstrip() for line in text.strip().splitlines()]


def docstring_lines(text: str) -> list[str]:
    """Lines of text escaped for use inside a triple quoted string."""
    return [line.replace("\\", "\\\\").replace('"', '\\"') for line in doc_lines(text)]
