from rich.markup import escape

from utils import pause


class InputValidationError(ValueError):
    pass


def require_text(text):
    """Strips the input and rejects it when nothing is left"""
    text = (text or "").strip()
    if not text:
        raise InputValidationError("Please enter a valid response!")
    return text


def process_name(name):
    """Normalizes a display name: first letter upper case, the rest lower case"""
    name = require_text(name)
    return name[0].upper() + name[1:].lower()


def get_valid_input(console, read, prompt, name, delay=0):
    """Asks until the user types something that is not blank"""
    while True:
        try:
            console.print(prompt, markup=False)
            return require_text(read(f"[cyan]{escape(name)}: [/cyan]"))
        except InputValidationError as e:
            console.print(f"[red]Error: {e}[/red]")
            pause(delay)
