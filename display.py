from rich.markup import escape
from rich.panel import Panel
from rich import box

from chatbot_security import KEYWORDS

BOT_NAME = "CyberSecurity Chatbot"


def options_line():
    return " | ".join(KEYWORDS)


def display_welcome(console):
    console.print()
    console.print(Panel(f"[bold cyan]Welcome to {BOT_NAME} - Your Security Assistant[/bold cyan]",
                        box=box.DOUBLE, border_style="cyan", expand=False))
    console.print(f"Greetings! I'm {BOT_NAME}, your cybersecurity helper. How can I assist you?")


def show_options(console, name):
    console.rule(f"[yellow]Chat with {escape(name)}[/yellow]", style="yellow")
    console.print(f"[magenta]Options: {options_line()}[/magenta]")


def show_reply(console, reply):
    console.print(f"[bold green]{BOT_NAME}:[/bold green] {escape(reply)}")


def show_unrecognized(console, name):
    console.print(f"[red]Sorry {escape(name)}, I didn't recognize any keywords. Please include one of these:[/red]")
    console.print(f"[magenta]{options_line()}[/magenta]")


def show_farewell(console, name):
    console.rule(style="cyan")
    console.print(f"[cyan]Thanks for the chat, {escape(name)}! Stay vigilant![/cyan]")
