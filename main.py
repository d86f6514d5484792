import logging
import signal
import sys

from rich.console import Console
from rich.markup import escape

from chat_session import ChatSession
from display import BOT_NAME
from utils import CONFIG, setup_logging, load_config, pause

console = Console()


def signal_handler(sig, frame):
    console.print("\n[yellow]Session interrupted by user. Shutting down safely...[/yellow]")
    sys.exit(0)


def run(config=None):
    """Runs one chat session; unexpected errors are reported, never fatal"""
    settings = config or dict(CONFIG)
    try:
        settings = config or load_config()
        setup_logging(settings["log_file"], settings["log_level"])
        ChatSession(console=console, config=settings).run()
    except Exception as e:
        logging.exception("Unexpected error")
        console.print(f"[bold red]Unexpected error: {escape(str(e))}[/bold red]")
    finally:
        console.print(f"[cyan]Thank you for using {BOT_NAME}![/cyan]")
        pause(settings["exit_delay"])
    return 0


def main():
    signal.signal(signal.SIGINT, signal_handler)
    sys.exit(run())


if __name__ == "__main__":
    main()
