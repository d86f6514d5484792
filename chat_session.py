from rich.console import Console
from rich.markup import escape

import display
from chatbot_security import EXIT_KEYWORD, SecurityChatbot, extract_keywords
from utils import CONFIG, log_action, pause
from validation import get_valid_input, process_name

AWAITING_INPUT = "AWAITING_INPUT"
DONE = "DONE"

FIRST_PROMPT = "How can I help you today, {name}?"
NEXT_PROMPT = "If you have further questions, feel free to ask and if not, type exit"


class ChatSession:
    """One user's conversation, from the welcome banner to the farewell.

    ``read`` is called with the rendered input prompt and must return the
    line typed by the user; it defaults to ``console.input``.
    """

    def __init__(self, console=None, read=None, config=None):
        self.console = console or Console()
        self.read = read or self.console.input
        self.config = config or dict(CONFIG)
        self.state = AWAITING_INPUT
        self.bot = None
        self.turn = 0

    @property
    def name(self):
        return self.bot.name if self.bot else "User"

    @property
    def history(self):
        return self.bot.history if self.bot else []

    def ask(self, prompt):
        return get_valid_input(self.console, self.read, prompt, self.name, self.config["pause"])

    def ask_keywords(self, prompt):
        """Re-prompts until the input holds at least one known keyword"""
        while True:
            text = self.ask(prompt)
            keywords = extract_keywords(text)
            if keywords:
                return keywords
            log_action(f"No keyword recognized in input from {self.name}")
            display.show_unrecognized(self.console, self.name)
            pause(self.config["pause"])

    def start(self):
        display.display_welcome(self.console)
        self.bot = SecurityChatbot(process_name(self.ask("What's your name?")))
        log_action(f"Session started for {self.name}")
        self.console.print(f"Great to meet you, {escape(self.name)}! Let's talk security.")
        pause(self.config["pause"])
        display.show_options(self.console, self.name)

    def handle(self, keywords):
        reply = self.bot.respond(keywords)
        display.show_reply(self.console, reply)

        if EXIT_KEYWORD in keywords:
            display.show_farewell(self.console, self.name)
            log_action(f"Session ended for {self.name} after {self.turn} turn(s)")
            self.state = DONE
            return reply

        self.turn += 1
        pause(self.config["pause"])
        display.show_options(self.console, self.name)
        return reply

    def run(self):
        self.start()
        prompt = FIRST_PROMPT.format(name=self.name)
        while self.state == AWAITING_INPUT:
            self.handle(self.ask_keywords(prompt))
            prompt = NEXT_PROMPT
        return self.history
