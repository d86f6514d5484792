# chatbot_security.py

import re
from collections import namedtuple

from utils import log_action

EXIT_KEYWORD = "exit"

RESPONSES = {
    "phishing": "{name}, phishing is when attackers trick you into giving sensitive info. Watch for suspicious emails!",
    "password": "For strong passwords, {name}, use 12+ characters, mix cases, numbers, and symbols!",
    "firewall": "A firewall protects your network, {name}. It filters incoming and outgoing traffic.",
    EXIT_KEYWORD: "Stay safe out there, {name}! Signing off!",
}

# Extraction and lookup share one keyword set
KEYWORDS = tuple(RESPONSES)

TOKEN_SEPARATORS = re.compile(r"[\s,]+")

HistoryEntry = namedtuple("HistoryEntry", ["question", "answer"])


def extract_keywords(text):
    """Returns the known keywords found in ``text``, without repeats, in first-seen order."""
    found = []
    for token in TOKEN_SEPARATORS.split(text.lower()):
        if token in RESPONSES and token not in found:
            found.append(token)
    return found


class SecurityChatbot:
    def __init__(self, name):
        self.name = name
        self.history = []

    def answer(self, keyword):
        return RESPONSES[keyword].format(name=self.name)

    def respond(self, keywords):
        """Composes the reply for the matched keywords.

        A single keyword gets its own answer; several are listed one bullet
        per keyword under a heading. Every exchange except one containing
        ``exit`` is appended to the history.
        """
        if not keywords:
            raise ValueError("at least one keyword is required to compose a response")

        if len(keywords) == 1:
            response = self.answer(keywords[0])
        else:
            lines = [f"{self.name}, here's what I know:"]
            lines.extend(f"- {self.answer(keyword)}" for keyword in keywords)
            response = "\n".join(lines)

        if EXIT_KEYWORD not in keywords:
            entry = HistoryEntry(question=", ".join(keywords), answer=response)
            self.history.append(entry)
            log_action(f"Answered [{entry.question}] for {self.name}")

        return response
