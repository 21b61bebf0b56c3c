#!/usr/bin/env python3
# PURPOSE: Command-line chat with the wealth planning assistant.
# CONTEXT: Runs the same DialogueManager as the Lambda handler, keeping the
#          conversation state in a local variable between turns.

import os
import sys

from wealthchat.dialogue import DialogueManager
from wealthchat.logging_setup import configure_logging

os.environ.setdefault("LOG_LEVEL", "WARNING")
configure_logging()

manager = DialogueManager()
result = manager.start()

print("WealthChat CLI - type your answer and press Enter. Ctrl+C to exit.")
print(result.reply)

while True:
    try:
        text = input("> ")
        result = manager.handle_turn_sync(result.state, text)
        print(result.reply)
    except (EOFError, KeyboardInterrupt):
        print("\nBye!")
        sys.exit(0)
