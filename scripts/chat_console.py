"""
Console for the Mumbai Civic Connect chat assistant.

Usage:
  - One message: python scripts/chat_console.py "take me to the report page"
  - Interactive: python scripts/chat_console.py   (empty line or Ctrl-D exits)
  - Show intents: python scripts/chat_console.py --show-intent "status of my query"

Behavior:
  - Routes each message through the same IntentRouter the /chat endpoint uses.
  - No network calls; the assistant is fully local.
"""

import argparse
import sys

from civic_connect.services.chatbot import IntentRouter


def print_turn(router: IntentRouter, message: str, show_intent: bool = False):
    turn = router.respond(message)
    if show_intent:
        print(f"[{turn.intent.value}]")
    print(turn.reply)
    print()


def run_interactive(router: IntentRouter, show_intent: bool = False):
    print("Mumbai Civic Connect assistant. Empty line to quit.")
    for line in sys.stdin:
        message = line.rstrip("\n")
        if not message.strip():
            break
        print_turn(router, message, show_intent)


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("message", nargs="*", help="Message to send; omit for interactive mode")
    parser.add_argument("--show-intent", action="store_true", help="Print the detected intent before each reply")
    parser.add_argument("--site-url", default=None, help="Override SITE_BASE_URL for generated links")
    args = parser.parse_args()

    router = IntentRouter(site_base_url=args.site_url)

    if args.message:
        print_turn(router, " ".join(args.message), args.show_intent)
    else:
        run_interactive(router, args.show_intent)


if __name__ == "__main__":
    main()
