"""
Capture Client.

Interactive terminal front end for the transcription relay.
"""

import sys

from rich.console import Console
from rich.prompt import Prompt

from capture_client.config import load_config
from capture_client.controller import TranscriptionController
from capture_client.dependencies import get_controller
from speech_common import setup_logging

HELP_TEXT = """Commands:
  record          start recording from the microphone
  stop            stop recording and transcribe
  upload <path>   transcribe an audio file
  copy            copy the transcript to the clipboard
  download        save the transcript to a text file
  clear           clear the current transcription
  help            show this message
  quit            exit"""


def dispatch(controller: TranscriptionController, line: str, console: Console) -> bool:
    """
    Runs one command line against the controller.

    Returns:
        False when the user asked to quit.
    """
    command, _, argument = line.strip().partition(" ")
    command = command.lower()

    if command in ("quit", "exit"):
        if controller.is_capturing:
            controller.stop_capture()
        return False
    if command == "record":
        controller.start_capture()
    elif command == "stop":
        controller.stop_capture()
    elif command == "upload":
        if argument.strip():
            controller.select_file(argument.strip())
        else:
            console.print("Usage: upload <path>")
    elif command == "copy":
        controller.copy()
    elif command == "download":
        controller.download()
    elif command == "clear":
        controller.clear()
    elif command in ("help", ""):
        console.print(HELP_TEXT)
    else:
        console.print(f"Unknown command: {command}. Type 'help' for a list.")
    return True


def main():
    """Starts the interactive client."""
    config = load_config()
    setup_logging(config.log_level, stream=sys.stderr)

    console = Console()
    console.print(f"Speech to Text client, relay at {config.relay_url}")
    console.print(HELP_TEXT)

    controller = get_controller(config)
    controller.initialize()

    running = True
    while running:
        try:
            line = Prompt.ask(">", console=console, default="")
        except (EOFError, KeyboardInterrupt):
            line = "quit"
        running = dispatch(controller, line, console)


if __name__ == "__main__":
    main()
