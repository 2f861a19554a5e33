import logging
import re
import sys

import config

logger = logging.getLogger(__name__)

INTEGER_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)


def parse_int(text):
    """Parse a plain decimal integer from user text, returns None if it isn't one"""
    if not INTEGER_PATTERN.fullmatch(text):
        return None
    return int(text)


class ConsoleInput:
    def __init__(self, stdin=None, stdout=None, debug=None):
        """
        Line-oriented prompts on a pair of text streams.

        Every read method returns None when the input stream fails or is
        closed; callers must stop prompting when they see it.
        """
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.debug = config.DEBUG if debug is None else debug

    def say(self, message):
        """Write one line of output to the user"""
        self.stdout.write(f"{message}\n")
        self.stdout.flush()

    def read_line(self, prompt, require_non_empty=True):
        """Prompt for a line of text, re-prompting on blank input if required"""
        while True:
            self.stdout.write(f"{prompt} ")
            self.stdout.flush()

            # ValueError covers closed streams and undecodable bytes
            try:
                line = self.stdin.readline()
            except (OSError, ValueError, KeyboardInterrupt) as e:
                if self.debug:
                    logger.exception("Failed to read from input stream")
                else:
                    logger.debug(f"Failed to read from input stream: {e!r}")
                return None

            # readline() only returns an empty string at end of stream
            if line == "":
                logger.debug("Input stream closed")
                return None

            line = line.rstrip("\r\n")
            if not require_non_empty or line.strip():
                return line

            self.say("Please enter a valid string.")

    def read_int(self, prompt, require_positive=True, require_non_zero=True):
        """Prompt for an integer, re-prompting until it parses and meets the sign rules"""
        while True:
            text = self.read_line(prompt)
            if text is None:
                return None

            number = parse_int(text)
            if number is None:
                self.say("\nYou must enter a valid integer.")
                continue

            if (require_positive and number < 0) or (require_non_zero and number == 0):
                self.say(f"\nYou must enter a {self._describe_constraint(require_positive, require_non_zero)}.")
                continue

            return number

    @staticmethod
    def _describe_constraint(require_positive, require_non_zero):
        if require_positive and require_non_zero:
            return "non-zero integer that is positive"
        if require_non_zero:
            return "non-zero integer"
        return "positive integer"

    def read_selection(self, prompt, options):
        """Show a numbered list of options and return the one picked by index"""
        lines = [prompt]
        for index, option in enumerate(options, start=1):
            lines.append(f"{index}. {option.lower()}")
        lines.append("> ")
        full_prompt = "\n".join(lines)

        while True:
            number = self.read_int(full_prompt)
            if number is None:
                return None

            index = number - 1
            if 0 <= index < len(options):
                return options[index]

            self.say("\nPlease enter a valid selection index.")
